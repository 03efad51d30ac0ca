# module details
from .query import __version__  # noqa: F401

# parser behavior
from .query import faithful, extended_queries, query_encoding

# functions
from .query import mklog, unescape, parse_query, parse_extended_query

# classes
from .query import QueryValue, Str, Arr, Obj
from .peek import PeekState, DoublePeek

# export everything
__all__ = ['faithful', 'extended_queries', 'query_encoding', 'mklog', 'unescape', 'parse_query', 'parse_extended_query', 'QueryValue', 'Str', 'Arr', 'Obj', 'PeekState', 'DoublePeek']
