import logging
import string
import sys

from .peek import DoublePeek


# export everything
__all__ = ['faithful', 'extended_queries', 'query_encoding', 'mklog', 'unescape', 'parse_query', 'parse_extended_query', 'QueryValue', 'Str', 'Arr', 'Obj', 'default_log']


# module details
__version__ = '0.1.0'


# parser behavior
faithful = True
extended_queries = False
query_encoding = 'iso-8859-1'


# helper functions
def mklog(name=None):
    if name:
        log = logging.getLogger(name)
    else:
        log = logging.getLogger('query')

    handler = logging.StreamHandler(sys.stderr)
    log.addHandler(handler)
    log.setLevel(logging.INFO)

    return log


def resolve_faithful(override):
    if override is None:
        return faithful

    return override


def is_text(segment):
    # lone surrogates cannot be encoded
    try:
        segment.encode('utf-8')
    except UnicodeEncodeError:
        return False

    return True


def unescape(value):
    ret = []

    peekable = DoublePeek(value)

    for val in peekable:
        if val != '%':
            ret.append(val)
            continue

        # give the outer loop a chance to see these characters again if this is not an escape
        peekable.unpeek = True

        hi = peekable.peek()
        if hi is None:
            ret.append('%')
            continue

        lo = peekable.peek()
        if lo is None:
            ret.append('%')
            continue

        if hi not in string.hexdigits or lo not in string.hexdigits:
            ret.append('%')
            continue

        ret.append(chr(int(hi, 16) * 16 + int(lo, 16)))

        # eat the two hex digits
        next(peekable)
        next(peekable)

    return ''.join(ret)


def split_query(query, strict, log):
    for tok in query.split('&'):
        if strict and not tok:
            continue

        name, sep, val = tok.partition('=')

        if not sep:
            yield tok, None
            continue

        if strict and not name:
            log.debug('Dropping query token with empty name: ' + repr(tok))
            continue

        yield name, val


def parse_query(query, *, faithful=None, log=None):
    faithful = resolve_faithful(faithful)
    if log is None:
        log = default_log

    ret = {}

    for name, val in split_query(query, faithful, log):
        if val is None:
            ret[unescape(name)] = ''
        else:
            ret[unescape(name)] = unescape(val)

    return ret


class QueryValue:
    __hash__ = None

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, QueryValue):
            return NotImplemented

        return type(self) is type(other) and self.value == other.value

    def __repr__(self):
        return type(self).__name__ + '(' + repr(self.value) + ')'


class Str(QueryValue):
    def __init__(self, value=''):
        super().__init__(value)


class Arr(QueryValue):
    def __init__(self, value=None):
        super().__init__(list(value) if value is not None else [])

    def append(self, item):
        self.value.append(item)


class Obj(QueryValue):
    def __init__(self, value=None):
        super().__init__(dict(value) if value is not None else {})

    def set(self, key, item):
        self.value[key] = item


def parse_extended_query(query, *, faithful=None, log=None):
    faithful = resolve_faithful(faithful)
    if log is None:
        log = default_log

    ret = {}

    for name, val in split_query(query, faithful, log):
        if val is None:
            ret[unescape(name)] = Str('')
            continue

        # value decoding does not depend on the shape of the name
        val = unescape(val)

        if name.endswith(']'):
            idx = name.rfind('[')

            if idx >= 0:
                outside = name[:idx]
                inside = name[idx + 1:-1]

                if not is_text(outside) or not is_text(inside):
                    log.debug('Dropping query token with invalid bracket key: ' + repr(name))
                    continue

                if inside:
                    entry = ret.setdefault(outside, Obj())

                    if isinstance(entry, Obj):
                        entry.set(inside, val)
                    else:
                        log.debug('Dropping object query token for non-object key: ' + repr(outside))
                else:
                    entry = ret.setdefault(outside, Arr())

                    if isinstance(entry, Arr):
                        entry.append(val)
                    else:
                        log.debug('Dropping array query token for non-array key: ' + repr(outside))

                continue

        ret[unescape(name)] = Str(val)

    return ret


default_log = mklog('query')
