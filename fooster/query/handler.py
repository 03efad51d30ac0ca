from . import query


__all__ = ['regex', 'QueryMixIn', 'new']


regex = r'(?:\?(?P<query>[\w&= !"#$%\'()*+,./:;<>?@[\\\]^`{|}~-]*))?'


class QueryMixIn:
    querystr = None
    extended = None

    def respond(self):
        if self.querystr is None and 'query' in self.groups:
            self.querystr = self.groups['query']

        if self.querystr is not None:
            querystr = self.querystr
            if isinstance(querystr, bytes):
                querystr = querystr.decode(query.query_encoding)

            if self.extended is None:
                extended = query.extended_queries
            else:
                extended = self.extended

            if extended:
                self.request.query = query.parse_extended_query(querystr)
            else:
                self.request.query = query.parse_query(querystr)
        else:
            self.request.query = None

        return super().respond()


def new(base, handler):
    return {base + regex: handler}
