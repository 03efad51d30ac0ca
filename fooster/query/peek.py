import enum


__all__ = ['PeekState', 'DoublePeek']


class PeekState(enum.Enum):
    EMPTY = 0
    ONE = 1
    TWO = 2


class DoublePeek:
    def __init__(self, iterable):
        self.iterator = iter(iterable)

        # at most two items looked at but not yet consumed
        self.cache = []
        self.state = PeekState.EMPTY

        # replay the first cached item on the next peek
        self.unpeek = False

    def __iter__(self):
        return self

    def __next__(self):
        if self.state is PeekState.EMPTY:
            return next(self.iterator)

        item = self.cache.pop(0)

        if self.state is PeekState.TWO:
            self.state = PeekState.ONE
        else:
            self.state = PeekState.EMPTY

        return item

    def peek(self):
        if self.unpeek and self.state is not PeekState.EMPTY:
            self.unpeek = False
            return self.cache[0]

        self.unpeek = False

        # lookahead is capped at two items
        if self.state is PeekState.TWO:
            return None

        try:
            item = next(self.iterator)
        except StopIteration:
            return None

        self.cache.append(item)

        if self.state is PeekState.ONE:
            self.state = PeekState.TWO
        else:
            self.state = PeekState.ONE

        return item
