from .errors import EmptyStackError


class TagStack:
    """Names of the currently open elements, innermost last."""

    __slots__ = ("_names",)

    def __init__(self):
        self._names = []

    def push(self, name):
        self._names.append(name)

    def pop(self):
        if not self._names:
            raise EmptyStackError("pop from empty tag stack")
        return self._names.pop()

    def peek(self):
        # "" stands for "no enclosing element"
        return self._names[-1] if self._names else ""

    def depth(self):
        return len(self._names)

    def __len__(self):
        return len(self._names)

    def __iter__(self):
        return iter(self._names)

    def __repr__(self):
        return f"TagStack({self._names!r})"
