class Tag:
    __slots__ = ("kind", "name", "self_closing")

    START = 0
    END = 1

    def __init__(self, kind, name, self_closing=False):
        self.kind = kind
        self.name = name
        self.self_closing = bool(self_closing)

    def __repr__(self):
        closing = " /" if self.self_closing else ""
        kind_str = "start" if self.kind == self.START else "end"
        return f"<{kind_str}:{self.name}{closing}>"


class CharacterTokens:
    __slots__ = ("data",)

    def __init__(self, data):
        self.data = data

    def __repr__(self):
        return f"<text:{self.data!r}>"


class CommentToken:
    __slots__ = ("data",)

    def __init__(self, data):
        self.data = data

    def __repr__(self):
        return f"<comment:{self.data!r}>"


class DoctypeToken:
    __slots__ = ("name",)

    def __init__(self, name=None):
        self.name = name

    def __repr__(self):
        return f"<doctype:{self.name or ''}>"


class EOFToken:
    __slots__ = ()

    def __repr__(self):
        return "<eof>"


class ParseError:
    """A lexer failure other than ordinary end of input.

    Emitted by the tokenizer as the last token of a run that could not be
    completed (undecodable bytes, a token larger than the configured buffer,
    markup the lexer refused).
    """

    __slots__ = ("code", "column", "line", "message")

    def __init__(self, code, line=None, column=None, message=None):
        self.code = code
        self.line = line
        self.column = column
        self.message = message or code

    def __repr__(self):
        if self.line is not None and self.column is not None:
            return f"ParseError({self.code!r}, line={self.line}, column={self.column})"
        return f"ParseError({self.code!r})"

    def __str__(self):
        location = f"({self.line},{self.column}): " if self.line is not None and self.column is not None else ""
        if self.message != self.code:
            return f"{location}{self.code} - {self.message}"
        return f"{location}{self.code}"
