"""Errors raised while walking the token stream.

Every error stops the current conversion at the token that caused it. None
of them carry partial output.
"""


class TextParseError(Exception):
    """Base class for all well-formedness and tokenizer failures."""


class UnterminatedTagError(TextParseError):
    def __init__(self, tag):
        self.tag = tag
        super().__init__(f"Unterminated tag: <{tag}>")


class StrayEndTagError(TextParseError):
    def __init__(self, tag):
        self.tag = tag
        super().__init__(f"End tag without start: </{tag}>")


class TagMismatchError(TextParseError):
    def __init__(self, expected, got):
        self.expected = expected
        self.got = got
        super().__init__(f"Tag mismatch: <{expected}> with </{got}>")


class NoTagsError(TextParseError):
    def __init__(self):
        super().__init__("Contains no tags")


class TokenizerError(TextParseError):
    """The tokenizer gave up before reaching the end of the input."""

    def __init__(self, cause):
        self.cause = cause
        super().__init__(str(cause))


class EmptyStackError(IndexError):
    pass
