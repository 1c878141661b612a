"""The token-driven state machine.

``TextDriver`` is a token sink: it keeps the stack of open elements, checks
that every end tag closes the innermost open element and forwards events to a
texter. It raises on the first problem it finds; there is no recovery and no
partial result.
"""

from .constants import VOID_ELEMENTS
from .errors import NoTagsError, StrayEndTagError, TagMismatchError, TokenizerError, UnterminatedTagError
from .stack import TagStack
from .tokens import CharacterTokens, CommentToken, DoctypeToken, EOFToken, ParseError, Tag


class TextDriver:
    __slots__ = ("debug_enabled", "done", "must_tag", "stack", "texter", "untagged")

    def __init__(self, texter=None, *, must_tag=False, debug=False):
        self.texter = texter
        self.must_tag = bool(must_tag)
        self.debug_enabled = bool(debug)
        self.stack = TagStack()
        self.untagged = True
        self.done = False

    def debug(self, message, indent=4):
        if self.debug_enabled:
            print(f"{' ' * (indent * self.stack.depth())}{message}")

    def process_token(self, token):
        token_type = type(token)

        if token_type is Tag:
            name = token.name
            if token.kind == Tag.END:
                self._end_tag(name)
            elif token.self_closing or name in VOID_ELEMENTS:
                self._self_tag(name)
            else:
                self._start_tag(name)
            return

        if token_type is CharacterTokens:
            enclosing = self.stack.peek()
            self.debug(f"text in <{enclosing}>: {token.data!r}")
            if self.texter is not None:
                self.texter.text(enclosing, token.data)
            return

        if token_type is CommentToken or token_type is DoctypeToken:
            self._self_tag("")
            return

        if token_type is EOFToken:
            self.finish()
            return

        if token_type is ParseError:
            self.done = True
            self.debug(f"tokenizer error: {token}")
            raise TokenizerError(token)

    def _start_tag(self, name):
        self.untagged = False
        self.debug(f"push <{name}>")
        self.stack.push(name)
        if self.texter is not None:
            self.texter.start_tag(name)

    def _self_tag(self, name):
        self.untagged = False
        self.debug(f"self <{name}>")
        if self.texter is not None:
            self.texter.self_tag(name)

    def _end_tag(self, name):
        if not self.stack:
            self.done = True
            raise StrayEndTagError(name)
        popped = self.stack.pop()
        self.debug(f"pop <{popped}> for </{name}>")
        if popped != name:
            self.done = True
            raise TagMismatchError(popped, name)
        if self.texter is not None:
            self.texter.end_tag(name)

    def finish(self):
        """Apply the end-of-input checks."""
        self.done = True
        if self.stack:
            # Only the innermost open element is reported
            raise UnterminatedTagError(self.stack.pop())
        if self.untagged and self.must_tag:
            raise NoTagsError()
        self.debug("done")


def parse(tokens, must_tag=False, texter=None, *, debug=False):
    """Walk an already produced token stream.

    Tokens after the terminal ``EOFToken``/``ParseError`` are ignored. A stream
    that runs out without a terminal token is treated as ending normally.
    Returns the driver so callers can inspect it.
    """
    driver = TextDriver(texter, must_tag=must_tag, debug=debug)
    for token in tokens:
        driver.process_token(token)
        if driver.done:
            return driver
    driver.finish()
    return driver
