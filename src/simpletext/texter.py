"""Text builders driven by tag and text events.

A texter receives one call per relevant token from the driver and produces
the final string from ``finalize``. ``Texter`` itself ignores every event and
is what validation-only callers pass in.
"""

from .constants import (
    CLOSING_BREAKERS,
    OPENING_BREAKERS,
    SELF_BREAKERS,
    SKIPPED_TEXT_ELEMENTS,
    TRIM_CHARS,
    WHITESPACE_RE,
    LineBreakStyle,
)


def collapse_whitespace(text):
    return WHITESPACE_RE.sub(" ", text)


class Texter:
    __slots__ = ()

    def start_tag(self, tag):
        """Handle a start tag that was pushed onto the tag stack."""

    def self_tag(self, tag):
        """Handle a self-closing tag, doctype or comment (``tag`` may be empty)."""

    def end_tag(self, tag):
        """Handle an end tag that matched the innermost open element."""

    def text(self, enclosing, data):
        """Handle raw text found inside ``enclosing`` ("" at top level)."""

    def finalize(self):
        return ""


class SimpleTexter(Texter):
    """Writes text with line breaks for paragraphs, headings and lists."""

    __slots__ = ("line_break", "parts")

    def __init__(self, line_break=LineBreakStyle.UNIX):
        self.line_break = LineBreakStyle.coerce(line_break).value
        self.parts = []

    def _breaks(self, table, tag):
        count = table.get(tag, 0)
        if count:
            self.parts.append(self.line_break * count)

    def start_tag(self, tag):
        self._breaks(OPENING_BREAKERS, tag)

    def self_tag(self, tag):
        self._breaks(SELF_BREAKERS, tag)

    def end_tag(self, tag):
        self._breaks(CLOSING_BREAKERS, tag)

    def text(self, enclosing, data):
        if enclosing in SKIPPED_TEXT_ELEMENTS:
            return
        self.parts.append(collapse_whitespace(data))

    def finalize(self):
        return "".join(self.parts).strip(TRIM_CHARS)
