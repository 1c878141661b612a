"""Element tables used when turning markup into text.

The breaker tables map a tag name to the number of line breaks written when
that element opens, closes, or appears as a self-closing tag. Names missing
from a table produce no line breaks.

Usage:
    from simpletext.constants import OPENING_BREAKERS, VOID_ELEMENTS

References:
    - https://html.spec.whatwg.org/multipage/syntax.html#void-elements
"""

import enum
import re

# Start tags for these never get an end tag and are handled as self-closing
VOID_ELEMENTS = frozenset(
    (
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    )
)

HEADING_ELEMENTS = ("h1", "h2", "h3", "h4", "h5", "h6")

SELF_BREAKERS = {
    "br": 1,
}

OPENING_BREAKERS = {
    "p": 1,
    **{name: 2 for name in HEADING_ELEMENTS},
    "ul": 1,
}

CLOSING_BREAKERS = {
    "p": 1,
    **{name: 2 for name in HEADING_ELEMENTS},
    "li": 1,
}

# Text inside these elements never reaches the output
SKIPPED_TEXT_ELEMENTS = frozenset(("title",))

# ASCII whitespace plus the Unicode space separators (category Zs)
WHITESPACE_RE = re.compile(r"[\t\n\f\r \u00a0\u1680\u2000-\u200a\u202f\u205f\u3000]+")

# Characters stripped from both ends of the finished text
TRIM_CHARS = " \r\n"


class LineBreakStyle(enum.Enum):
    UNIX = "\n"
    WINDOWS = "\r\n"

    @classmethod
    def coerce(cls, value):
        """Accept a member, its name ("unix"/"windows") or its literal value."""
        if value is None:
            return cls.UNIX
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            member = cls.__members__.get(value.upper())
            if member is not None:
                return member
            for member in cls:
                if member.value == value:
                    return member
        raise ValueError(f"Unknown line break style: {value!r}")
