"""Public conversion entry points."""

from __future__ import annotations

from .constants import LineBreakStyle
from .driver import TextDriver
from .errors import NoTagsError, TextParseError
from .texter import SimpleTexter, Texter
from .tokenizer import Tokenizer, TokenizerOpts


def _run(src, must_tag, texter, tokenizer_opts, debug):
    driver = TextDriver(texter, must_tag=must_tag, debug=debug)
    Tokenizer(driver, tokenizer_opts).run(src)
    return driver


def html_to_text(
    src: str | bytes,
    line_break: LineBreakStyle | str = LineBreakStyle.UNIX,
    *,
    tokenizer_opts: TokenizerOpts | None = None,
    debug: bool = False,
) -> str:
    """Convert HTML to text with the built-in ``SimpleTexter``.

    Returns an empty string when the markup is not well formed.
    """
    texter = SimpleTexter(line_break)
    try:
        return custom_to_text(src, False, texter, tokenizer_opts=tokenizer_opts, debug=debug)
    except TextParseError:
        return ""


def custom_to_text(
    src: str | bytes,
    must_tag: bool,
    texter: Texter | None,
    *,
    tokenizer_opts: TokenizerOpts | None = None,
    debug: bool = False,
) -> str:
    """Convert HTML to text using the supplied texter.

    Raises a ``TextParseError`` subclass when the markup is not well formed,
    and ``NoTagsError`` when ``must_tag`` is set and the source holds no tags,
    doctype or comments.
    """
    _run(src, must_tag, texter, tokenizer_opts, debug)
    if texter is None:
        return ""
    return texter.finalize()


def is_plain_text(src: str | bytes, *, tokenizer_opts: TokenizerOpts | None = None) -> bool:
    """True when ``src`` contains no tags, doctype or comments.

    Malformed markup is not plain text.
    """
    try:
        _run(src, True, None, tokenizer_opts, False)
    except NoTagsError:
        return True
    except TextParseError:
        return False
    return False
