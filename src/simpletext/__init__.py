from .constants import LineBreakStyle
from .driver import TextDriver, parse
from .errors import (
    EmptyStackError,
    NoTagsError,
    StrayEndTagError,
    TagMismatchError,
    TextParseError,
    TokenizerError,
    UnterminatedTagError,
)
from .parser import custom_to_text, html_to_text, is_plain_text
from .texter import SimpleTexter, Texter
from .tokenizer import Tokenizer, TokenizerOpts, tokenize
from .tokens import ParseError

__all__ = [
    "EmptyStackError",
    "LineBreakStyle",
    "NoTagsError",
    "ParseError",
    "SimpleTexter",
    "StrayEndTagError",
    "TagMismatchError",
    "TextDriver",
    "TextParseError",
    "Texter",
    "Tokenizer",
    "TokenizerError",
    "TokenizerOpts",
    "UnterminatedTagError",
    "custom_to_text",
    "html_to_text",
    "is_plain_text",
    "parse",
    "tokenize",
]
