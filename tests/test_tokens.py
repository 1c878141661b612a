"""Tests for token value classes."""

import unittest

from simpletext.tokens import CharacterTokens, CommentToken, DoctypeToken, EOFToken, ParseError, Tag


class TestParseError(unittest.TestCase):
    """Test ParseError class behavior."""

    def test_parse_error_str(self):
        """ParseError has readable string representation."""
        error = ParseError("buffer-exceeded", line=1, column=5)
        assert str(error) == "(1,5): buffer-exceeded"

    def test_parse_error_str_with_message(self):
        """The message follows the code when it differs from it."""
        error = ParseError("buffer-exceeded", line=2, column=0, message="too big")
        assert str(error) == "(2,0): buffer-exceeded - too big"

    def test_parse_error_repr(self):
        """ParseError has useful repr."""
        error = ParseError("decode-error", line=1, column=5)
        assert "decode-error" in repr(error)
        assert "line=1" in repr(error)
        assert "column=5" in repr(error)

    def test_parse_error_no_location(self):
        """ParseError works without location info."""
        error = ParseError("decode-error")
        assert str(error) == "decode-error"
        assert error.message == "decode-error"

    def test_parse_error_no_location_with_message(self):
        """ParseError with message but no location."""
        error = ParseError("decode-error", message="bad byte")
        assert str(error) == "decode-error - bad byte"
        assert "line=" not in repr(error)


class TestTokenRepr(unittest.TestCase):
    """Tokens print in the form used by the --tokens dump."""

    def test_tag_repr(self):
        """Start, end and self-closing tags are distinguishable."""
        assert repr(Tag(Tag.START, "p")) == "<start:p>"
        assert repr(Tag(Tag.END, "p")) == "<end:p>"
        assert repr(Tag(Tag.START, "br", True)) == "<start:br />"

    def test_other_reprs(self):
        """Text, comment, doctype and EOF tokens have short reprs."""
        assert repr(CharacterTokens("hi")) == "<text:'hi'>"
        assert repr(CommentToken(" c ")) == "<comment:' c '>"
        assert repr(DoctypeToken("html")) == "<doctype:html>"
        assert repr(DoctypeToken()) == "<doctype:>"
        assert repr(EOFToken()) == "<eof>"

    def test_tag_defaults(self):
        """Tags are not self-closing unless asked."""
        tag = Tag(Tag.START, "div")
        assert tag.self_closing is False
