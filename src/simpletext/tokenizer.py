"""Token source backed by the standard library HTML lexer.

``Tokenizer`` pushes tokens into a sink exactly like a hand-written state
machine would: every token goes through ``sink.process_token`` in document
order, and the run always finishes with one terminal token, ``EOFToken`` for
a normal end of input or ``ParseError`` when lexing failed. A sink aborts the
run by raising.
"""

from html import unescape
from html.parser import HTMLParser

from .tokens import CharacterTokens, CommentToken, DoctypeToken, EOFToken, ParseError, Tag

_RCDATA_ELEMENTS = {"title", "textarea"}

# Newer html.parser releases switch title/textarea to escapable raw text on
# their own; older ones lex markup inside them.
_NATIVE_RCDATA = hasattr(HTMLParser, "RCDATA_CONTENT_ELEMENTS")


class TokenizerOpts:
    __slots__ = ("discard_bom", "encoding", "max_buffer")

    def __init__(self, discard_bom=True, max_buffer=0, encoding="utf-8"):
        self.discard_bom = bool(discard_bom)
        # 0 disables the per-token size limit
        self.max_buffer = int(max_buffer)
        self.encoding = encoding


class _BufferExceeded(Exception):
    pass


class _Lexer(HTMLParser):
    """Forwards HTMLParser callbacks to the owning tokenizer.

    The whole document is fed in a single call, so a comment, declaration or
    processing instruction still open when the input runs out extends to the
    end of the document instead of falling back to text.
    """

    def __init__(self, tokenizer):
        super().__init__(convert_charrefs=True)
        self.tokenizer = tokenizer

    def handle_starttag(self, tag, attrs):
        self.tokenizer._emit_tag(Tag.START, tag, False, self.get_starttag_text())
        if tag in _RCDATA_ELEMENTS and not _NATIVE_RCDATA:
            self.set_cdata_mode(tag)

    def handle_startendtag(self, tag, attrs):
        self.tokenizer._emit_tag(Tag.START, tag, True, self.get_starttag_text())

    def handle_endtag(self, tag):
        self.tokenizer._emit_tag(Tag.END, tag, False, None)

    def handle_data(self, data):
        if self.cdata_elem in _RCDATA_ELEMENTS and not _NATIVE_RCDATA:
            data = unescape(data)
        self.tokenizer._append_text(data)

    def handle_comment(self, data):
        self.tokenizer._emit_comment(data)

    def handle_decl(self, decl):
        self.tokenizer._emit_decl(decl)

    # Processing instructions and unknown declarations (CDATA included) are
    # bogus comments in HTML.
    def handle_pi(self, data):
        self.tokenizer._emit_comment(data)

    def unknown_decl(self, data):
        self.tokenizer._emit_comment(data)

    def close(self):
        super().close()
        # Text of an unclosed title/textarea is left behind in cdata mode
        if self.cdata_elem in _RCDATA_ELEMENTS and self.rawdata:
            data, self.rawdata = self.rawdata, ""
            self.handle_data(data)

    def parse_comment(self, i, report=1):
        j = super().parse_comment(i, report)
        if j < 0:
            self.handle_comment(self.rawdata[i + 4 :])
            return len(self.rawdata)
        return j

    def parse_pi(self, i):
        j = super().parse_pi(i)
        if j < 0:
            self.handle_pi(self.rawdata[i + 2 :])
            return len(self.rawdata)
        return j

    def parse_html_declaration(self, i):
        j = super().parse_html_declaration(i)
        if j < 0:
            rest = self.rawdata[i + 2 :]
            if rest[:7].lower() == "doctype":
                self.handle_decl(rest)
            else:
                self.handle_comment(rest)
            return len(self.rawdata)
        return j

    def parse_marked_section(self, i, report=1):
        # "<![" is a bogus comment up to the next ">"
        rawdata = self.rawdata
        gtpos = rawdata.find(">", i + 3)
        if gtpos < 0:
            gtpos = len(rawdata)
        if report:
            self.unknown_decl(rawdata[i + 3 : gtpos])
        return min(gtpos + 1, len(rawdata))


class Tokenizer:
    __slots__ = ("in_sink", "lexer", "opts", "sink", "text_buffer")

    def __init__(self, sink, opts=None):
        self.sink = sink
        self.opts = opts or TokenizerOpts()
        self.lexer = None
        self.text_buffer = []
        self.in_sink = False

    def run(self, html):
        self.text_buffer.clear()
        self.in_sink = False
        self.lexer = _Lexer(self)

        if isinstance(html, (bytes, bytearray)):
            try:
                html = bytes(html).decode(self.opts.encoding)
            except UnicodeDecodeError as exc:
                self._emit_token(ParseError("decode-error", message=str(exc)))
                return

        html = html or ""
        if html and html[0] == "\ufeff" and self.opts.discard_bom:
            html = html[1:]

        try:
            self.lexer.feed(html)
            self.lexer.close()
            self._flush_text()
        except _BufferExceeded:
            self._emit_failure("buffer-exceeded", f"token larger than {self.opts.max_buffer} characters")
            return
        except AssertionError as exc:
            if self.in_sink:
                raise
            # _markupbase reports markup it cannot scan this way
            self._emit_failure("lexer-error", str(exc))
            return
        self._emit_token(EOFToken())

    def _emit_failure(self, code, message):
        line, column = self.lexer.getpos()
        self.text_buffer.clear()
        self._emit_token(ParseError(code, line=line, column=column, message=message))

    def _check_size(self, raw):
        limit = self.opts.max_buffer
        if limit and raw is not None and len(raw) > limit:
            raise _BufferExceeded

    def _append_text(self, data):
        if data:
            self.text_buffer.append(data)

    def _flush_text(self):
        if not self.text_buffer:
            return
        data = "".join(self.text_buffer)
        self.text_buffer.clear()
        self._check_size(data)
        self._emit_token(CharacterTokens(data))

    def _emit_tag(self, kind, name, self_closing, raw):
        self._flush_text()
        self._check_size(raw)
        self._emit_token(Tag(kind, name, self_closing))

    def _emit_comment(self, data):
        self._flush_text()
        self._check_size(data)
        self._emit_token(CommentToken(data))

    def _emit_decl(self, decl):
        self._flush_text()
        self._check_size(decl)
        parts = decl.split(None, 2)
        if parts and parts[0].lower() == "doctype":
            name = parts[1].lower() if len(parts) > 1 else None
            self._emit_token(DoctypeToken(name))
        else:
            self._emit_token(CommentToken(decl))

    def _emit_token(self, token):
        # Stays set when the sink raises so its errors are not taken for lexer errors
        self.in_sink = True
        self.sink.process_token(token)
        self.in_sink = False


class RecordingSink:
    __slots__ = ("tokens",)

    def __init__(self):
        self.tokens = []

    def process_token(self, token):
        self.tokens.append(token)


def tokenize(html, opts=None):
    """Return the complete token stream for ``html`` as a list."""
    sink = RecordingSink()
    Tokenizer(sink, opts).run(html)
    return sink.tokens
