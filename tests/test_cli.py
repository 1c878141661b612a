"""Tests for the command line interface."""

import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from simpletext.__main__ import main


class TestCommandLine(unittest.TestCase):
    """Test the simpletext command."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)

    def _write(self, content):
        path = Path(self._tmp.name) / "input.html"
        path.write_text(content, encoding="utf-8")
        return str(path)

    def _run(self, argv):
        out = io.StringIO()
        err = io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_convert_file(self):
        """Default mode prints the converted text."""
        code, out, _ = self._run([self._write("<p>Hello</p><p>World</p>")])
        assert code == 0
        assert out == "Hello\n\nWorld\n"

    def test_convert_windows(self):
        """--windows writes CRLF breaks."""
        code, out, _ = self._run(["--windows", self._write("<p>a</p><p>b</p>")])
        assert code == 0
        assert out == "a\r\n\r\nb\n"

    def test_check_ok(self):
        """--check prints ok for well-formed markup."""
        code, out, _ = self._run(["--check", self._write("<div><p>x</p></div>")])
        assert code == 0
        assert out.strip() == "ok"

    def test_check_reports_error(self):
        """--check reports the first error on stderr."""
        code, _, err = self._run(["--check", self._write("<p>Hi</div>")])
        assert code == 1
        assert "Tag mismatch: <p> with </div>" in err

    def test_plain(self):
        """--plain recognises plain text."""
        code, out, _ = self._run(["--plain", self._write("just text")])
        assert code == 0
        assert out.strip() == "plain"

    def test_markup(self):
        """--plain exits 1 for markup."""
        code, out, _ = self._run(["--plain", self._write("<b>x</b>")])
        assert code == 1
        assert out.strip() == "markup"

    def test_tokens(self):
        """--tokens dumps one token per line."""
        code, out, _ = self._run(["--tokens", self._write("<p>x</p>")])
        assert code == 0
        assert out.splitlines() == ["<start:p>", "<text:'x'>", "<end:p>", "<eof>"]

    def test_debug_trace(self):
        """--debug traces the stack before the output."""
        code, out, _ = self._run(["--debug", self._write("<p>x</p>")])
        assert code == 0
        assert "push <p>" in out
        assert out.endswith("x\n")
