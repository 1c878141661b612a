"""Command line interface: ``python -m simpletext [file]``."""

import argparse
import sys
from pathlib import Path

from .constants import LineBreakStyle
from .errors import TextParseError
from .parser import custom_to_text, html_to_text, is_plain_text
from .texter import Texter
from .tokenizer import tokenize


def _read_source(path):
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="simpletext", description="Convert HTML to plain text.")
    parser.add_argument("file", nargs="?", help="HTML file to read (default: stdin)")
    parser.add_argument("--windows", action="store_true", help="Write \\r\\n line breaks instead of \\n")
    parser.add_argument("--debug", action="store_true", help="Trace the tag stack while parsing")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--check", action="store_true", help="Only check that the markup is well formed")
    mode.add_argument("--plain", action="store_true", help="Report whether the input contains any tags")
    mode.add_argument("--tokens", action="store_true", help="Dump the token stream")
    args = parser.parse_args(argv)

    src = _read_source(args.file)

    if args.tokens:
        for token in tokenize(src):
            print(repr(token))
        return 0

    if args.plain:
        plain = is_plain_text(src)
        print("plain" if plain else "markup")
        return 0 if plain else 1

    if args.check:
        try:
            custom_to_text(src, False, Texter(), debug=args.debug)
        except TextParseError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print("ok")
        return 0

    line_break = LineBreakStyle.WINDOWS if args.windows else LineBreakStyle.UNIX
    sys.stdout.write(html_to_text(src, line_break, debug=args.debug))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
