"""
simpletext build hook.

Project metadata lives in pyproject.toml; this file only decides whether the
stack-walking core is compiled. Set SIMPLETEXT_USE_MYPYC=1 to compile the
driver and tag stack with mypyc (needs the ``mypyc`` extra).
"""

import os
import sys
from pathlib import Path

from setuptools import setup

USE_MYPYC = os.environ.get("SIMPLETEXT_USE_MYPYC", "0") == "1"

# texter.py stays interpreted: Texter is subclassed by callers.
# tokenizer.py stays interpreted: _Lexer subclasses html.parser.HTMLParser.
COMPILED_MODULES = [
    "src/simpletext/driver.py",
    "src/simpletext/stack.py",
]


def compiled_extensions() -> list:
    try:
        from mypyc.build import mypycify
    except ImportError:
        sys.exit("SIMPLETEXT_USE_MYPYC=1 needs mypyc: pip install simpletext[mypyc]")

    missing = [path for path in COMPILED_MODULES if not Path(path).exists()]
    if missing:
        sys.exit(f"cannot compile, missing modules: {', '.join(missing)}")

    return mypycify(
        COMPILED_MODULES,
        opt_level=os.environ.get("MYPYC_OPT_LEVEL", "3"),
        debug_level=os.environ.get("MYPYC_DEBUG_LEVEL", "0"),
        separate=False,
        multi_file=False,
    )


if __name__ == "__main__":
    setup(ext_modules=compiled_extensions() if USE_MYPYC else [])
