#!/usr/bin/env python3
"""CI build wrapper.

Uses .cf/tool-versions while leaving the root .tool-versions for local dev,
then execs ./build.sh from the project root with the original arguments.
"""
from __future__ import annotations

import os
import sys

# Lexical, like `dirname "$0"/..`: a symlinked wrapper keeps its project.
_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)

from cfbuild.cli import main


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
