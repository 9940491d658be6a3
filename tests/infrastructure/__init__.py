"""
Shared test infrastructure for jsxcond.

Modules:
- file_utils: Utilities for creating files and directories
- cli_utils: Running the CLI in a subprocess
- syntax_utils: Parsing snippets, finding nodes, building trees by hand
"""

from .file_utils import write
from .cli_utils import run_cli
from .syntax_utils import rewrite, squash, parse, find_first, find_all, tag, text, element, fragment

__all__ = [
    "write",
    "run_cli",
    "rewrite",
    "squash",
    "parse",
    "find_first",
    "find_all",
    "tag",
    "text",
    "element",
    "fragment",
]
