"""
Utilities for working with CLI in tests.
"""

import os
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]


def run_cli(root: Path, *args: str) -> subprocess.CompletedProcess:
    """
    Runs jsxcond.cli with the given arguments in the given directory.

    Args:
        root: Working directory for command execution
        *args: Command line arguments for jsxcond.cli

    Returns:
        CompletedProcess with execution results
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(REPO_ROOT), env.get("PYTHONPATH", "")) if p)
    return subprocess.run(
        [sys.executable, "-m", "jsxcond.cli", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8"
    )
