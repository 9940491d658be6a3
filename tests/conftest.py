import textwrap
from pathlib import Path

import pytest

from tests.infrastructure.file_utils import write


@pytest.fixture
def tmpproj(tmp_path: Path):
    """Minimal project: jsxcond.yaml, two components and a vendored file to skip."""
    root = tmp_path
    write(
        root / "jsxcond.yaml",
        textwrap.dedent("""
        marker_module: jsx-conditionals
        include: ["*.tsx"]
        exclude: ["vendor/"]
        """).strip() + "\n",
    )
    write(
        root / "src" / "Greeting.tsx",
        textwrap.dedent("""
        import { If, Else } from 'jsx-conditionals';

        export const Greeting = ({ user }) => (
          <div>
            <If condition={user}>Hello</If>
            <Else>Sign in</Else>
          </div>
        );
        """).lstrip(),
    )
    write(
        root / "src" / "Plain.tsx",
        "export const Plain = () => <span>plain</span>;\n",
    )
    write(
        root / "vendor" / "Lib.tsx",
        "export const Lib = () => <Else>broken</Else>;\n",
    )
    return root
