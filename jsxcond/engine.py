"""
File-level pipeline: parse, rewrite, print.

Each file is processed independently with its own transformation context. A
file whose rewrite fails produces no output; the remaining files still run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from .config import TransformCfg
from .errors import ConfigError, TransformError
from .syntax import TransformationContext, parse_source, print_source_file
from .transform import create_transformer

logger = logging.getLogger(__name__)


def transform_text(text: str, file_name: str = "<input>.tsx", cfg: Optional[TransformCfg] = None) -> str:
    """
    Rewrite If/Else constructs in source text.

    Raises:
        TransformError: with file name and offending node text attached
    """
    cfg = cfg or TransformCfg()
    source_file = parse_source(text, file_name)
    ctx = TransformationContext(file_name=file_name)
    transformer = create_transformer(cfg.transform_options())(ctx)
    return print_source_file(transformer(source_file))


def transform_file(path: Path, cfg: Optional[TransformCfg] = None) -> str:
    text = path.read_text(encoding="utf-8")
    return transform_text(text, str(path), cfg)


def collect_files(paths: Iterable[Path], root: Path, cfg: TransformCfg) -> List[Path]:
    """
    Expand the given paths into the list of files to rewrite.

    Files named explicitly are always taken; directories are walked and
    filtered through the include/exclude patterns (relative to `root`).
    """
    file_filter = cfg.file_filter()
    result: List[Path] = []
    for path in paths:
        if path.is_file():
            result.append(path)
            continue
        if not path.is_dir():
            raise ConfigError(f"Path not found: {path}")
        for candidate in sorted(path.rglob("*")):
            if not candidate.is_file():
                continue
            try:
                rel = candidate.resolve().relative_to(root.resolve()).as_posix()
            except ValueError:
                rel = candidate.relative_to(path).as_posix()
            if file_filter.matches(rel):
                result.append(candidate)
    return result


@dataclass
class FileOutcome:
    path: Path
    ok: bool
    changed: bool = False
    error: Optional[str] = None


@dataclass
class RunResult:
    outcomes: List[FileOutcome] = field(default_factory=list)

    @property
    def failed(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        return not self.failed


def _destination(path: Path, base: Path, out_dir: Path) -> Path:
    try:
        rel = path.resolve().relative_to(base.resolve())
    except ValueError:
        rel = Path(path.name)
    return out_dir / rel


def run_transform(
    files: List[Path],
    cfg: TransformCfg,
    *,
    base: Path,
    out_dir: Optional[Path] = None,
    in_place: bool = False,
    write_output: bool = True,
) -> RunResult:
    """
    Rewrite a batch of files.

    Args:
        files: Files to process
        cfg: Project configuration
        base: Directory output paths are computed relative to
        out_dir: Where to write the rewritten files
        in_place: Overwrite the input files instead
        write_output: False to only validate (nothing is written)
    """
    result = RunResult()
    for path in files:
        try:
            original = path.read_text(encoding="utf-8")
            rewritten = transform_text(original, str(path), cfg)
        except TransformError as e:
            logger.error("%s", e)
            result.outcomes.append(FileOutcome(path, ok=False, error=str(e)))
            continue
        except (OSError, UnicodeDecodeError) as e:
            logger.error("%s: cannot read file: %s", path, e)
            result.outcomes.append(FileOutcome(path, ok=False, error=f"cannot read file: {e}"))
            continue

        changed = rewritten != original
        logger.info("%s: %s", path, "rewritten" if changed else "unchanged")
        if write_output:
            if in_place:
                if changed:
                    path.write_text(rewritten, encoding="utf-8")
            elif out_dir is not None:
                dest = _destination(path, base, out_dir)
                dest.parent.mkdir(parents=True, exist_ok=True)
                dest.write_text(rewritten, encoding="utf-8")
        result.outcomes.append(FileOutcome(path, ok=True, changed=changed))
    return result


__all__ = ["transform_text", "transform_file", "collect_files", "run_transform", "RunResult", "FileOutcome"]
