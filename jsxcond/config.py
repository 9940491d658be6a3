"""
Project configuration loader.

Configuration lives in an optional `jsxcond.yaml` at the project root:

    marker_module: jsx-conditionals
    include: ["*.tsx", "*.jsx"]
    exclude: ["node_modules/", "dist/"]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Optional

import pathspec
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError
from .transform.driver import DEFAULT_MARKER_MODULE, TransformOptions

CONFIG_FILE_NAME = "jsxcond.yaml"

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> dict:
    """Read a YAML file that must contain a mapping."""
    if not path.is_file():
        return {}
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def _str_list(d: Dict[str, Any], key: str, default: List[str]) -> List[str]:
    value = d.get(key)
    if value is None:
        return list(default)
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a string or a list of strings")
    return list(value)


@dataclass
class TransformCfg:
    marker_module: str = DEFAULT_MARKER_MODULE
    include: List[str] = field(default_factory=lambda: ["*.tsx", "*.jsx"])
    exclude: List[str] = field(default_factory=lambda: ["node_modules/"])

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> TransformCfg:
        """Load configuration from YAML dictionary."""
        if not d:
            return TransformCfg()

        unknown = sorted(set(d) - {"marker_module", "include", "exclude"})
        if unknown:
            raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

        defaults = TransformCfg()
        marker_module = d.get("marker_module", defaults.marker_module)
        if not isinstance(marker_module, str) or not marker_module:
            raise ConfigError("'marker_module' must be a non-empty string")

        return TransformCfg(
            marker_module=marker_module,
            include=_str_list(d, "include", defaults.include),
            exclude=_str_list(d, "exclude", defaults.exclude),
        )

    def transform_options(self) -> TransformOptions:
        return TransformOptions(marker_module=self.marker_module)

    def file_filter(self) -> FileFilter:
        return FileFilter.compile(self.include, self.exclude)


@dataclass(frozen=True)
class FileFilter:
    """Compiled include/exclude patterns (gitwildmatch semantics)."""
    include_spec: pathspec.PathSpec
    exclude_spec: Optional[pathspec.PathSpec]

    @classmethod
    def compile(cls, include: List[str], exclude: List[str]) -> FileFilter:
        return cls(
            include_spec=pathspec.PathSpec.from_lines("gitwildmatch", include),
            exclude_spec=pathspec.PathSpec.from_lines("gitwildmatch", exclude) if exclude else None,
        )

    def matches(self, rel_path: str) -> bool:
        """Check a root-relative POSIX path."""
        rel = str(PurePosixPath(rel_path))
        if self.exclude_spec is not None and self.exclude_spec.match_file(rel):
            return False
        return self.include_spec.match_file(rel)


def load_config(root: Path, path: Optional[Path] = None) -> TransformCfg:
    """
    Load configuration for a project.

    Args:
        root: Project root, searched for jsxcond.yaml
        path: Explicit configuration file (must exist)

    Returns:
        Loaded configuration, defaults when no file is present
    """
    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        return TransformCfg.from_dict(_read_yaml_map(path))
    return TransformCfg.from_dict(_read_yaml_map(root / CONFIG_FILE_NAME))


__all__ = ["CONFIG_FILE_NAME", "TransformCfg", "FileFilter", "load_config"]
