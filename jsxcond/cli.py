from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from .config import load_config
from .engine import collect_files, run_transform, transform_file
from .errors import ConfigError, TransformError
from .version import tool_version


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="jsxcond",
        description="Rewrite <If>/<Else> JSX shorthand into ternary expressions",
        add_help=True,
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Common arguments for transform/check
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("paths", nargs="+", type=Path, help="files or directories to process")
        sp.add_argument(
            "--config",
            type=Path,
            help="configuration file (default: ./jsxcond.yaml if present)",
        )
        sp.add_argument("-v", "--verbose", action="store_true", help="log every processed file")
        sp.add_argument("-q", "--quiet", action="store_true", help="only log errors")

    sp_transform = sub.add_parser("transform", help="rewrite files (a single file without -o goes to stdout)")
    add_common(sp_transform)
    dest = sp_transform.add_mutually_exclusive_group()
    dest.add_argument("-o", "--out-dir", type=Path, help="write rewritten files under this directory")
    dest.add_argument("--in-place", action="store_true", help="overwrite the input files")

    sp_check = sub.add_parser("check", help="validate If/Else usage without writing anything")
    add_common(sp_check)

    return p


def _configure_logging(ns: argparse.Namespace) -> None:
    level = logging.WARNING
    if getattr(ns, "verbose", False):
        level = logging.INFO
    if getattr(ns, "quiet", False):
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def main(argv: List[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _configure_logging(ns)

    try:
        root = Path.cwd()
        cfg = load_config(root, ns.config)

        if ns.cmd == "transform":
            single = len(ns.paths) == 1 and ns.paths[0].is_file()
            if single and ns.out_dir is None and not ns.in_place:
                try:
                    sys.stdout.write(transform_file(ns.paths[0], cfg))
                except TransformError as e:
                    sys.stderr.write(str(e).rstrip() + "\n")
                    return 1
                except (OSError, UnicodeDecodeError) as e:
                    sys.stderr.write(f"{ns.paths[0]}: cannot read file: {e}\n")
                    return 1
                return 0

            if ns.out_dir is None and not ns.in_place:
                raise ConfigError("Directories and multiple inputs need --out-dir or --in-place")
            files = collect_files(ns.paths, root, cfg)
            result = run_transform(files, cfg, base=root, out_dir=ns.out_dir, in_place=ns.in_place)
            return 0 if result.ok else 1

        if ns.cmd == "check":
            files = collect_files(ns.paths, root, cfg)
            result = run_transform(files, cfg, base=root, write_output=False)
            if result.ok:
                sys.stderr.write(f"{len(result.outcomes)} file(s) OK\n")
                return 0
            sys.stderr.write(f"{len(result.failed)} of {len(result.outcomes)} file(s) failed\n")
            return 1

    except ConfigError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
