"""Command line entry point.

Usage:
    anchor [SOURCE] [--config PATH] [--format plain|console] [--ignore-type-checking]

Exit status: 0 passed, 1 violations found, 2 configuration or parse error.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from anchor import __version__
from anchor.application.reporters import ConsoleReporter, PlainTextReporter
from anchor.application.services import DependencyChecker, analyze_directory
from anchor.domain.exceptions.base import AnchorError
from anchor.infrastructure.adapters.yaml_config import find_config, load_config

if TYPE_CHECKING:
    from collections.abc import Sequence

    from anchor.application.reporters import BaseReporter

EXIT_PASSED = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="anchor",
        description="Check module dependency rules of a Python source tree",
    )
    parser.add_argument(
        "source",
        nargs="?",
        type=Path,
        default=Path("src"),
        help="Directory holding the top-level packages (default: src)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file (default: nearest .anchor.yml)",
    )
    parser.add_argument(
        "--format",
        choices=("plain", "console"),
        default="console",
        help="Output format",
    )
    parser.add_argument(
        "--ignore-type-checking",
        action="store_true",
        help="Skip imports guarded by TYPE_CHECKING",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    """Run a check and return the exit status."""
    args = build_parser().parse_args(argv)
    reporter: BaseReporter = (
        PlainTextReporter() if args.format == "plain" else ConsoleReporter()
    )

    source: Path = args.source
    if not source.is_dir():
        print(f"anchor: source directory not found: {source}", file=sys.stderr)
        return EXIT_ERROR

    try:
        config_path = args.config if args.config is not None else find_config(Path.cwd())
        config = load_config(config_path)
        if args.ignore_type_checking:
            config = dataclasses.replace(config, ignore_type_checking=True)

        graph = analyze_directory(source, config)
        checker = DependencyChecker.from_config(
            graph,
            config,
            source_root=source,
            reporter=reporter,
        )
        result = checker.check()
    except AnchorError as e:
        print(f"anchor: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_PASSED if result.passed else EXIT_VIOLATIONS


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
