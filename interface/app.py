#!/usr/bin/env python3
"""
teal: personal hierarchical task tracker (CLI).

Tasks live as one .task file each under the tasks directory; every command
rebuilds the task tree from those flat rows.
"""

import argparse
import logging
import sys
from importlib.metadata import version as pkg_version, PackageNotFoundError

from interface.cli_parser import build_parser as build_cli_parser
from interface.themes import THEMES, DEFAULT_THEME

from .cli_commands import (
    cmd_list,
    cmd_show,
    cmd_add,
    cmd_remove,
    cmd_done,
    cmd_config,
)

__all__ = [
    "cmd_list",
    "cmd_show",
    "cmd_add",
    "cmd_remove",
    "cmd_done",
    "cmd_config",
    "build_parser",
    "configure_logging",
    "main",
]


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = build_cli_parser(commands=sys.modules[__name__], themes=THEMES, default_theme=DEFAULT_THEME)
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("teal"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    configure_logging(getattr(args, "verbose", False))
    if not getattr(args, "command", None):
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
