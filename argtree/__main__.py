"""
Argtree CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from argparse import REMAINDER, ArgumentParser, Namespace
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from argtree.config import loader
from argtree.console import console
from argtree.error_codes import NO_ERROR, ErrorCode, describe_error
from argtree.exceptions import ArgTreeError
from argtree.utils import setup_logging


def bootstrap(config_path: Path) -> Path:
    """Make modules next to the config file importable for dotted callback paths."""
    config_path = config_path.resolve()
    if str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="argtree",
        description="Parse a command line against an argument tree loaded from a file.",
        epilog="Exits with 0 on success, otherwise with the error bitmask.",
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        default=None,
        help="Console log format, defaults to $ARGTREE_LOG_MODE or 'cli'.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging on the console.",
    )
    parser.add_argument("config", type=Path, help="YAML or TOML argument tree.")
    parser.add_argument(
        "args",
        nargs=REMAINDER,
        help="Tokens to parse, without the program name.",
    )
    return parser


def run(args: Namespace) -> int:
    command_line = loader(bootstrap(args.config))
    code = command_line.parse([command_line.program, *args.args])
    console.print(command_line.parsed_args().to_tree())
    if code & ErrorCode.HELP_WILDCARD:
        return 0
    if code != NO_ERROR:
        message = escape(describe_error(code))
        console.print(f"[usage.error]{message}[/]", soft_wrap=True)
        return int(code)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = get_parser().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    try:
        return run(args)
    except (ArgTreeError, FileNotFoundError) as error:
        console.print(f"[usage.error]{escape(str(error))}[/]", soft_wrap=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
