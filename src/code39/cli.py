"""
Command-line wrapper around the Code 39 generator.

Usage examples:
    code39 "HELLO"
    code39 -- "-A1"
    code39 "HELLO-123" --format vector --bar-height 150 -o hello.svg
    code39 --list-characters

Option precedence: command line > --config file (or ./code39.json) > defaults.
Exit codes: 0 success, 1 invalid barcode data, 2 invalid configuration/usage.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from src import __version__, get_logger, load_config
from src.code39.config import RenderConfig
from src.code39.errors import InvalidConfigurationError
from src.code39.generator import generate, supported_characters
from src.model.enums import OutputFormat

logger = get_logger(__name__)

__all__ = ["build_parser", "main"]

EXIT_OK = 0
EXIT_INVALID_DATA = 1
EXIT_INVALID_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="code39",
        description="Render a Code 39 barcode as block-character text or SVG.",
        epilog="Data starting with '-' must follow '--', e.g. code39 -- -A1",
    )
    parser.add_argument(
        "data",
        nargs="?",
        help="Data to encode (0-9, A-Z, -. $/+%%); use '--' before data starting with '-'",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        help="Output format (default: text)",
    )
    parser.add_argument("--module-width", type=int, help="Narrow element width (vector only)")
    parser.add_argument("--bar-height", type=int, help="Bar height (vector only)")
    parser.add_argument("--quiet-zone", type=int, help="Blank margin on each side")
    parser.add_argument("-c", "--config", type=Path, help="JSON config file (must exist)")
    parser.add_argument("-o", "--output", type=Path, help="Write output to file instead of stdout")
    parser.add_argument(
        "--list-characters",
        action="store_true",
        help="Print the supported characters and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _collect_options(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Merge defaults, the config file and command-line flags.

    Raises:
        OSError, ValueError: --config names a missing or malformed file.
    """
    options: Dict[str, Any] = load_config(args.config, strict=args.config is not None)
    defaults = RenderConfig().to_dict()
    # An alias in the file replaces the untouched default of its field;
    # a clash with an explicitly changed field is left for from_dict to reject.
    for key in list(options):
        name = RenderConfig.canonical_key(key)
        if name != key and options.get(name) == defaults.get(name):
            options.pop(name, None)

    overrides = {
        "format": args.format,
        "module_width": args.module_width,
        "bar_height": args.bar_height,
        "quiet_zone": args.quiet_zone,
    }
    for name, value in overrides.items():
        if value is None:
            continue
        for key in list(options):
            if RenderConfig.canonical_key(key) == name:
                del options[key]
        options[name] = value
    return options


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_characters:
        for char in supported_characters():
            print(repr(char))
        return EXIT_OK

    if args.data is None:
        parser.print_usage(sys.stderr)
        print("code39: error: data is required", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    try:
        options = _collect_options(args)
    except (OSError, ValueError) as e:
        print(f"code39: cannot load config {args.config}: {e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    try:
        config = RenderConfig.from_dict(options)
        result = generate(args.data, config)
    except InvalidConfigurationError as e:
        print(f"code39: {e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    if not result.ok:
        assert result.error is not None
        print(f"code39: {result.error.message}", file=sys.stderr)
        return EXIT_INVALID_DATA

    output = result.value or ""
    if args.output is not None:
        args.output.write_text(output, encoding="utf-8")
        logger.info("Barcode written to %s", args.output)
    else:
        print(output)
    return EXIT_OK
