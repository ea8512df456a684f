"""Command line entry point: highlight a file or standard input."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from synk.highlighter import colorize, highlight
from synk.languages.registry import available_languages


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="synk", description="Print source code with ANSI syntax colours."
    )
    parser.add_argument(
        "file", nargs="?", default="-",
        help="file to highlight; '-' or nothing reads standard input",
    )
    parser.add_argument(
        "-l", "--language", default="rust",
        help="language of the code (default: rust)",
    )
    parser.add_argument(
        "--list", action="store_true", help="list known languages and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command; returns the exit status."""
    args = _parser().parse_args(argv)
    if args.list:
        print("\n".join(available_languages()))
        return 0
    try:
        if args.file == "-":
            code = sys.stdin.read()
        else:
            code = Path(args.file).read_text(encoding="utf-8")
    except OSError as exc:
        print(f"synk: {exc}", file=sys.stderr)
        return 1
    colorize(highlight(code, args.language))
    return 0


if __name__ == "__main__":
    sys.exit(main())