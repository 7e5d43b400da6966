"""passcraft command-line interface.

Usage examples:
    python -m passcraft generate -n 20 -c 5
    python -m passcraft generate --memorable --emojis --copy
    python -m passcraft generate --mode hybrid --icon 🐶 --icon 🦊 --cell 0,0
    python -m passcraft score "Tr0ub4dor&3" --icon 🐼
    python -m passcraft icons food
"""

import argparse
import sys

from passcraft.clipboard import COPY_FAILED, COPY_OK, copy_to_clipboard
from passcraft.config import load_settings
from passcraft.generator import generate_password
from passcraft.log import configure_logging
from passcraft.options import (
    GRID_SIZES,
    ICON_THEMES,
    MAX_LENGTH,
    MIN_LENGTH,
    MODES,
    GraphicalOptions,
    PasswordOptions,
    empty_grid,
)
from passcraft.strength import score_strength


def _cell(value: str) -> tuple[int, int]:
    try:
        row, col = (int(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected ROW,COL (e.g. 0,3), got {value!r}"
        ) from None
    return row, col


def main(argv: list[str] | None = None) -> int:
    # Settings problems are logged, so stderr logging must exist first.
    configure_logging()
    settings = load_settings()

    parser = argparse.ArgumentParser(
        prog="passcraft",
        description="Generate passwords and score their strength.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log debug events to stderr",
    )
    sub = parser.add_subparsers(dest="command")

    # Shared graphical selection flags
    graphical_p = argparse.ArgumentParser(add_help=False)
    graphical_p.add_argument(
        "--icon", action="append", default=[], metavar="ICON",
        help="Select an icon (repeatable, max 8)",
    )
    graphical_p.add_argument(
        "--cell", action="append", default=[], type=_cell, metavar="ROW,COL",
        help="Set a pattern grid cell (repeatable, max 9)",
    )
    graphical_p.add_argument(
        "--grid-size", type=int, choices=GRID_SIZES, default=5,
        help="Pattern grid side (default: 5)",
    )

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser(
        "generate", parents=[graphical_p], help="Generate passwords",
    )
    gen_p.add_argument(
        "-n", "--length", type=int, default=settings.default_length,
        help=f"Password length, {MIN_LENGTH}-{MAX_LENGTH} "
             f"(default: {settings.default_length})",
    )
    gen_p.add_argument("--no-uppercase", action="store_true")
    gen_p.add_argument("--no-digits", action="store_true")
    gen_p.add_argument("--no-symbols", action="store_true")
    gen_p.add_argument("--emojis", action="store_true", help="Include emojis")
    gen_p.add_argument(
        "-m", "--memorable", action="store_true",
        help="Build from dictionary words instead of random characters",
    )
    gen_p.add_argument(
        "--mode", choices=MODES, default="text",
        help="Generation mode (default: text)",
    )
    gen_p.add_argument(
        "--theme", choices=list(ICON_THEMES), default="animals",
        help="Icon theme (default: animals)",
    )
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )
    gen_p.add_argument(
        "--copy", action="store_true",
        help="Copy the last generated password to the clipboard",
    )

    # ── score ──────────────────────────────────────────────────────────
    score_p = sub.add_parser(
        "score", parents=[graphical_p], help="Score password strength",
    )
    score_p.add_argument("passwords", nargs="+", help="Passwords to score")

    # ── icons ──────────────────────────────────────────────────────────
    icons_p = sub.add_parser("icons", help="List icon themes")
    icons_p.add_argument("theme", nargs="?", choices=list(ICON_THEMES))

    args = parser.parse_args(argv)

    configure_logging(
        "DEBUG" if args.verbose else settings.log_level,
        json_output=settings.log_json,
    )

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "score":
        return _cmd_score(args)
    if args.command == "icons":
        return _cmd_icons(args)

    parser.print_help()
    return 0


def _graphical_options(args: argparse.Namespace, **extra) -> GraphicalOptions:
    grid = [list(row) for row in empty_grid(args.grid_size)]
    for row, col in args.cell:
        if not (0 <= row < args.grid_size and 0 <= col < args.grid_size):
            raise ValueError(
                f"Cell {row},{col} is outside the "
                f"{args.grid_size}x{args.grid_size} grid"
            )
        grid[row][col] = True
    return GraphicalOptions(icons=tuple(args.icon), grid=grid, **extra)


def _strength_line(report: dict) -> str:
    return f"{report['label']}, {report['score']:.0f}/100, {report['entropy']} bits"


def _cmd_generate(args: argparse.Namespace) -> int:
    try:
        options = PasswordOptions(
            args.length,
            uppercase=not args.no_uppercase,
            digits=not args.no_digits,
            symbols=not args.no_symbols,
            emojis=args.emojis,
            memorable=args.memorable,
        )
        graphical = _graphical_options(args, mode=args.mode, theme=args.theme)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    pwd = ""
    for _ in range(args.count):
        pwd = generate_password(options, graphical)
        report = score_strength(pwd, graphical)
        print(f"  {pwd}  ({_strength_line(report)})")

    if args.copy and pwd:
        if not copy_to_clipboard(pwd):
            print(COPY_FAILED, file=sys.stderr)
            return 1
        print(COPY_OK)

    return 0


def _cmd_score(args: argparse.Namespace) -> int:
    try:
        graphical = _graphical_options(args)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for pwd in args.passwords:
        report = score_strength(pwd, graphical)
        filled = round(report["score"] / 10)
        bar = "#" * filled + "-" * (10 - filled)
        print(f"  '{pwd}'")
        print(f"            Strength: [{bar}] {_strength_line(report)}")
        print(f"            {report['hint']}")

    return 0


def _cmd_icons(args: argparse.Namespace) -> int:
    themes = [args.theme] if args.theme else list(ICON_THEMES)
    for theme in themes:
        print(f"  {theme:<8} {' '.join(ICON_THEMES[theme])}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
