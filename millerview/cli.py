"""Command-line front door for millerview.

Parses CLI options, merges them over the config file, validates the start
directory, and dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import load_browser_config
from .layout import MIN_PANE_COUNT
from .pane_model import DirectoryUnreadable, available_sort_orders
from .runtime import run_browser
from .ui_theme import available_theme_names


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _pane_count(value: str) -> int:
    parsed = _positive_int(value)
    if parsed < MIN_PANE_COUNT:
        raise argparse.ArgumentTypeError(f"value must be >= {MIN_PANE_COUNT}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse directories in side-by-side Miller columns inside the terminal."
    )
    parser.add_argument("path", nargs="?", default=None, help="Start directory. Defaults to current directory.")
    parser.add_argument("--panes", type=_pane_count, default=None, help="Number of visible panes (>= 2).")
    parser.add_argument("--width", type=_positive_int, default=None, help="Browser region width in columns.")
    parser.add_argument("--height", type=_positive_int, default=None, help="Browser region height in rows.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--sort",
        choices=available_sort_orders(),
        default=None,
        help="Entry sort order.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write a debug log to PATH.")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level (with --log-file).")
    return parser


def configure_logging(log_file: str | None, debug: bool) -> None:
    """Log to a file only; the terminal belongs to the UI."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the browser on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, args.debug)

    config = load_browser_config()
    if args.theme is not None:
        config.theme = args.theme
    if args.panes is not None:
        config.pane_count = args.panes
    if args.width is not None:
        config.width = args.width
    if args.height is not None:
        config.height = args.height
    if args.sort is not None:
        config.sort_order = args.sort

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path) if args.path else default_path
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    try:
        run_browser(path, config, no_color=args.no_color)
    except DirectoryUnreadable as exc:
        raise SystemExit(f"Cannot read directory: {exc.directory}") from exc


if __name__ == "__main__":
    main()
