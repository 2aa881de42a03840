from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from rich.console import Console

from .errors import FinderError
from .finder import InstallFinder, TraversalConfig, resolve_root
from .formatting import FIELDS, FORMATS, display_items
from .logging import configure_logging


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    description = (
        "Find WordPress installs on the filesystem.\n\n"
        "Recursively iterates subdirectories of <path> and reports every\n"
        "wp-includes directory holding a version.php file. Known paths such\n"
        "as node_modules are skipped unless --skip-ignored-paths is given.\n\n"
        "Examples:\n"
        "  wpfind /var/www\n"
        "  wpfind ~/projects --max-depth 3 --format json\n"
        "  wpfind /srv --exclude 'backups/' --field version_path"
    )
    parser = argparse.ArgumentParser(
        prog="wpfind",
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", help="Path to search the subdirectories of")
    parser.add_argument("--skip-ignored-paths", action="store_true", help="Skip the paths that are ignored by default")
    parser.add_argument(
        "--max-depth",
        "--max_depth",
        dest="max_depth",
        type=_non_negative_int,
        default=None,
        help="Only recurse to a specified depth, inclusive",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Gitignore-style pattern of directories to skip (repeatable)",
    )
    parser.add_argument("--fields", help=f"Limit the output to specific row fields ({', '.join(FIELDS)})")
    parser.add_argument("--field", help="Output a specific field for each row")
    parser.add_argument("--format", choices=FORMATS, default="table", help="Render output in a specific format (default: table)")
    parser.add_argument("--verbose", action="store_true", help="Log useful information while searching")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--color", dest="color", action="store_true", default=None, help="Force rich-colored output")
    parser.add_argument("--no-color", dest="color", action="store_false", help="Disable colored output")
    return parser


def configure_console(color_flag: Optional[bool]) -> Console:
    if color_flag is True:
        return Console(stderr=True)
    if color_flag is False:
        return Console(stderr=True, no_color=True)
    return Console(stderr=True, no_color=not sys.stderr.isatty())


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    console = configure_console(args.color)
    logger = configure_logging(console, verbose=args.verbose, debug=args.debug)

    try:
        config = TraversalConfig(
            root=resolve_root(args.path),
            skip_ignored_paths=args.skip_ignored_paths,
            max_depth=args.max_depth,
            verbose=args.verbose,
            exclude=tuple(args.exclude),
            logger=logger,
        )
        results = InstallFinder(config).run()
        display_items(
            results.values(),
            format=args.format,
            fields=args.fields,
            field=args.field,
        )
    except FinderError as exc:
        if args.debug:
            raise
        console.print(f"[red]Error:[/] {exc}")
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
