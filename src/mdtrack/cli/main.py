"""CLI entry point for mdtrack."""

import argparse
import sys
from typing import NoReturn

from loguru import logger

from .. import __version__
from ..core.config import Config
from ..core.exceptions import MdTrackError
from ..render import render_error
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="mdtrack",
        description="Markdown habit tracker - progress from tables and notes",
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log debug output to stderr"
    )
    parser.add_argument(
        "-c",
        "--config",
        help="TOML config file (default: MDTRACK_CONFIG or environment only)",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    # Rendering commands
    render_parser = subparsers.add_parser(
        "render", help="Render the trackers in a note"
    )
    commands.add_note_arguments(render_parser)
    render_parser.add_argument(
        "--json", action="store_true", help="Print tracker data as JSON"
    )

    watch_parser = subparsers.add_parser(
        "watch", help="Render a note's trackers and refresh on vault changes"
    )
    commands.add_note_arguments(watch_parser)
    commands.add_watch_arguments(watch_parser)

    # Validation commands
    check_parser = subparsers.add_parser(
        "check", help="Validate tracker blocks without scanning"
    )
    check_parser.add_argument("file", help="Note or block file ('-' for stdin)")

    subparsers.add_parser("examples", help="Print example tracker blocks")

    return parser


def configure_logging(verbose: bool) -> None:
    """Send loguru output to stderr at DEBUG or WARNING level."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def main() -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()
    configure_logging(args.verbose)

    try:
        config = Config.from_env_or_file(args.config)

        if args.command == "render":
            commands.handle_render(args, config)
        elif args.command == "watch":
            commands.handle_watch(args, config)
        elif args.command == "check":
            commands.handle_check(args, config)
        elif args.command == "examples":
            commands.handle_examples(args, config)
        else:
            parser.print_help()

        sys.exit(0)
    except MdTrackError as e:
        print(render_error(e), file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
