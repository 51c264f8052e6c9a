"""Command-line entry points: ``playnav`` and ``playnav-dump``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from pydantic import ValidationError

from playnav import __version__
from playnav.models.errors import NavigatorError
from playnav.models.request import NavigationRequest
from playnav.navigator.pipeline import Navigator
from playnav.parser.dump import dump_tree
from playnav.settings import Settings

logger = logging.getLogger("playnav.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level, stream=sys.stderr)
    logging.getLogger("playnav").setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playnav",
        usage="playnav FILENAME ROW COLUMN [--debug]",
        description="Print the file referenced at a position in an Ansible playbook or role.",
    )
    parser.add_argument("args", nargs="*", metavar="FILENAME ROW COLUMN")
    parser.add_argument(
        "--debug", action="store_true", help="If true, turns on debug output"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def navigate(
    file_name: str, row: str, column: str, settings: Settings, out: TextIO
) -> None:
    """Resolve the reference at (row, column) and write the target path to ``out``."""
    request = NavigationRequest(file=Path(file_name), row=row, column=column)
    result = Navigator(settings).navigate(request)
    if result.target:
        out.write(result.target)


def _fail(message: str, debug: bool) -> int:
    """Report a failure: ``Error:`` on stderr and status 1 in debug mode, else silent."""
    if debug:
        print(f"Error: {message}", file=sys.stderr)
        return 1
    logger.debug("%s", message)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for ``playnav``.

    Failures are silent with exit status 0 unless debug mode is on, so
    editors can bind the command without handling errors.
    """
    parser = build_parser()
    args, unknown = parser.parse_known_args(argv)
    try:
        settings = Settings()
    except ValidationError as exc:
        return _fail(f"invalid settings: {exc}", args.debug)
    debug = args.debug or settings.debug
    _configure_logging("DEBUG" if debug else settings.effective_log_level)

    if unknown:
        return _fail(f"unrecognized arguments: {' '.join(unknown)}", debug)
    if len(args.args) != 3:
        parser.print_usage(sys.stderr)
        return 0

    file_name, row, column = args.args
    try:
        navigate(file_name, row, column, settings, sys.stdout)
    except (NavigatorError, ValidationError) as exc:
        return _fail(str(exc), debug)
    return 0


def dump_main(argv: list[str] | None = None) -> int:
    """Entry point for ``playnav-dump``: dump every YAML file below a path."""
    parser = argparse.ArgumentParser(
        prog="playnav-dump",
        usage="playnav-dump PATH",
        description="Print the generic YAML node tree of every .yaml/.yml file below PATH.",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH")
    args, unknown = parser.parse_known_args(argv)
    try:
        settings = Settings()
    except ValidationError as exc:
        return _fail(f"invalid settings: {exc}", False)
    _configure_logging(settings.effective_log_level)

    if unknown:
        return _fail(f"unrecognized arguments: {' '.join(unknown)}", settings.debug)
    if len(args.paths) != 1:
        parser.print_usage(sys.stderr)
        return 0

    for line in dump_tree(Path(args.paths[0])):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
