"""Command-line interface for mdman."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .compiler import compile_manpage
from .config import DEFAULT_INPUT, DEFAULT_OUTPUT
from .coverage import find_undocumented, read_option_list
from .errors import MalformedDocument
from .markdown import OptionRecord, extract_options
from .mdoc import HEADER, ENV_HEADER, FOOTER

logger = logging.getLogger(__name__)


def print_records(title: str, records: List[OptionRecord]):
    """Print extracted records to stdout."""
    print(f"{title} ({len(records)}):")
    for record in records:
        print(f"  {record.name:<40} {record.description}")


def is_up_to_date(page: str, output: Path) -> bool:
    """Check whether ``output`` already holds exactly ``page``."""
    if not output.exists():
        return False
    return output.read_bytes() == page.encode('utf-8')


def configure_logging(verbosity: int):
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run(args: argparse.Namespace) -> int:
    """Run one compilation as requested by ``args`` and return the exit status."""
    text = args.input.read_text(encoding='utf-8')

    if args.list:
        tables = extract_options(text.split('\n'))
        print_records("Options", list(tables.flags))
        print_records("Environment variables", list(tables.env_vars))
        return 0

    page = compile_manpage(text, HEADER, ENV_HEADER, FOOTER)
    status = 0

    if args.check:
        if is_up_to_date(page, args.output):
            print(f"{args.output} is up to date")
        else:
            print(f"{args.output} is out of date")
            status = 1
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_bytes(page.encode('utf-8'))
        print(f"Wrote {args.output}")

    if args.require is not None:
        options = read_option_list(args.require.read_text(encoding='utf-8'))
        missing = find_undocumented(options, page)
        logger.info("Checked %d options, %d missing", len(options), len(missing))
        for option in missing:
            print(f"Missing option {option} in {args.output}")
        if missing:
            status = 1

    return status


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Generate an mdoc(7) manual page from a Markdown CLI reference.",
        epilog="Example: mdman doc/api/cli.md -o doc/node.1"
    )
    parser.add_argument("input", nargs='?', type=Path, default=DEFAULT_INPUT,
                        help=f"Markdown source (default: {DEFAULT_INPUT})")
    parser.add_argument("-o", "--output", type=Path, default=DEFAULT_OUTPUT,
                        help=f"Manual page to write (default: {DEFAULT_OUTPUT})")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--check", action="store_true",
                      help="Fail if the output file differs from the generated page instead of writing it")
    mode.add_argument("--list", action="store_true",
                      help="Print the extracted options and environment variables instead of writing the page")
    parser.add_argument("--require", type=Path, metavar="FILE",
                        help="File listing option spellings that must appear in the page")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    if args.list and args.require is not None:
        parser.error("--require cannot be combined with --list")
    configure_logging(args.verbose)

    try:
        return run(args)
    except MalformedDocument as e:
        print(f"error: {args.input}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
