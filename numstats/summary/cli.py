"""CLI entrypoint for the stats command."""

from __future__ import annotations

import argparse
import textwrap

import structlog

from numstats.common.constants import PROGNAME, STDIN_SENTINEL, VERSION
from numstats.common.logging import configure_structlog
from numstats.summary.collector import collect_values, open_unit
from numstats.summary.report import DisplayOptions, render, title_line
from numstats.summary.stats import summarize


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGNAME,
        description="Descriptive statistics for files of numbers, one per line.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""\
            examples:
              seq 100 | stats                # read stdin
              stats -ct a.txt b.txt          # one line per file, with titles
        """),
    )
    parser.add_argument(
        "files", nargs="*", metavar="FILE",
        help=f"Input files; '{STDIN_SENTINEL}' or none reads standard input",
    )
    parser.add_argument(
        "-c", "--compact", action="store_true",
        help="display each file on one line",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="suppress error messages",
    )
    parser.add_argument(
        "-s", "--separators", action="store_true",
        help="use thousand separators",
    )
    parser.add_argument(
        "-t", "--title", action="store_true",
        help="display column titles (compact mode)",
    )
    parser.add_argument(
        "-f", "--fixed", action="store_true",
        help="print floats with 5 decimal places",
    )
    parser.add_argument("-v", "--version", action="version", version=VERSION)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args = _build_parser().parse_args(argv)

    configure_structlog(quiet=args.quiet)
    log = structlog.get_logger(PROGNAME)

    options = DisplayOptions(
        compact=args.compact,
        separators=args.separators,
        fixed=args.fixed,
    )

    if options.compact and args.title:
        print(title_line())

    status = 0
    for path in args.files or [STDIN_SENTINEL]:
        try:
            with open_unit(path) as stream:
                values = collect_values(stream, unit=path)
        except OSError as exc:
            status = 1
            log.error("open_failed", unit=path, error=exc.strerror or str(exc))
            continue

        print(render(path, summarize(values), options), flush=True)

    return status
