"""Value collection from files or standard input."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import BinaryIO

import structlog

from numstats.common.constants import STDIN_SENTINEL


def _utf8_lines(raw: BinaryIO) -> Iterator[str]:
    """Decode *raw* one line at a time, strictly as UTF-8.

    Decoding per line means a bad byte surfaces as ``UnicodeDecodeError``
    on its own line, after every earlier line has been yielded.
    """
    for chunk in raw:
        yield chunk.decode("utf-8")


@contextmanager
def open_unit(path: str) -> Iterator[Iterable[str]]:
    """Yield the lines of *path*; ``-`` means standard input.

    Input is read as bytes and decoded as strict UTF-8 regardless of the
    locale. Files are closed on exit, stdin is left open. ``OSError``
    from opening a file propagates to the caller.
    """
    if path == STDIN_SENTINEL:
        raw = getattr(sys.stdin, "buffer", None)
        # already-decoded text stream with no byte layer (e.g. io.StringIO)
        yield sys.stdin if raw is None else _utf8_lines(raw)
        return
    with open(path, "rb") as fh:
        yield _utf8_lines(fh)


def parse_value(text: str) -> float:
    """Parse one trimmed numeric literal.

    Raises ``ValueError`` for anything that is not a plain float literal.
    """
    # float() tolerates digit-group underscores and non-ASCII digits,
    # a number-per-line file does not
    if "_" in text or not text.isascii():
        raise ValueError(f"could not convert string to float: {text!r}")
    return float(text)


def collect_values(lines: Iterable[str], unit: str) -> list[float]:
    """Read every line of one input unit into a list of finite floats.

    Unparseable and non-finite lines are dropped with a warning. A read
    error ends the unit early; whatever was read before it is kept.
    """
    log = structlog.get_logger("collector")
    values: list[float] = []
    skipped = 0
    lineno = 0
    it = iter(lines)
    while True:
        try:
            line = next(it)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError) as exc:
            log.error("read_failed", unit=unit, line=lineno + 1, error=str(exc))
            break
        lineno += 1

        text = line.strip()
        try:
            x = parse_value(text)
        except ValueError:
            skipped += 1
            log.warning("unparseable_line", unit=unit, line=lineno, text=text)
            continue
        if not math.isfinite(x):
            skipped += 1
            log.warning("non_finite_value", unit=unit, line=lineno, text=text)
            continue
        values.append(x)

    log.debug("unit_collected", unit=unit, accepted=len(values), skipped=skipped)
    return values
