"""Summing durations and rendering totals back into text."""

import logging
from collections.abc import Iterable, Iterator

from durationcalc.errors import ErrorKind, ParseError
from durationcalc.parser import SIGNS, parse_duration, strip_comment
from durationcalc.util import HOUR, MAX_SECONDS, MINUTE

logger = logging.getLogger(__name__)


def checked_add(total: int, value: int, token: str) -> int:
    """Add ``value`` to ``total``, raising OVERFLOW outside the supported range."""
    result = total + value
    if abs(result) > MAX_SECONDS:
        raise ParseError(
            token, ErrorKind.OVERFLOW, f"total would exceed {MAX_SECONDS}s"
        )
    return result


def accumulate(initial: int, tokens: Iterable[str]) -> int:
    """Return ``initial`` plus the parsed value of every token, in order.

    Stops at the first token that fails to parse; the raised ``ParseError``
    names that token.
    """
    total = initial
    for token in tokens:
        total = checked_add(total, parse_duration(token), token)
        logger.debug("running total %d", total, extra={"token": token})
    return total


def stdin_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Yield the lines that hold a duration, skipping blank and comment-only ones."""
    for line in lines:
        if strip_comment(line).strip():
            yield line


def argument_tokens(args: Iterable[str]) -> Iterator[str]:
    """Yield argument tokens, folding a standalone sign into the next argument.

    ``["23m", "-", "15s"]`` yields ``"23m"`` then ``"- 15s"``. A sign with
    nothing after it is yielded alone and fails to parse as an empty duration.
    """
    pending: str | None = None
    for arg in args:
        if pending is not None:
            yield f"{pending} {arg}"
            pending = None
        elif arg.strip() in SIGNS:
            pending = arg.strip()
        else:
            yield arg
    if pending is not None:
        yield pending


def format_duration(seconds: int, compact: bool = False) -> str:
    """Render whole seconds as ``<H>h <MM>m <SS>s``.

    Days are folded into the hour count and the sign prefixes the whole
    string, e.g. ``-52h 40m 00s``. ``compact`` drops the spaces.
    """
    sign = "-" if seconds < 0 else ""
    remaining = abs(seconds)
    hours, remaining = divmod(remaining, HOUR)
    minutes, secs = divmod(remaining, MINUTE)
    separator = "" if compact else " "
    return f"{sign}{hours}h{separator}{minutes:02}m{separator}{secs:02}s"
