"""Parsing of composite duration strings such as ``3d 20h 10m 15s``.

A token carries at most one sign, and that sign applies to the sum of all
of its unit amounts: ``-5m 20s`` is minus five minutes twenty seconds, not
minus five minutes plus twenty seconds.
"""

import logging

from durationcalc.errors import ErrorKind, ParseError
from durationcalc.util import MAX_SECONDS, UNITS

logger = logging.getLogger(__name__)

COMMENT = "#"
SIGNS = {"+": 1, "-": -1}
TOTAL_MARKERS = ("t", "T")
# Any amount with more significant digits is past MAX_SECONDS
MAX_DIGITS = len(str(MAX_SECONDS))


def strip_comment(text: str) -> str:
    """Return ``text`` without any trailing ``#`` comment."""
    return text.split(COMMENT, 1)[0]


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _is_digit(char: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits
    return "0" <= char <= "9"


def parse_duration(token: str) -> int:
    """Parse a signed composite duration into whole seconds.

    Raises:
        ParseError: with the matching ``ErrorKind`` when ``token`` does not
            follow the ``[sign][t] <int><unit> ...`` grammar.
    """
    text = strip_comment(token).strip()
    if not text:
        raise ParseError(token, ErrorKind.EMPTY_INPUT)

    pos = 0
    sign = SIGNS.get(text[pos], 0)
    if sign:
        pos = _skip_space(text, pos + 1)
    else:
        sign = 1
    if pos < len(text) and text[pos] in TOTAL_MARKERS:
        pos = _skip_space(text, pos + 1)
    if pos == len(text):
        raise ParseError(token, ErrorKind.EMPTY_INPUT, "no amounts after sign")

    total = 0
    pairs = 0
    while pos < len(text):
        digits_start = pos
        while pos < len(text) and _is_digit(text[pos]):
            pos += 1
        if pos == digits_start:
            if pairs:
                raise ParseError(
                    token, ErrorKind.TRAILING_GARBAGE, repr(text[digits_start:])
                )
            raise ParseError(
                token, ErrorKind.INVALID_NUMBER, f"found {text[pos]!r}"
            )
        digits = text[digits_start:pos].lstrip("0")
        if len(digits) > MAX_DIGITS:
            raise ParseError(token, ErrorKind.OVERFLOW, f"{len(digits)}-digit amount")
        count = int(digits or "0")

        unit = text[pos].lower() if pos < len(text) else ""
        if unit not in UNITS:
            raise ParseError(
                token,
                ErrorKind.UNKNOWN_UNIT,
                f"{unit!r} after {count}" if unit else f"missing after {count}",
            )
        pos += 1

        total += count * UNITS[unit]
        if total > MAX_SECONDS:
            raise ParseError(token, ErrorKind.OVERFLOW)
        pairs += 1
        logger.debug("scanned %d%s", count, unit, extra={"token": token})

        pos = _skip_space(text, pos)

    return sign * total
