from .errors import ErrorKind, ParseError
from .parser import parse_duration
from .totals import (
    accumulate,
    argument_tokens,
    checked_add,
    format_duration,
    stdin_tokens,
)
from .util import DAY, HOUR, MINUTE, SECOND

__all__ = [
    "ErrorKind",
    "ParseError",
    "parse_duration",
    "accumulate",
    "checked_add",
    "format_duration",
    "argument_tokens",
    "stdin_tokens",
    "DAY",
    "HOUR",
    "MINUTE",
    "SECOND",
]
