from enum import Enum

from typing_extensions import override


class ErrorKind(Enum):
    EMPTY_INPUT = "empty duration"
    INVALID_NUMBER = "expected a number"
    UNKNOWN_UNIT = "unknown unit"
    TRAILING_GARBAGE = "unexpected trailing text"
    OVERFLOW = "duration out of range"


class ParseError(ValueError):
    """Raised when a token cannot be turned into a duration.

    Carries the raw token so callers can report exactly what failed.
    """

    def __init__(self, token: str, kind: ErrorKind, detail: str | None = None):
        self.token: str = token
        self.kind: ErrorKind = kind
        self.detail: str | None = detail
        super().__init__(token, kind, detail)

    @override
    def __str__(self) -> str:
        message = f"cannot parse {self.token!r}: {self.kind.value}"
        if self.detail:
            message += f" ({self.detail})"
        return message
