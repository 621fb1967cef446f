from __future__ import annotations

from enum import Enum
from typing import Optional


class SharecartError(Exception):
    """Base exception for everything raised by this package."""


class ParseErrorKind(str, Enum):
    MALFORMED_LINE = "malformed_line"
    INVALID_VALUE = "invalid_value"


class ParseError(SharecartError, ValueError):
    """Raised when Sharecart text cannot be turned into a record.

    ``key`` is the key as written in the file for value failures and ``None``
    for lines that could not be split into a key and a value at all.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        line_no: int,
        reason: str,
        key: Optional[str] = None,
        line: str = "",
    ) -> None:
        self.kind = kind
        self.line_no = line_no
        self.reason = reason
        self.key = key
        self.line = line
        where = f"line {line_no}"
        if key is not None:
            where += f" (key {key!r})"
        super().__init__(f"{where}: {reason}")


class ConfigError(SharecartError):
    """Raised when parser options cannot be loaded."""
