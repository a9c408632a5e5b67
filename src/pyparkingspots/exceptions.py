"""Library exceptions."""

from __future__ import annotations


class PyParkingSpotsError(Exception):
    """Base exception for the library."""

    error_type = "unknown"
    default_error_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
    ) -> None:
        text = message if message is not None else detail
        super().__init__(text or "")
        self.error_code = error_code if error_code is not None else self.default_error_code
        self.detail = detail if detail is not None else message
        self.user_message = user_message


class DecodeError(PyParkingSpotsError):
    """Raised when a response document cannot be decoded."""

    error_type = "decode"
    default_error_code = "decode_error"


class ParseError(PyParkingSpotsError):
    """Raised when a date string does not match its pattern."""

    error_type = "parse"
    default_error_code = "parse_error"


class ValidationError(PyParkingSpotsError):
    """Raised when inputs fail validation."""

    error_type = "validation"
    default_error_code = "validation_error"
