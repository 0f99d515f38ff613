"""Exceptions raised by measurement and range arithmetic."""

from __future__ import annotations

from typing import ClassVar

from strlenpy.diagnostics.codes import (
    LENGTH_OVERFLOW,
    RANGE_INVALID,
    RANGE_PARSE_ERROR,
    TEXT_INVALID_ENCODING,
    ErrorSpec,
)


class StrLenError(ValueError):
    """Base error carrying a structured `ErrorSpec`."""

    spec: ClassVar[ErrorSpec]

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        message = self.spec.message if detail is None else f"{self.spec.message} {detail}"
        super().__init__(message)

    @property
    def code(self) -> str:
        return self.spec.code

    @property
    def hint(self) -> str | None:
        return self.spec.hint


class InvalidTextEncodingError(StrLenError):
    spec = TEXT_INVALID_ENCODING


class LengthOverflowError(StrLenError):
    spec = LENGTH_OVERFLOW


class InvalidRangeError(StrLenError):
    spec = RANGE_INVALID


class RangeParseError(StrLenError):
    spec = RANGE_PARSE_ERROR
