"""Diagnostics."""

from strlenpy.diagnostics.codes import (
    LENGTH_OVERFLOW,
    RANGE_INVALID,
    RANGE_PARSE_ERROR,
    TEXT_INVALID_ENCODING,
    ErrorSpec,
)
from strlenpy.diagnostics.errors import (
    InvalidRangeError,
    InvalidTextEncodingError,
    LengthOverflowError,
    RangeParseError,
    StrLenError,
)

__all__ = [
    "LENGTH_OVERFLOW",
    "RANGE_INVALID",
    "RANGE_PARSE_ERROR",
    "TEXT_INVALID_ENCODING",
    "ErrorSpec",
    "InvalidRangeError",
    "InvalidTextEncodingError",
    "LengthOverflowError",
    "RangeParseError",
    "StrLenError",
]
