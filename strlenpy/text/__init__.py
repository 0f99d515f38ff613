"""Text lengths and ranges."""

from strlenpy.text.compare import RangeRelation, compare_ranges
from strlenpy.text.length import ENCODINGS, ZERO, Encoding, TextInput, TextLength, decode_text, measure
from strlenpy.text.linear import LinearRange
from strlenpy.text.size import ISIZE_MAX, ISIZE_MIN
from strlenpy.text.string_range import ZERO_RANGE, StringRange

__all__ = [
    "ENCODINGS",
    "ISIZE_MAX",
    "ISIZE_MIN",
    "ZERO",
    "ZERO_RANGE",
    "Encoding",
    "LinearRange",
    "RangeRelation",
    "StringRange",
    "TextInput",
    "TextLength",
    "compare_ranges",
    "decode_text",
    "measure",
]
