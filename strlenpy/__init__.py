"""Text lengths and ranges counted in bytes, code points, grapheme clusters and UTF-16 units."""

from strlenpy.api import (
    length_to_range,
    measure_length,
    merge,
    next_range,
    range_from_point,
    range_from_range,
    replace_range,
    sequence_ranges,
    shift,
    shift_range_after,
    slice_text,
)
from strlenpy.diagnostics import (
    InvalidRangeError,
    InvalidTextEncodingError,
    LengthOverflowError,
    RangeParseError,
    StrLenError,
)
from strlenpy.options import DEFAULT_OPTIONS, MeasureOptions
from strlenpy.sequence import iter_sequence, sequence, sequence_lengths
from strlenpy.text import (
    ZERO,
    ZERO_RANGE,
    Encoding,
    LinearRange,
    RangeRelation,
    StringRange,
    TextLength,
    compare_ranges,
    measure,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "ZERO",
    "ZERO_RANGE",
    "Encoding",
    "InvalidRangeError",
    "InvalidTextEncodingError",
    "LengthOverflowError",
    "LinearRange",
    "MeasureOptions",
    "RangeParseError",
    "RangeRelation",
    "StrLenError",
    "StringRange",
    "TextLength",
    "compare_ranges",
    "iter_sequence",
    "length_to_range",
    "measure",
    "measure_length",
    "merge",
    "next_range",
    "range_from_point",
    "range_from_range",
    "replace_range",
    "sequence",
    "sequence_lengths",
    "sequence_ranges",
    "shift",
    "shift_range_after",
    "slice_text",
]
