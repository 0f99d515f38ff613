"""Boundary operations exposed to host code."""

from __future__ import annotations

from collections.abc import Iterable

from strlenpy.options import MeasureOptions
from strlenpy.sequence import sequence
from strlenpy.text import ZERO_RANGE, StringRange, TextInput, TextLength, measure


def _as_length(value: TextLength | TextInput, options: MeasureOptions | None) -> TextLength:
    if isinstance(value, TextLength):
        return value
    return measure(value, options)


def measure_length(text: TextInput, options: MeasureOptions | None = None) -> TextLength:
    return measure(text, options)


def range_from_point(
    value: TextLength | TextInput,
    point: int = 0,
    *,
    options: MeasureOptions | None = None,
) -> StringRange:
    """Range of `value` starting at `point` in every encoding."""
    return StringRange.from_point(point, _as_length(value, options))


def range_from_range(
    value: TextLength | TextInput,
    prior: StringRange,
    *,
    options: MeasureOptions | None = None,
) -> StringRange:
    """Range of `value` starting immediately after `prior`."""
    return StringRange.from_range(prior, _as_length(value, options))


def replace_range(
    existing: StringRange,
    text: TextLength | TextInput,
    *,
    options: MeasureOptions | None = None,
) -> StringRange:
    """Range left at `existing`'s position after its content is replaced by `text`.

    replace_range(StringRange.from_string("10:5|5:2|5:2|5:2"), "here")
    -> StringRange("10:4|5:4|5:4|5:4")
    """
    return existing.replace(_as_length(text, options))


def shift_range_after(range: StringRange, predecessor: StringRange) -> StringRange:
    """Move `range` so it starts immediately after `predecessor`, keeping its lengths."""
    return range.shift_after(predecessor)


def sequence_ranges(
    texts: Iterable[TextInput],
    start: StringRange = ZERO_RANGE,
    *,
    options: MeasureOptions | None = None,
) -> list[StringRange]:
    return sequence(texts, start, options=options)


def shift(range: StringRange, *, after: StringRange = ZERO_RANGE) -> StringRange:
    """Shift `range` after `after`; by default back to the start of the text."""
    return range.shift_after(after)


def length_to_range(length: TextLength) -> StringRange:
    """Range covering `length` from offset zero."""
    return StringRange.from_point(0, length)


def next_range(
    value: TextLength | TextInput,
    *,
    after: int | TextLength | StringRange,
    options: MeasureOptions | None = None,
) -> StringRange:
    """Range of `value` following `after`.

    `after` may be an offset (used for every encoding), the length of the text so far,
    or the previous range.
    """
    if isinstance(after, int):
        after = StringRange.from_point(after, TextLength())
    elif isinstance(after, TextLength):
        after = length_to_range(after)
    return range_from_range(value, after, options=options)


def merge(left: StringRange | None, right: StringRange | None) -> StringRange | None:
    """Combine two ranges into one covering span; `None` on either side is ignored."""
    if left is None:
        return right
    if right is None:
        return left
    return StringRange.combine([left, right])


def slice_text(
    text: str | bytes | bytearray | memoryview, range: StringRange
) -> str | bytes | bytearray | memoryview:
    return range.slice(text)
