"""Thread text segments into adjacent composite ranges."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import dataclasses
import logging

from strlenpy.options import MeasureOptions
from strlenpy.text import ZERO_RANGE, StringRange, TextInput, TextLength, measure

LOGGER = logging.getLogger(__name__)


def iter_sequence(
    segments: Iterable[TextInput],
    start: StringRange = ZERO_RANGE,
    *,
    options: MeasureOptions | None = None,
) -> Iterator[StringRange]:
    """Yield the range each segment occupies when concatenated right after `start`.

    `options.strip_bom` only applies while nothing precedes the segment, i.e. the
    previous range is still `ZERO_RANGE`; a U+FEFF anywhere else is content.
    """
    inner = options
    if options is not None and options.strip_bom:
        inner = dataclasses.replace(options, strip_bom=False)

    previous = start
    for segment in segments:
        length = measure(segment, options if previous == ZERO_RANGE else inner)
        previous = StringRange.from_range(previous, length)
        yield previous


def sequence(
    segments: Iterable[TextInput],
    start: StringRange = ZERO_RANGE,
    *,
    options: MeasureOptions | None = None,
) -> list[StringRange]:
    """Ranges of `segments`, in order, as if concatenated immediately after `start`.

    Empty segments produce zero-length ranges; they are never skipped.
    """
    ranges = list(iter_sequence(segments, start, options=options))
    if ranges:
        LOGGER.debug("Sequenced %d segments ending at %s", len(ranges), ranges[-1])
    return ranges


def sequence_lengths(
    segments: Iterable[TextInput],
    start: TextLength | StringRange = ZERO_RANGE,
    *,
    options: MeasureOptions | None = None,
) -> tuple[list[StringRange], TextLength]:
    """Sequence `segments` and also return the total length up to the end of the last range.

    A `TextLength` start is treated as the span from zero up to that length.
    """
    if isinstance(start, TextLength):
        start = StringRange.from_point(0, start)
    ranges = sequence(segments, start, options=options)
    last = ranges[-1] if ranges else start
    total = TextLength(
        byte=last.byte.stop + 1,
        code=last.code.stop + 1,
        char=last.char.stop + 1,
        utf16=last.utf16.stop + 1,
    )
    return ranges, total
