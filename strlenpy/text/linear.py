"""Single-encoding ranges with inclusive ends."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
import re

from strlenpy.diagnostics import InvalidRangeError, RangeParseError
from strlenpy.text.size import checked

_START_LENGTH_RE = re.compile(r"^(-?\d+):(\d+)$", re.ASCII)
_START_STOP_RE = re.compile(r"^(\d+)-(\d+)$", re.ASCII)
_DOTTED_RE = re.compile(r"^(-?\d+)\.\.(-?\d+)$", re.ASCII)
_HEX_DOTTED_RE = re.compile(r"^([0-9A-Fa-f]{4,5})\.\.([0-9A-Fa-f]{4,5})$", re.ASCII)
_POINT_RE = re.compile(r"^(\d+)$", re.ASCII)


@dataclass(frozen=True, slots=True)
class LinearRange:
    """
    Interval `[start, stop]` (both inclusive) in one encoding's unit space.

    Invariant:
    - stop == start + length - 1
    - length >= 0

    An empty range has `stop == start - 1`: it sits immediately before its own start.
    `step` is carried for striding but is always 1 in practice.
    """

    start: int
    stop: int
    length: int
    step: int = 1

    def __post_init__(self):
        checked(self.start, "start")
        checked(self.stop, "stop")
        checked(self.length, "length")
        if self.length < 0:
            raise InvalidRangeError(f"Length cannot be negative (got {self.length}).")
        if self.stop != self.start + self.length - 1:
            raise InvalidRangeError(
                f"start={self.start}, stop={self.stop}, length={self.length} are inconsistent."
            )
        if self.step < 1:
            raise InvalidRangeError(f"Step must be positive (got {self.step}).")

    @staticmethod
    def at(start: int, length: int) -> "LinearRange":
        """Create a range from a start offset and a length."""
        return LinearRange(start, checked(start + length - 1, "stop"), length)

    @staticmethod
    def new(start: int, stop: int) -> "LinearRange":
        """Create a range from a start offset and an inclusive stop offset."""
        return LinearRange(start, stop, checked(stop - start + 1, "length"))

    @staticmethod
    def until(start: int, end: int) -> "LinearRange":
        """Create a range from a start offset and an exclusive end offset."""
        return LinearRange.new(start, end - 1)

    @staticmethod
    def empty(start: int) -> "LinearRange":
        return LinearRange.at(start, 0)

    @staticmethod
    def from_range(value: range) -> "LinearRange":
        """Create a range covering the same integers as a python `range` with step 1."""
        if value.step != 1:
            raise InvalidRangeError(f"Only step 1 ranges are supported (got {value.step}).")
        return LinearRange.until(value.start, value.stop)

    @staticmethod
    def parse(text: str) -> "LinearRange":
        """Parse `start:length`, `start-stop`, `start..stop` or a single offset.

        `10:15` means offset 10 with length 15, so it equals `10-24` and `10..24`.
        Four or five digit hex pairs (`00C0..00FF`) are accepted for code point blocks.
        """
        raw = text.strip()
        if match := _START_LENGTH_RE.match(raw):
            return LinearRange.at(int(match[1]), int(match[2]))
        if match := _START_STOP_RE.match(raw):
            return LinearRange.new(int(match[1]), int(match[2]))
        if match := _DOTTED_RE.match(raw):
            return LinearRange.new(int(match[1]), int(match[2]))
        if match := _HEX_DOTTED_RE.match(raw):
            return LinearRange.new(int(match[1], 16), int(match[2], 16))
        if match := _POINT_RE.match(raw):
            return LinearRange.new(int(match[1]), int(match[1]))
        raise RangeParseError(f"Unrecognised range {text!r}.")

    @property
    def end(self) -> int:
        """Exclusive end offset."""
        return self.stop + 1

    def is_empty(self) -> bool:
        return self.length == 0

    def as_pair(self) -> tuple[int, int]:
        """Get the range as a `(start, length)` tuple."""
        return (self.start, self.length)

    def to_range(self) -> range:
        return range(self.start, self.stop + 1, self.step)

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_range())

    def shift_start(self, delta: int) -> "LinearRange":
        """Move the range by `delta`, keeping its length."""
        return LinearRange.at(self.start + delta, self.length)

    def extend(self, delta: int) -> "LinearRange":
        """Grow (or shrink, for negative `delta`) the range, keeping its start."""
        return LinearRange.at(self.start, self.length + delta)

    def contains_offset(self, offset: int) -> bool:
        return self.start <= offset <= self.stop

    def contains(self, other: "LinearRange") -> bool:
        """Check if both ends of `other` fall inside this range."""
        return self.start <= other.start and other.stop <= self.stop

    def distance(self, value: int) -> int:
        """Absolute distance from `value` to the nearest edge, 0 when inside."""
        if self.start <= value <= self.stop:
            return 0
        return min(abs(self.start - value), abs(self.stop - value))

    def similarity(self, other: "LinearRange") -> int:
        """Lower is more similar; length differences weigh double."""
        return abs(self.start - other.start) + abs(self.length - other.length) * 2

    def match(self, other: "LinearRange") -> int | None:
        """Score how far `other` is from matching this range.

        - 10:20 vs 10:20 -> 0
        - 10:20 vs 10:18 -> -2
        - 10:20 vs 10:22 -> 2
        - 10:20 vs 40:5  -> None (disjoint)
        """
        if self.start == other.start:
            return other.stop - self.stop
        if self.stop == other.stop:
            return self.start - other.start
        if other.start > self.stop or other.stop < self.start:
            return None
        overlap = min(self.stop, other.stop) - max(self.start, other.start)
        return other.stop - other.start - overlap

    def most_similar(self, candidates: Sequence["LinearRange"]) -> int | None:
        """Index of the most similar candidate.

        Candidates are expected in positional order; the scan stops at the first
        candidate that is not more similar than the best so far.
        """
        best: int | None = None
        best_index: int | None = None
        for index, candidate in enumerate(candidates):
            score = self.similarity(candidate)
            if best is not None and score >= best:
                break
            best, best_index = score, index
        return best_index

    def __str__(self) -> str:
        return f"{self.start}:{self.length}"
