"""Composite ranges: one logical span of text counted in every encoding.

The range of the second family emoji in "👨‍👩‍👧‍👦family👨‍👩‍👧‍👦" is

    StringRange.from_string("31:25|17:11|13:7|7:1")

i.e. bytes 31..55, UTF-16 units 17..27, code points 13..19 and character 7. Pick the
sub-range that matches how the consuming platform indexes strings: python `str` and
most Unicode-aware runtimes use `code`, JavaScript/Java/NSString use `utf16`, raw
buffers use `byte`, and editors showing cursor positions use `char`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Final, Literal

from strlenpy.diagnostics import InvalidRangeError, RangeParseError
from strlenpy.text.length import ENCODINGS, TextLength
from strlenpy.text.linear import LinearRange

# Order of the compact and string forms.
SERIAL_ORDER: Final[tuple[str, ...]] = ("byte", "utf16", "code", "char")


@dataclass(frozen=True, slots=True)
class StringRange:
    """Four lock-step `LinearRange`s describing the same substring boundaries."""

    byte: LinearRange
    code: LinearRange
    char: LinearRange
    utf16: LinearRange

    @staticmethod
    def uniform(start: int, length: int) -> "StringRange":
        """Identical sub-ranges in every encoding (ASCII text)."""
        sub = LinearRange.at(start, length)
        return StringRange(byte=sub, code=sub, char=sub, utf16=sub)

    @staticmethod
    def from_point(point: int, length: TextLength) -> "StringRange":
        """Start every encoding at `point`, taking each length from `length`.

        The same offset is used verbatim for all four encodings; translating an offset
        between encodings is the caller's responsibility.
        """
        return _each(lambda n: LinearRange.at(point, n), length)

    @staticmethod
    def from_range(prior: "StringRange", length: TextLength) -> "StringRange":
        """The range of `length` that starts immediately after `prior`."""
        return _each(lambda before, n: LinearRange.at(before.stop + 1, n), prior, length)

    @staticmethod
    def combine(ranges: Iterable["StringRange"]) -> "StringRange":
        """Collapse ranges into one covering span.

        Ranges are sorted by byte start; the first start and the stop of the range
        with the largest start bound the result, so inputs are assumed not to nest.
        """
        ordered = sorted(ranges, key=lambda r: r.byte.start)
        if not ordered:
            raise InvalidRangeError("Cannot combine an empty list of ranges.")
        if len(ordered) == 1:
            return ordered[0]
        first, last = ordered[0], ordered[-1]
        return _each(lambda a, b: LinearRange.new(a.start, b.stop), first, last)

    def replace(self, length: TextLength) -> "StringRange":
        """Keep the starts, give each encoding the new length."""
        return _each(lambda current, n: LinearRange.at(current.start, n), self, length)

    def shift_after(self, predecessor: "StringRange") -> "StringRange":
        """Keep the lengths, move each encoding to start right after `predecessor`."""
        return _each(
            lambda current, before: LinearRange.at(before.stop + 1, current.length),
            self,
            predecessor,
        )

    def extend(self, length: TextLength) -> "StringRange":
        """Keep the starts, grow each encoding by `length`."""
        return _each(lambda current, n: current.extend(n), self, length)

    def shift_to_zero(self) -> "StringRange":
        """Reposition as if the range were the start of a string."""
        return _each(lambda current: LinearRange.at(0, current.length), self)

    def extend_to_zero(self) -> "StringRange":
        """Keep the stops, start every encoding at zero.

              |----|       =>  |----------|
        __________________ =>  __________________
        """
        return _each(lambda current: LinearRange.new(0, current.stop), self)

    def length(self) -> TextLength:
        return TextLength.of_range(self)

    def is_empty(self) -> bool:
        return all(getattr(self, encoding).length == 0 for encoding in ENCODINGS)

    def slice(self, text: str | bytes | bytearray | memoryview) -> str | bytes | bytearray | memoryview:
        """Extract the covered part of `text`.

        `str` is indexed by code point and `bytes` by storage unit.
        """
        sub = self.byte if isinstance(text, (bytes, bytearray, memoryview)) else self.code
        return text[sub.start : sub.end]

    def compare(self, other: "StringRange") -> Literal[-1, 0, 1]:
        """Order by byte start only.

        Only meaningful for non-overlapping ranges: 1..4 sorts before 2..3 even though
        it is longer.
        """
        if self.byte.start < other.byte.start:
            return -1
        if self.byte.start > other.byte.start:
            return 1
        return 0

    def compact(self) -> list[int]:
        """Flatten to `[start, length, ...]` in byte, utf16, code, char order.

        Trailing encodings equal to the one before them are dropped, so ASCII spans
        collapse to two integers.
        """
        byte, utf16, code, char = (getattr(self, name) for name in SERIAL_ORDER)
        if byte == utf16 == code == char:
            parts = (byte,)
        elif utf16 == code == char:
            parts = (byte, utf16)
        elif code == char:
            parts = (byte, utf16, code)
        else:
            parts = (byte, utf16, code, char)
        return [value for part in parts for value in part.as_pair()]

    @staticmethod
    def expand(values: Sequence[int]) -> "StringRange":
        """Inverse of `compact`."""
        if len(values) not in (2, 4, 6, 8) or not all(isinstance(v, int) for v in values):
            raise RangeParseError(f"Expected 2, 4, 6 or 8 integers, got {list(values)!r}.")
        pairs = [(values[i], values[i + 1]) for i in range(0, len(values), 2)]
        pairs.extend([pairs[-1]] * (4 - len(pairs)))
        return StringRange(
            **{name: LinearRange.at(start, length) for name, (start, length) in zip(SERIAL_ORDER, pairs)}
        )

    def to_dict(self) -> dict[str, dict[str, int]]:
        data: dict[str, dict[str, int]] = {}
        for encoding in ENCODINGS:
            sub: LinearRange = getattr(self, encoding)
            data[encoding.value] = {"start": sub.start, "stop": sub.stop, "length": sub.length, "step": sub.step}
        return data

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "StringRange":
        """Build from a mapping keyed by encoding name.

        Each value may be a `LinearRange`, a mapping with `start` and `length` (or
        `stop`), a `[start, length]` pair or a range string such as `"4:3"`.
        """
        missing = [encoding.value for encoding in ENCODINGS if encoding.value not in data]
        if missing:
            raise RangeParseError(f"Missing encodings: {', '.join(missing)}.")
        return StringRange(**{encoding.value: _coerce_linear(data[encoding.value]) for encoding in ENCODINGS})

    @staticmethod
    def from_string(text: str) -> "StringRange":
        """Parse `byte|utf16|code|char`; missing trailing parts repeat the last one."""
        parts = text.strip().split("|")
        if not 1 <= len(parts) <= 4 or not all(parts):
            raise RangeParseError(f"Unrecognised string range {text!r}.")
        parts.extend([parts[-1]] * (4 - len(parts)))
        return StringRange(**{name: LinearRange.parse(part) for name, part in zip(SERIAL_ORDER, parts)})

    def __str__(self) -> str:
        return "|".join(str(getattr(self, name)) for name in SERIAL_ORDER)

    def __repr__(self) -> str:
        return f"StringRange({str(self)!r})"


ZERO_RANGE: Final[StringRange] = StringRange.uniform(0, 0)
"""Empty span before the first character; the seed for chaining."""


def _each(transform: Callable[..., LinearRange], *operands: StringRange | TextLength) -> StringRange:
    """Apply `transform` to the same encoding of every operand, once per encoding."""
    return StringRange(
        **{encoding.value: transform(*(getattr(operand, encoding) for operand in operands)) for encoding in ENCODINGS}
    )


def _coerce_linear(value: Any) -> LinearRange:
    if isinstance(value, LinearRange):
        return value
    if isinstance(value, str):
        return LinearRange.parse(value)
    if isinstance(value, Mapping):
        if {"start", "stop", "length"} <= value.keys():
            return LinearRange(value["start"], value["stop"], value["length"], value.get("step", 1))
        if "start" in value and "length" in value:
            return LinearRange.at(value["start"], value["length"])
        if "start" in value and "stop" in value:
            return LinearRange.new(value["start"], value["stop"])
        raise RangeParseError(f"Range mapping needs `start` and `length` or `stop`: {dict(value)!r}.")
    if isinstance(value, (list, tuple)) and len(value) == 2:
        start, length = value
        return LinearRange.at(start, length)
    raise RangeParseError(f"Unrecognised range value {value!r}.")
