"""Positional relation between two ranges."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from strlenpy.text.linear import LinearRange

if TYPE_CHECKING:
    from strlenpy.text.string_range import StringRange


class RangeRelation(StrEnum):
    EQUAL = "equal"
    COVERS = "covers"
    COVERED_BY = "covered_by"
    OVERLAPS_END = "overlaps_end"
    OVERLAPS_START = "overlaps_start"
    DISJOINT = "disjoint"


def compare_ranges(
    left: "LinearRange | StringRange",
    right: "LinearRange | StringRange",
) -> RangeRelation:
    """Describe how `left` relates to `right`.

    Composite ranges are compared by their byte sub-ranges.
    """
    a = left if isinstance(left, LinearRange) else left.byte
    b = right if isinstance(right, LinearRange) else right.byte

    if a.start == b.start and a.stop == b.stop:
        return RangeRelation.EQUAL
    if a.start <= b.start and a.stop >= b.stop:
        return RangeRelation.COVERS
    if b.start <= a.start <= b.stop and a.stop <= b.stop:
        return RangeRelation.COVERED_BY
    if b.start <= a.start <= b.stop <= a.stop:
        return RangeRelation.OVERLAPS_END
    if a.start <= b.start <= a.stop <= b.stop:
        return RangeRelation.OVERLAPS_START
    return RangeRelation.DISJOINT
