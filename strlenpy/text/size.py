"""Integer bounds shared by lengths and offsets."""

from typing import Final

from strlenpy.diagnostics import LengthOverflowError

ISIZE_MAX: Final[int] = 2**63 - 1
ISIZE_MIN: Final[int] = -(2**63)


def checked(value: int, field: str) -> int:
    """Return `value` unchanged, or raise if it cannot be held in a signed 64-bit integer."""
    if value > ISIZE_MAX or value < ISIZE_MIN:
        raise LengthOverflowError(f"`{field}` is {value}.")
    return value
