"""Error codes and messages."""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class ErrorSpec:
    code: str
    message: str
    hint: str | None = None
    category: str | None = None


TEXT_INVALID_ENCODING: Final[ErrorSpec] = ErrorSpec(
    code="TEXT_INVALID_ENCODING",
    message="Invalid text encoding.",
    hint="Pass well-formed text, or decode bytes with the encoding they were written in.",
    category="text",
)

LENGTH_OVERFLOW: Final[ErrorSpec] = ErrorSpec(
    code="LENGTH_OVERFLOW",
    message="Length overflow: offset does not fit in a signed 64-bit integer.",
    category="text",
)

RANGE_INVALID: Final[ErrorSpec] = ErrorSpec(
    code="RANGE_INVALID",
    message="Invalid range.",
    hint="Ranges must satisfy `stop == start + length - 1` with a non-negative length.",
    category="range",
)

RANGE_PARSE_ERROR: Final[ErrorSpec] = ErrorSpec(
    code="RANGE_PARSE_ERROR",
    message="Could not parse range.",
    hint="Use `start:length`, `start-stop` or `start..stop`.",
    category="range",
)
