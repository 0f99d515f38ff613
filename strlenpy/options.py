"""Measurement configuration options."""

import codecs
from dataclasses import dataclass
from typing import Final

from strlenpy.diagnostics import InvalidTextEncodingError

# Codecs that prepend a signature when encoding, mapped to the same codec without it.
_SIGNATURE_FREE: Final[dict[str, str]] = {
    "utf-16": "utf-16-le",
    "utf-32": "utf-32-le",
    "utf-8-sig": "utf-8",
}


@dataclass(frozen=True, slots=True)
class MeasureOptions:
    """Controls how text is decoded and how storage units are counted."""

    encoding: str = "utf-8"
    strip_bom: bool = False

    def __post_init__(self):
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise InvalidTextEncodingError(f"Unknown encoding {self.encoding!r}.") from exc

    @property
    def storage_encoding(self) -> str:
        """Codec used to count storage units; never writes a signature."""
        name = codecs.lookup(self.encoding).name
        return _SIGNATURE_FREE.get(name, name)


DEFAULT_OPTIONS: Final[MeasureOptions] = MeasureOptions()
