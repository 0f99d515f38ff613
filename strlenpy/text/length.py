"""Four-way text length measurement.

For the family emoji "👨‍👩‍👧‍👦" (man, woman, girl, boy joined by ZWJs):

- `byte`: 25 UTF-8 storage units
- `code`: 7 scalar values
- `char`: 1 extended grapheme cluster
- `utf16`: 11 UTF-16 code units
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import TYPE_CHECKING, Final

import regex

from strlenpy.diagnostics import InvalidRangeError, InvalidTextEncodingError
from strlenpy.options import DEFAULT_OPTIONS, MeasureOptions
from strlenpy.text.size import checked

if TYPE_CHECKING:
    from strlenpy.text.string_range import StringRange

LOGGER = logging.getLogger(__name__)

TextInput = str | bytes | bytearray | memoryview

_GRAPHEME_RE = regex.compile(r"\X")
_BOM = "\ufeff"


class Encoding(StrEnum):
    """Unit in which a length or offset is counted."""

    BYTE = "byte"
    CODE = "code"
    CHAR = "char"
    UTF16 = "utf16"


ENCODINGS: Final[tuple[Encoding, ...]] = (Encoding.BYTE, Encoding.CODE, Encoding.CHAR, Encoding.UTF16)


@dataclass(frozen=True, slots=True)
class TextLength:
    """Lengths of one text value counted in each supported encoding."""

    byte: int = 0
    code: int = 0
    char: int = 0
    utf16: int = 0

    def __post_init__(self):
        for encoding in ENCODINGS:
            value = checked(getattr(self, encoding), encoding)
            if value < 0:
                raise InvalidRangeError(f"Length `{encoding}` cannot be negative (got {value}).")

    @staticmethod
    def uniform(value: int) -> "TextLength":
        """Same length in every encoding (only true for ASCII text)."""
        return TextLength(byte=value, code=value, char=value, utf16=value)

    @staticmethod
    def of_range(range: "StringRange") -> "TextLength":
        """Take the length portion of a composite range."""
        return TextLength(
            byte=range.byte.length,
            code=range.code.length,
            char=range.char.length,
            utf16=range.utf16.length,
        )

    @property
    def unit_count(self) -> int:
        return self.byte

    @property
    def scalar_count(self) -> int:
        return self.code

    @property
    def cluster_count(self) -> int:
        return self.char

    @property
    def utf16_count(self) -> int:
        return self.utf16

    def is_empty(self) -> bool:
        return self == ZERO

    def __add__(self, other: "TextLength | TextInput") -> "TextLength":
        if not isinstance(other, TextLength):
            other = measure(other)
        return TextLength(
            byte=self.byte + other.byte,
            code=self.code + other.code,
            char=self.char + other.char,
            utf16=self.utf16 + other.utf16,
        )

    def __repr__(self) -> str:
        return f"TextLength(byte={self.byte}, code={self.code}, char={self.char}, utf16={self.utf16})"


ZERO: Final[TextLength] = TextLength()
"""Length of the empty text."""


def decode_text(text: TextInput, options: MeasureOptions = DEFAULT_OPTIONS) -> str:
    """Return `text` as a `str`, decoding bytes-like input with the configured encoding."""
    if isinstance(text, str):
        decoded = text
    elif isinstance(text, (bytes, bytearray, memoryview)):
        try:
            decoded = bytes(text).decode(options.encoding)
        except UnicodeDecodeError as exc:
            LOGGER.debug("Failed to decode %d bytes as %s", len(text), options.encoding)
            raise InvalidTextEncodingError(
                f"Byte {exc.start} is not valid {options.encoding}."
            ) from exc
    else:
        raise TypeError(f"Expected text or bytes, got {type(text).__name__}")

    if options.strip_bom and decoded.startswith(_BOM):
        return decoded[1:]
    return decoded


def count_graphemes(text: str) -> int:
    """Count extended grapheme clusters."""
    return sum(1 for _ in _GRAPHEME_RE.finditer(text))


def measure(text: TextInput, options: MeasureOptions | None = None) -> TextLength:
    """Measure `text` in storage units, scalar values, grapheme clusters and UTF-16 units."""
    resolved = options if options is not None else DEFAULT_OPTIONS
    decoded = decode_text(text, resolved)
    if not decoded:
        return ZERO

    try:
        storage = decoded.encode(resolved.storage_encoding)
        utf16 = decoded.encode("utf-16-le")
    except UnicodeEncodeError as exc:
        LOGGER.debug("Failed to encode text at index %d: %s", exc.start, exc.reason)
        raise InvalidTextEncodingError(
            f"Code point U+{ord(decoded[exc.start]):04X} at index {exc.start} cannot be encoded."
        ) from exc

    return TextLength(
        byte=len(storage),
        code=len(decoded),
        char=count_graphemes(decoded),
        utf16=len(utf16) // 2,
    )
