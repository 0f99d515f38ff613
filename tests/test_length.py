import pytest

from strlenpy import (
    ZERO,
    InvalidRangeError,
    InvalidTextEncodingError,
    LengthOverflowError,
    MeasureOptions,
    StringRange,
    TextLength,
    measure,
)
from strlenpy.text import ISIZE_MAX
from tests._shared_cases import E_COMBINING, FAMILY, JIA, TEXT_CASES, TextCase, case_id


@pytest.mark.parametrize("case", TEXT_CASES, ids=case_id)
def test_measure_counts_every_encoding(case: TextCase) -> None:
    assert measure(case.text) == case.length


@pytest.mark.parametrize("case", TEXT_CASES, ids=case_id)
def test_measure_orders_counts(case: TextCase) -> None:
    length = measure(case.text)

    assert length.cluster_count <= length.scalar_count <= length.unit_count
    assert length.scalar_count <= length.utf16_count


def test_measure_empty_text_is_zero() -> None:
    assert measure("") == ZERO
    assert measure(b"") == ZERO
    assert ZERO.is_empty()


def test_combining_sequence_is_one_cluster_but_two_scalars() -> None:
    length = measure(E_COMBINING)

    assert length.char == 1
    assert length.code == 2


def test_astral_scalar_uses_two_utf16_units() -> None:
    length = measure("\U0001f600")

    assert length.code == 1
    assert length.utf16 == 2


def test_measure_accepts_bytes_like_input() -> None:
    expected = TextLength(byte=3, code=1, char=1, utf16=1)

    assert measure(JIA.encode("utf-8")) == expected
    assert measure(bytearray(JIA.encode("utf-8"))) == expected
    assert measure(memoryview(JIA.encode("utf-8"))) == expected


def test_measure_rejects_undecodable_bytes() -> None:
    with pytest.raises(InvalidTextEncodingError) as excinfo:
        measure(b"ok\xff")

    assert excinfo.value.code == "TEXT_INVALID_ENCODING"
    assert "Byte 2" in str(excinfo.value)


def test_measure_rejects_lone_surrogate() -> None:
    with pytest.raises(InvalidTextEncodingError, match="U\\+D800"):
        measure("a\ud800b")


def test_measure_rejects_non_text() -> None:
    with pytest.raises(TypeError, match="int"):
        measure(123)  # type: ignore[arg-type]


def test_measure_uses_configured_storage_encoding() -> None:
    latin1 = MeasureOptions(encoding="latin-1")

    assert measure(b"caf\xe9", latin1) == TextLength(byte=4, code=4, char=4, utf16=4)
    assert measure("caf\u00e9", latin1).byte == 4
    with pytest.raises(InvalidTextEncodingError):
        measure(JIA, latin1)


def test_measure_strips_bom_when_configured() -> None:
    text = "\ufeffab"

    assert measure(text).code == 3
    assert measure(text, MeasureOptions(strip_bom=True)) == TextLength.uniform(2)
    assert measure(text.encode("utf-8"), MeasureOptions(strip_bom=True)) == TextLength.uniform(2)


def test_length_addition_is_fieldwise() -> None:
    family = measure(FAMILY)

    assert family + family == TextLength(byte=50, code=14, char=2, utf16=22)
    assert family + "a" == TextLength(byte=26, code=8, char=2, utf16=12)
    assert ZERO + family == family


def test_length_of_range_reads_sub_range_lengths() -> None:
    rng = StringRange.from_string("31:25|17:11|13:7|7:1")

    assert TextLength.of_range(rng) == measure(FAMILY)
    assert rng.length() == measure(FAMILY)


def test_length_rejects_values_beyond_signed_64_bit() -> None:
    TextLength.uniform(ISIZE_MAX)

    with pytest.raises(LengthOverflowError) as excinfo:
        TextLength(byte=ISIZE_MAX + 1)
    assert excinfo.value.code == "LENGTH_OVERFLOW"

    with pytest.raises(LengthOverflowError):
        TextLength.uniform(ISIZE_MAX) + TextLength.uniform(1)


def test_length_repr_names_every_encoding() -> None:
    assert repr(measure(JIA)) == "TextLength(byte=3, code=1, char=1, utf16=1)"


@pytest.mark.parametrize(
    ("encoding", "byte"),
    [("utf-16", 4), ("utf-16-be", 4), ("utf-32", 8), ("utf-8-sig", 2)],
)
def test_storage_count_excludes_codec_signature(encoding: str, byte: int) -> None:
    length = measure("ab", MeasureOptions(encoding=encoding))

    assert length.byte == byte
    assert length.code == 2


def test_utf16_bytes_input_decodes_through_its_signature() -> None:
    options = MeasureOptions(encoding="utf-16")

    assert measure("ab".encode("utf-16"), options) == TextLength(byte=4, code=2, char=2, utf16=2)


def test_unknown_encoding_is_a_text_encoding_error() -> None:
    with pytest.raises(InvalidTextEncodingError, match="no-such-codec"):
        MeasureOptions(encoding="no-such-codec")


def test_length_rejects_negative_fields() -> None:
    with pytest.raises(InvalidRangeError, match="byte"):
        TextLength(byte=-1)
    with pytest.raises(InvalidRangeError):
        TextLength.uniform(-3)
