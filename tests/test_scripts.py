from pathlib import Path

import pytest

from strlenpy import MeasureOptions, measure
from tests._shared_cases import JIA

pytest.importorskip("tqdm")

from scripts.time_measure import measure_files  # noqa: E402


def test_measure_files_sums_every_line(tmp_path: Path) -> None:
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_bytes(f"one\n{JIA}\n".encode("utf-8"))
    second.write_bytes(b"two")

    lines, total = measure_files([first, second], MeasureOptions())

    assert lines == 3
    assert total == measure(f"one\n{JIA}\ntwo")
