#!/usr/bin/env python
import argparse
from pathlib import Path

from strlenpy import StringRange, TextLength, sequence


def format_range(idx: int, line: str, rng: StringRange) -> str:
    length = TextLength.of_range(rng)
    return (
        f"[{idx}] {rng} "
        f"byte=({rng.byte.start},{rng.byte.stop}) "
        f"code=({rng.code.start},{rng.code.stop}) "
        f"char=({rng.char.start},{rng.char.stop}) "
        f"utf16=({rng.utf16.start},{rng.utf16.stop}) "
        f"uniform={length.byte == length.char} "
        f"text={line!r}"
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the range of every line of a file")
    parser.add_argument("input", type=Path)
    parser.add_argument("-o", "--output", type=Path, default=None)
    args = parser.parse_args()

    lines = args.input.read_text(encoding="utf-8").splitlines(keepends=True)
    ranges = sequence(lines)
    rendered = [format_range(idx, line, rng) for idx, (line, rng) in enumerate(zip(lines, ranges))]

    if args.output is None:
        print("\n".join(rendered))
        return

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", encoding="utf-8") as f:
        for row in rendered:
            f.write(row + "\n")

    print(f"Wrote {len(rendered)} ranges to {args.output}")


if __name__ == "__main__":
    main()
