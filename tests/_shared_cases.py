"""Centralized text samples used across measurement/range/sequence tests."""

from __future__ import annotations

from dataclasses import dataclass

from strlenpy import TextLength

FAMILY = "\U0001f468\u200d\U0001f469\u200d\U0001f467\u200d\U0001f466"
E_COMBINING = "e\u0301"
JIA = "\u5bb6"


@dataclass(frozen=True, slots=True)
class TextCase:
    name: str
    text: str
    length: TextLength


TEXT_CASES: tuple[TextCase, ...] = (
    TextCase(name="empty", text="", length=TextLength(byte=0, code=0, char=0, utf16=0)),
    TextCase(name="ascii", text="hello", length=TextLength(byte=5, code=5, char=5, utf16=5)),
    TextCase(name="precomposed_e_acute", text="\u00e9", length=TextLength(byte=2, code=1, char=1, utf16=1)),
    TextCase(name="combining_e_acute", text=E_COMBINING, length=TextLength(byte=3, code=2, char=1, utf16=2)),
    TextCase(name="cjk", text=JIA, length=TextLength(byte=3, code=1, char=1, utf16=1)),
    TextCase(name="astral_emoji", text="\U0001f600", length=TextLength(byte=4, code=1, char=1, utf16=2)),
    TextCase(name="flag", text="\U0001f1fa\U0001f1f8", length=TextLength(byte=8, code=2, char=1, utf16=4)),
    TextCase(name="zwj_family", text=FAMILY, length=TextLength(byte=25, code=7, char=1, utf16=11)),
    TextCase(name="crlf", text="\r\n", length=TextLength(byte=2, code=2, char=1, utf16=2)),
    TextCase(
        name="mixed_sentence",
        text=f"one {FAMILY} two",
        length=TextLength(byte=33, code=15, char=9, utf16=19),
    ),
)


def case_id(case: TextCase) -> str:
    return case.name
