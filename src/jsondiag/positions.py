from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


# Shared with the code-frame renderer so both agree on what a line is.
LINE_TERMINATOR_RE = re.compile(r"\r\n|[\n\r\u2028\u2029]")


class Unit(str, Enum):
    """The unit a parser engine counts offsets in."""

    CODE_POINT = "code_point"
    UTF16 = "utf16"


@dataclass(frozen=True, slots=True)
class Position:
    """A 1-based line/column location; columns count code points."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(eq=False)
class OffsetOutOfRange(IndexError):
    value: int | Position
    length: int

    def __post_init__(self) -> None:
        IndexError.__init__(self, self.value, self.length)

    def __str__(self) -> str:
        return f"{self.value} is outside text of length {self.length}"


def _is_astral(ch: str) -> bool:
    return ord(ch) > 0xFFFF


def text_length(text: str, unit: Unit = Unit.CODE_POINT) -> int:
    if unit is Unit.UTF16:
        return len(text) + sum(1 for ch in text if _is_astral(ch))
    return len(text)


def _to_index(text: str, offset: int, unit: Unit) -> int:
    # Map an offset in `unit` onto a code point index into `text`.
    if unit is Unit.CODE_POINT:
        return offset
    units = 0
    for i, ch in enumerate(text):
        width = 2 if _is_astral(ch) else 1
        if units + width > offset:
            return i
        units += width
    return len(text)


def _from_index(text: str, index: int, unit: Unit) -> int:
    if unit is Unit.CODE_POINT:
        return index
    return index + sum(1 for ch in text[:index] if _is_astral(ch))


def _line_bounds(text: str) -> list[tuple[int, int]]:
    """(start, end) code point indices of every line, terminators excluded."""
    bounds: list[tuple[int, int]] = []
    start = 0
    for m in LINE_TERMINATOR_RE.finditer(text):
        bounds.append((start, m.start()))
        start = m.end()
    bounds.append((start, len(text)))
    return bounds


def to_position(text: str, offset: int, *, unit: Unit = Unit.CODE_POINT) -> Position:
    """Resolve a flat offset into a 1-based line/column position.

    `offset` may equal the text length, which denotes the point just past
    the last character. When the text ends with a line terminator that
    point is column 1 of a new, empty line.
    """
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise TypeError(f"offset must be an int, got {type(offset).__name__}")
    length = text_length(text, unit)
    if not 0 <= offset <= length:
        raise OffsetOutOfRange(offset, length)

    index = _to_index(text, offset, unit)
    line = 1
    line_start = 0
    for m in LINE_TERMINATOR_RE.finditer(text):
        # A terminator only starts a new line once it has been fully passed.
        if m.end() > index:
            break
        line += 1
        line_start = m.end()
    return Position(line=line, column=index - line_start + 1)


def to_offset(text: str, position: Position, *, unit: Unit = Unit.CODE_POINT) -> int:
    """Inverse of `to_position`."""
    bounds = _line_bounds(text)
    if not 1 <= position.line <= len(bounds):
        raise OffsetOutOfRange(position, text_length(text, unit))
    start, end = bounds[position.line - 1]
    index = start + position.column - 1
    if position.column < 1 or index > end:
        raise OffsetOutOfRange(position, text_length(text, unit))
    return _from_index(text, index, unit)
