"""Readers for the wording of parser error messages.

Every parser engine phrases its failures differently. An interpreter knows
one wording: which exception types it raises, where the location sits in the
message and in which unit offsets are counted. Supporting a new engine means
adding an interpreter, the location arithmetic in `MessageInterpreter.locate`
is shared.
"""

from __future__ import annotations

import abc
import json
import logging
import re
from collections.abc import Iterable
from typing import ClassVar

from .positions import OffsetOutOfRange, Position, Unit, text_length, to_position


logger = logging.getLogger(__name__)

_UNEXPECTED_TOKEN_RE = re.compile(r"^Unexpected token (?:'(?P<quoted>.)'|(?P<bare>.))")


def code_point(character: str) -> str:
    """Render the first code point of `character` as `\\u{hex}`."""
    value = ord(character[0]) if character else 0
    return f"\\u{{{value:x}}}"


def _describe_token(character: str) -> str:
    if character.isprintable():
        return f'"{character}"({code_point(character)})'
    return code_point(character)


def enhance_unexpected_token(message: str) -> str:
    """Spell out the character of an `Unexpected token X` message.

    `Unexpected token } in JSON at position 8` becomes
    `Unexpected token "}"(\\u{7d}) in JSON at position 8`. The token may be
    quoted with single quotes. Other messages are returned unchanged.
    """
    m = _UNEXPECTED_TOKEN_RE.match(message)
    if m is None:
        return message
    token = m.group("quoted") or m.group("bare")
    return f"Unexpected token {_describe_token(token)}{message[m.end():]}"


class MessageInterpreter(abc.ABC):
    pattern: ClassVar[re.Pattern[str]]
    unit: ClassVar[Unit] = Unit.CODE_POINT
    default_error_types: ClassVar[tuple[type[BaseException], ...]] = (ValueError,)

    def __init__(self, error_types: Iterable[type[BaseException]] | None = None) -> None:
        if error_types is None:
            self.error_types = self.default_error_types
        else:
            self.error_types = tuple(error_types)

    def __repr__(self) -> str:
        names = ", ".join(t.__name__ for t in self.error_types)
        return f"{type(self).__name__}(error_types=({names}))"

    def recognizes(self, exc: BaseException) -> bool:
        return isinstance(exc, self.error_types)

    def locate(self, text: str, message: str) -> Position | None:
        """Find where parsing failed, or None when the message does not say.

        An explicit line/column captured by the pattern is returned as is.
        Otherwise the offset is resolved against `text`; an offset equal to the
        text length points one column past the last character.
        """
        m = self.pattern.search(message)
        if m is None:
            logger.debug("no location in parser message %r", message)
            return None

        groups = m.groupdict()
        line, column = groups.get("line"), groups.get("column")
        if line and column:
            return Position(line=int(line), column=int(column))

        offset = int(m.group("offset"))
        length = text_length(text, self.unit)
        try:
            if offset == length:
                last = to_position(text, length - 1, unit=self.unit)
                return Position(line=last.line, column=last.column + 1)
            return to_position(text, offset, unit=self.unit)
        except OffsetOutOfRange:
            logger.debug("offset %d reported by parser is outside the text (length %d)", offset, length)
            return None

    @abc.abstractmethod
    def enhance(self, text: str, message: str) -> str:
        """Rewrite the raw message into a more helpful one."""


class V8Interpreter(MessageInterpreter):
    """Messages in the wording of JavaScript's `JSON.parse` under V8.

    Offsets count UTF-16 code units. Newer runtimes append the line and
    column, older ones only report the offset.
    """

    pattern = re.compile(
        r"in JSON at position (?P<offset>\d+)(?: \(line (?P<line>\d+) column (?P<column>\d+)\))?$"
    )
    unit = Unit.UTF16
    default_error_types = (SyntaxError, ValueError)

    def enhance(self, text: str, message: str) -> str:
        return enhance_unexpected_token(message)


class StdlibInterpreter(MessageInterpreter):
    """Messages shaped like `json.JSONDecodeError`: `msg: line L column C (char N)`.

    `orjson` raises a subclass of `json.JSONDecodeError` with the same
    wording. The reported line and column count only newlines as line breaks,
    so the location is resolved from the character offset instead.
    """

    pattern = re.compile(r": line \d+ column \d+ \(char (?P<offset>\d+)\)$")
    default_error_types = (json.JSONDecodeError,)

    def enhance(self, text: str, message: str) -> str:
        m = self.pattern.search(message)
        if m is None:
            return message
        offset = int(m.group("offset"))
        if offset >= len(text):
            return message
        where = message[m.start() + 2 :]
        return f"{message[:m.start()]}: unexpected token {_describe_token(text[offset])} at {where}"
