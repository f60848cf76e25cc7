from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass
from typing import TextIO

from .positions import LINE_TERMINATOR_RE, Position


_RESET = "\x1b[0m"
_GUTTER = "90"
_MARKER = "1;31"

_TOKEN_RE = re.compile(
    r'(?P<string>"(?:[^"\\]|\\.)*"?)'
    r"|(?P<number>-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)"
    r"|(?P<keyword>\b(?:true|false|null)\b)"
    r"|(?P<punct>[{}\[\],:])"
)
_TOKEN_STYLES = {
    "string": "32",
    "number": "35",
    "keyword": "36",
    "punct": "33",
}


@dataclass(frozen=True, slots=True)
class FrameOptions:
    """Layout of a rendered code frame.

    `highlight=None` leaves the choice to the caller: `render_frame` renders
    plain text, `JSONError.build` asks `should_highlight()`.
    """

    lines_above: int = 2
    lines_below: int = 3
    highlight: bool | None = None


def should_highlight(stream: TextIO | None = None) -> bool:
    """Whether terminal styling should be used when writing to `stream`."""
    if os.environ.get("NO_COLOR"):
        return False
    force = os.environ.get("FORCE_COLOR")
    if force is not None:
        return force not in ("0", "false")
    if stream is None:
        stream = sys.stderr
    isatty = getattr(stream, "isatty", None)
    return bool(isatty is not None and isatty())


def _paint(text: str, style: str, enabled: bool) -> str:
    if not enabled or not text:
        return text
    return f"\x1b[{style}m{text}{_RESET}"


def _highlight_json(line: str) -> str:
    return _TOKEN_RE.sub(lambda m: _paint(m.group(), _TOKEN_STYLES[m.lastgroup], True), line)


def render_frame(
    text: str,
    position: Position,
    options: FrameOptions | None = None,
    *,
    highlight: bool | None = None,
) -> str:
    """Render the lines around `position` with a caret under its column.

    ```
      1 | {
    > 2 |   "a": tru
        |        ^
      3 | }
    ```
    """
    opts = options or FrameOptions()
    if highlight is None:
        highlight = bool(opts.highlight)

    lines = LINE_TERMINATOR_RE.split(text)
    target = position.line
    first = max(min(target - opts.lines_above, len(lines)), 1)
    last = min(target + opts.lines_below, len(lines))
    width = len(str(last))

    out: list[str] = []
    for number in range(first, last + 1):
        line = lines[number - 1]
        gutter = f" {number:>{width}} |"
        body = f" {_highlight_json(line) if highlight else line}" if line else ""
        if number != target:
            out.append(f" {_paint(gutter, _GUTTER, highlight)}{body}")
            continue

        out.append(f"{_paint('>', _MARKER, highlight)}{_paint(gutter, _GUTTER, highlight)}{body}")
        # Tabs are kept so the caret lines up however the terminal expands them.
        spacing = "".join(ch if ch == "\t" else " " for ch in line[: max(position.column - 1, 0)])
        blank_gutter = re.sub(r"\d", " ", gutter)
        out.append(f" {_paint(blank_gutter, _GUTTER, highlight)} {spacing}{_paint('^', _MARKER, highlight)}")

    frame = "\n".join(out)
    if highlight:
        return f"{_RESET}{frame}{_RESET}"
    return frame
