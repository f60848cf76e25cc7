from __future__ import annotations

from dataclasses import dataclass

from .frame import FrameOptions, render_frame, should_highlight
from .positions import Position


@dataclass(eq=False)
class JSONError(Exception):
    """Raised for malformed JSON.

    `message` is composed on every read from `base_message`, `file_name` and
    `code_frame`, so setting `file_name` after construction shows up in the
    next read. Assigning to `message` replaces `base_message`.
    """

    base_message: str
    file_name: str | None = None
    location: Position | None = None
    code_frame: str | None = None
    raw_code_frame: str | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.base_message)

    @classmethod
    def build(
        cls,
        message: str,
        text: str | None = None,
        location: Position | None = None,
        *,
        options: FrameOptions | None = None,
    ) -> "JSONError":
        if not text or location is None:
            return cls(base_message=message, location=location)
        opts = options or FrameOptions()
        highlight = should_highlight() if opts.highlight is None else opts.highlight
        return cls(
            base_message=message,
            location=location,
            code_frame=render_frame(text, location, opts, highlight=highlight),
            raw_code_frame=render_frame(text, location, opts, highlight=False),
        )

    @property
    def message(self) -> str:
        return self.format()

    @message.setter
    def message(self, value: str) -> None:
        self.base_message = value

    def format(self, *, raw: bool = False) -> str:
        """Compose the full message; `raw=True` uses the frame without styling."""
        out = self.base_message
        if self.file_name:
            out += f" in {self.file_name}"
        frame = self.raw_code_frame if raw else self.code_frame
        if frame:
            out += f"\n\n{frame}\n"
        return out

    def __str__(self) -> str:
        return self.message
