from __future__ import annotations

from .api import parse, parse_file, revive
from .engines import Engine, get_engine
from .errors import JSONError
from .frame import FrameOptions, render_frame
from .interpreters import MessageInterpreter, StdlibInterpreter, V8Interpreter
from .positions import OffsetOutOfRange, Position, Unit, to_offset, to_position

__all__ = [
    "Engine",
    "FrameOptions",
    "JSONError",
    "MessageInterpreter",
    "OffsetOutOfRange",
    "Position",
    "StdlibInterpreter",
    "Unit",
    "V8Interpreter",
    "get_engine",
    "parse",
    "parse_file",
    "render_frame",
    "revive",
    "to_offset",
    "to_position",
]
