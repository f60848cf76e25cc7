from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import orjson

from .interpreters import MessageInterpreter, StdlibInterpreter


@dataclass(frozen=True, slots=True)
class Engine:
    """A strict JSON parser paired with the interpreter for its messages."""

    name: str
    loads: Callable[[str], Any]
    interpreter: MessageInterpreter


STDLIB = Engine(name="stdlib", loads=json.loads, interpreter=StdlibInterpreter())
ORJSON = Engine(
    name="orjson",
    loads=orjson.loads,
    interpreter=StdlibInterpreter(error_types=(orjson.JSONDecodeError,)),
)

ENGINES: dict[str, Engine] = {e.name: e for e in (STDLIB, ORJSON)}
DEFAULT_ENGINE = STDLIB.name


def get_engine(engine: str | Engine | None = None) -> Engine:
    if isinstance(engine, Engine):
        return engine
    name = engine or DEFAULT_ENGINE
    try:
        return ENGINES[name]
    except KeyError:
        available = ", ".join(sorted(ENGINES))
        raise KeyError(f"unknown engine {name!r} (available: {available})") from None
