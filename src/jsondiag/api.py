from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from .engines import Engine, get_engine
from .errors import JSONError
from .frame import FrameOptions


logger = logging.getLogger(__name__)

# Called with a dict key (str) or list index (int) and the already revived value.
Reviver = Callable[[str | int, Any], Any]


def revive(value: Any, reviver: Reviver) -> Any:
    """Apply `reviver` bottom-up over a parsed value, root last with key ``""``."""

    def walk(key: str | int, val: Any) -> Any:
        if isinstance(val, dict):
            for k in list(val):
                val[k] = walk(k, val[k])
        elif isinstance(val, list):
            for i, item in enumerate(val):
                val[i] = walk(i, item)
        return reviver(key, val)

    return walk("", value)


def parse(
    text: str,
    reviver: Reviver | None = None,
    file_name: str | None = None,
    *,
    engine: str | Engine | None = None,
    options: FrameOptions | None = None,
) -> Any:
    """Parse JSON, raising `JSONError` with a located code frame on failure.

    Errors the engine does not report as parse failures, and anything raised
    by `reviver`, propagate unchanged.
    """
    if not isinstance(text, str):
        raise TypeError(f"JSON text must be str, not {type(text).__name__}")
    eng = get_engine(engine)
    try:
        value = eng.loads(text)
    except Exception as exc:
        if not eng.interpreter.recognizes(exc):
            raise
        raw = str(exc)
        logger.debug("%s engine rejected input: %s", eng.name, raw)
    else:
        if reviver is None:
            return value
        return revive(value, reviver)

    location = None
    if text:
        location = eng.interpreter.locate(text, raw)
        message = eng.interpreter.enhance(text, raw)
    else:
        message = raw + " while parsing empty string"

    error = JSONError.build(message, text, location, options=options)
    error.file_name = file_name
    raise error


def parse_file(
    path: str | Path,
    reviver: Reviver | None = None,
    *,
    engine: str | Engine | None = None,
    options: FrameOptions | None = None,
    encoding: str = "utf-8",
) -> Any:
    p = Path(path).expanduser()
    text = p.read_text(encoding=encoding)
    return parse(text, reviver, str(path), engine=engine, options=options)
