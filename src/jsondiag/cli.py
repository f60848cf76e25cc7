from __future__ import annotations

import argparse
import logging
import sys

from .api import parse_file
from .engines import DEFAULT_ENGINE, ENGINES
from .errors import JSONError
from .frame import FrameOptions, should_highlight


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="jsondiag", description="Check JSON files and explain parse failures")
    ap.add_argument("files", nargs="+", help="JSON files to check")
    ap.add_argument(
        "-e",
        "--engine",
        choices=sorted(ENGINES),
        default=DEFAULT_ENGINE,
        help="JSON parser to use (default: %(default)s)",
    )
    color = ap.add_mutually_exclusive_group()
    color.add_argument("--color", dest="color", action="store_true", help="Always style code frames")
    color.add_argument("--no-color", dest="color", action="store_false", help="Never style code frames")
    ap.set_defaults(color=None)
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    use_color = should_highlight(sys.stderr) if args.color is None else args.color
    options = FrameOptions(highlight=use_color)

    status = 0
    for path in args.files:
        try:
            parse_file(path, engine=args.engine, options=options)
        except JSONError as e:
            status = 1
            print(e.format(raw=not use_color), file=sys.stderr)
        except OSError as e:
            status = 1
            print(f"{path}: {e.strerror or e}", file=sys.stderr)
        except UnicodeDecodeError as e:
            status = 1
            print(f"{path}: {e}", file=sys.stderr)
        else:
            print(f"{path}: ok")
    return status
