from __future__ import annotations

import json

import pytest

from jsondiag import Position, StdlibInterpreter, V8Interpreter
from jsondiag.interpreters import code_point, enhance_unexpected_token


def test_code_point() -> None:
    assert code_point("}") == "\\u{7d}"
    assert code_point("😀") == "\\u{1f600}"
    assert code_point("") == "\\u{0}"


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        (
            "Unexpected token } in JSON at position 8",
            'Unexpected token "}"(\\u{7d}) in JSON at position 8',
        ),
        (
            "Unexpected token '}', \"{\"a\": 1,}\" is not valid JSON",
            'Unexpected token "}"(\\u{7d}), "{"a": 1,}" is not valid JSON',
        ),
        ("Unexpected token 😀 in JSON at position 1", 'Unexpected token "😀"(\\u{1f600}) in JSON at position 1'),
        ("Unexpected end of JSON input", "Unexpected end of JSON input"),
        ("Unexpected token", "Unexpected token"),
        ("Expected ',' or '}' after property value in JSON at position 7", "Expected ',' or '}' after property value in JSON at position 7"),
    ],
)
def test_enhance_unexpected_token(message: str, expected: str) -> None:
    assert enhance_unexpected_token(message) == expected


def test_v8_offset_is_resolved_against_the_text() -> None:
    interp = V8Interpreter()
    assert interp.locate('{"a": 1,}', "Unexpected token } in JSON at position 8") == Position(line=1, column=9)
    assert interp.locate('{\n"a" 1}', "Unexpected number in JSON at position 6") == Position(line=2, column=5)


def test_v8_explicit_line_and_column_are_trusted() -> None:
    msg = "Unexpected token } in JSON at position 8 (line 7 column 3)"
    assert V8Interpreter().locate('{"a": 1,}', msg) == Position(line=7, column=3)


def test_v8_end_of_input_points_past_the_last_character() -> None:
    interp = V8Interpreter()
    msg = "Expected ',' or '}' after property value in JSON at position 7"
    assert interp.locate('{"a": 1', msg) == Position(line=1, column=8)
    # A trailing newline keeps the location on the last line.
    msg = "Expected ',' or '}' after property value in JSON at position 8"
    assert interp.locate('{"a": 1\n', msg) == Position(line=1, column=9)


def test_v8_offsets_count_utf16_units() -> None:
    text = '["😀" 1]'
    assert V8Interpreter().locate(text, "Unexpected number in JSON at position 6") == Position(line=1, column=6)


def test_unrecognized_messages_have_no_location() -> None:
    assert V8Interpreter().locate('{"a": 1', "Unexpected end of JSON input") is None
    assert StdlibInterpreter().locate('{"a": 1', "boom") is None


def test_offset_outside_the_text_has_no_location() -> None:
    assert V8Interpreter().locate("[1", "Unexpected token in JSON at position 99") is None


def test_recognized_error_types() -> None:
    v8 = V8Interpreter()
    assert v8.recognizes(SyntaxError("x"))
    assert v8.recognizes(ValueError("x"))
    assert not v8.recognizes(TypeError("x"))

    stdlib = StdlibInterpreter()
    assert stdlib.recognizes(json.JSONDecodeError("x", "doc", 0))
    assert not stdlib.recognizes(ValueError("x"))

    custom = V8Interpreter(error_types=[KeyError])
    assert custom.error_types == (KeyError,)
    assert not custom.recognizes(SyntaxError("x"))
    assert repr(custom) == "V8Interpreter(error_types=(KeyError))"


def _stdlib_message(text: str) -> str:
    with pytest.raises(json.JSONDecodeError) as e:
        json.loads(text)
    return str(e.value)


def test_stdlib_location_comes_from_the_message() -> None:
    text = '{\n  "a": tru\n}'
    assert StdlibInterpreter().locate(text, _stdlib_message(text)) == Position(line=2, column=8)


def test_stdlib_enhance_names_the_offending_character() -> None:
    text = '{\n  "a": tru\n}'
    msg = "Expecting value: line 2 column 8 (char 9)"
    assert StdlibInterpreter().enhance(text, msg) == (
        'Expecting value: unexpected token "t"(\\u{74}) at line 2 column 8 (char 9)'
    )


def test_stdlib_enhance_shows_only_the_code_point_of_unprintable_characters() -> None:
    text = '["a\nb"]'
    msg = "Invalid control character at: line 1 column 4 (char 3)"
    assert StdlibInterpreter().enhance(text, msg) == (
        "Invalid control character at: unexpected token \\u{a} at line 1 column 4 (char 3)"
    )


def test_stdlib_enhance_leaves_end_of_input_alone() -> None:
    msg = "Expecting ',' delimiter: line 1 column 8 (char 7)"
    assert StdlibInterpreter().enhance('{"a": 1', msg) == msg
    assert StdlibInterpreter().enhance('{"a": 1', "boom") == "boom"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("[1,\r2,\rx]", Position(line=3, column=1)),
        ('{"a": "x\u2028y", "b": tru}', Position(line=2, column=10)),
        ("[1,\r\n2,\r\nx]", Position(line=3, column=1)),
    ],
)
def test_stdlib_location_follows_every_line_terminator(text: str, expected: Position) -> None:
    assert StdlibInterpreter().locate(text, _stdlib_message(text)) == expected


def test_stdlib_end_of_input_stays_on_the_last_line() -> None:
    msg = "Expecting ',' delimiter: line 2 column 1 (char 8)"
    assert StdlibInterpreter().locate('{"a": 1\n', msg) == Position(line=1, column=9)
