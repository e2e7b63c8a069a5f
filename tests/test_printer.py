"""
Tests for document rendering.
"""

import io

from bulba_bson.notation.parser import parse_document
from bulba_bson.notation.printer import format_scalar, print_document, render


EXPECTED_TREE = """\
app_name: Pokedex_API
version: 1.5
is_production: false
missing_data: null
database:
  host: 127.0.0.1
  pool:
    max_connections: 100
    KERNEL_FLAGS:
      panic_on_fail: true
whitelist:
  - Prof_Oak
  - Mom
"""


def test_render_single_key() -> None:
    assert render({"name": "Bulby"}) == "name: Bulby\n"


def test_render_valid_document(valid_tree: dict) -> None:
    assert render(valid_tree) == EXPECTED_TREE


def test_render_sorted_keys() -> None:
    document = {"b": 1, "a": {"z": True, "KERNEL": None}}

    assert render(document, sort_keys=True) == "a:\n  KERNEL: null\n  z: true\nb: 1\n"


def test_render_custom_indent() -> None:
    assert render({"a": {"b": 1}}, indent="    ") == "a:\n    b: 1\n"


def test_render_nested_arrays() -> None:
    assert render({"m": [[1, 2], "x", None]}) == "m:\n  -\n    - 1\n    - 2\n  - x\n  - null\n"


def test_render_empty_containers() -> None:
    assert render({}) == ""
    assert render({"a": {}, "b": []}) == "a: {}\nb: []\n"
    assert render({"m": [[], {}]}) == "m:\n  - []\n  - {}\n"


def test_format_scalar() -> None:
    assert format_scalar(True) == "true"
    assert format_scalar(False) == "false"
    assert format_scalar(None) == "null"
    assert format_scalar(0) == "0"
    assert format_scalar(2.5) == "2.5"
    assert format_scalar("text") == "text"


def test_print_document_to_stream() -> None:
    stream = io.StringIO()

    print_document({"name": "Bulby"}, file=stream)

    assert stream.getvalue() == "name: Bulby\n"


def test_empty_string_and_null_differ() -> None:
    assert render({"a": "", "b": None}) == 'a: ""\nb: null\n'


def test_strings_that_read_as_other_values_are_quoted() -> None:
    assert format_scalar("") == '""'
    assert format_scalar("null") == '"null"'
    assert format_scalar("true") == '"true"'
    assert format_scalar("42") == '"42"'
    assert format_scalar("-1.5e3") == '"-1.5e3"'
    assert format_scalar("127.0.0.1") == "127.0.0.1"
    assert format_scalar("MissingNo") == "MissingNo"


def test_render_distinguishes_parsed_values() -> None:
    document = parse_document('BULBA!\nempty ~> ""\nnothing ~> MissingNo\ntext ~> "5"\nnum ~> 5')

    assert render(document) == 'empty: ""\nnothing: null\ntext: "5"\nnum: 5\n'
