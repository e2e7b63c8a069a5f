"""
Tests for document loading.
"""

import logging
from pathlib import Path

import pytest

from bulba_bson.notation.errors import ErrorKind, HeaderError, StatementError, ValueTypeError
from bulba_bson.notation.lexer import TokenType
from bulba_bson.notation.loader import DocumentLoader, DocumentSummary, LoadError


def test_load_file(write_document, valid_source: str, valid_tree: dict) -> None:
    loader = DocumentLoader()

    document = loader.load_file(write_document(valid_source))

    assert document == valid_tree
    assert loader.last_tokens is not None
    assert loader.last_tokens[0].type == TokenType.HEADER
    assert loader.last_tokens[-1].type == TokenType.EOF


def test_load_file_accepts_str_path(write_document, valid_source: str) -> None:
    path = write_document(valid_source)

    assert DocumentLoader().load_file(str(path))["app_name"] == "Pokedex_API"


def test_load_string() -> None:
    document = DocumentLoader().load_string('BULBA!\nname ~> "Bulby"')

    assert document == {"name": "Bulby"}


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LoadError, match="not found"):
        DocumentLoader().load_file(tmp_path / "missing.bson")


def test_directory_is_not_a_file(tmp_path: Path) -> None:
    with pytest.raises(LoadError, match="Not a file"):
        DocumentLoader().load_file(tmp_path)


def test_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "binary.bson"
    path.write_bytes(b"BULBA!\nkey ~> \"\xff\xfe\"\n")

    with pytest.raises(LoadError, match="UTF-8") as excinfo:
        DocumentLoader().load_file(path)

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_format_errors_propagate_unchanged(write_document) -> None:
    path = write_document("NOT_BULBA!\nkey ~> 1")

    with pytest.raises(HeaderError) as excinfo:
        DocumentLoader().load_file(path)

    assert excinfo.value.kind is ErrorKind.HEADER


def test_format_error_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="bulba_bson")

    with pytest.raises(ValueTypeError):
        DocumentLoader().load_string("BULBA!\nok ~> 1\nkey ~> Pikachu", "team.bson")

    record = caplog.records[-1]
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "Target is immune!"
    assert (record.document, record.line) == ("team.bson", 3)


def test_format_error_names_document(write_document) -> None:
    path = write_document("BULBA!\nok ~> 1\nkey ~> Pikachu", "team.bson")

    with pytest.raises(ValueTypeError) as excinfo:
        DocumentLoader().load_file(path)

    assert excinfo.value.filename == str(path)
    assert excinfo.value.location == f"{path}:3"


def test_successful_load_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="bulba_bson")

    DocumentLoader().load_string("BULBA!\nkey ~> 1", "team.bson")

    record = caplog.records[-1]
    assert record.document == "team.bson"
    assert record.getMessage() == "6 tokens, 1 top-level entries"


def test_failed_load_keeps_previous_tokens() -> None:
    loader = DocumentLoader()
    loader.load_string("BULBA!\nkey ~> 1")
    previous = loader.last_tokens

    with pytest.raises(ValueTypeError):
        loader.load_string("BULBA!\nkey ~> nope")

    assert loader.last_tokens is previous


def test_array_depth_is_configurable() -> None:
    source = "BULBA!\nlist ~> <| <| <| 1 |> |> |>"

    assert DocumentLoader().load_string(source) == {"list": [[[1]]]}
    with pytest.raises(StatementError):
        DocumentLoader(max_array_depth=2).load_string(source)


def test_summarize(valid_source: str) -> None:
    loader = DocumentLoader()

    summary = loader.summarize(loader.load_string(valid_source))

    assert summary == DocumentSummary(keys=8, sections=3, arrays=1, max_stage=3)


def test_summarize_counts_nested_arrays() -> None:
    summary = DocumentLoader().summarize({"a": [[1], [2, [3]]], "b": 1})

    assert summary.arrays == 4
    assert summary.keys == 2
    assert summary.max_stage == 0
