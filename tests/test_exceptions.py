"""Tests for the Folio error taxonomy."""

from folio.exceptions import (
    ConfigurationError,
    DocumentError,
    DuplicateSlug,
    FolioError,
    InvalidDate,
    InvalidField,
    MalformedDocument,
    MissingField,
    NotFound,
    StoreError,
)


def test_configuration_error_mentions_file():
    error = ConfigurationError("Invalid configuration", path="folio.toml")

    assert error.message == "Invalid configuration (path: folio.toml)"
    assert error.path == "folio.toml"
    assert error.exit_code == 2
    assert isinstance(error, FolioError)


def test_document_errors_exit_code():
    assert MalformedDocument("bad").exit_code == 3
    assert MissingField("title").exit_code == 3


def test_missing_field_message():
    error = MissingField("title", source="a.md")

    assert error.name == "title"
    assert error.reason == "missing required field 'title'"
    assert str(error) == "missing required field 'title' (source: a.md)"


def test_invalid_date_is_an_invalid_field():
    error = InvalidDate("expected a calendar date")

    assert isinstance(error, InvalidField)
    assert error.name == "date"


def test_attach_source_only_once():
    error = MalformedDocument("document is empty")

    error.attach_source("first.md")
    error.attach_source("second.md")

    assert error.source == "first.md"
    assert error.message == "document is empty (source: first.md)"
    assert str(error) == error.message


def test_duplicate_slug_is_both_store_and_document_error():
    error = DuplicateSlug("a", source="b.md", existing="a.md")

    assert isinstance(error, StoreError)
    assert isinstance(error, DocumentError)
    assert error.exit_code == 4
    assert error.message == "duplicate slug 'a', already provided by a.md (source: b.md)"


def test_not_found():
    error = NotFound("missing")

    assert isinstance(error, LookupError)
    assert error.exit_code == 4
    assert "missing" in error.message
