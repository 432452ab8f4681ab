"""Tests for Folio logging setup."""

import io
import json

import pytest
import structlog

from folio.ingestion import Source, ingest
from folio.utils import configure_structlog, get_logger, setup_logging


def test_invalid_level():
    with pytest.raises(ValueError, match="Invalid log level"):
        setup_logging(level="LOUD")


def test_structured_output_is_json():
    stream = io.StringIO()
    setup_logging(level="INFO", structured=True, stream=stream)

    get_logger("folio.test").info("something_happened", count=3)

    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["event"] == "something_happened"
    assert record["count"] == 3
    assert record["level"] == "info"
    assert "timestamp" in record


def test_level_filters_events():
    stream = io.StringIO()
    setup_logging(level="WARNING", structured=True, stream=stream)

    get_logger("folio.test").info("quiet")

    assert stream.getvalue() == ""


def test_rejections_are_logged(make_document):
    stream = io.StringIO()
    setup_logging(level="WARNING", structured=True, stream=stream)

    ingest([Source("bad.md", make_document(title=None))])

    events = [json.loads(line) for line in stream.getvalue().splitlines()]
    rejected = [event for event in events if event["event"] == "document_rejected"]
    assert rejected[0]["source"] == "bad.md"
    assert rejected[0]["error"] == "MissingField"


def test_library_use_prints_nothing(make_document, capsys):
    structlog.reset_defaults()
    configure_structlog()

    report = ingest(
        [Source("a.md", make_document(slug="a")), Source("b.md", "no front matter")]
    )

    assert report.accepted == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
