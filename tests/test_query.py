"""Tests for the read-only query façade."""

import pytest

from folio.documents import DocumentFilter, DocumentQuery
from folio.exceptions import NotFound
from folio.ingestion import Source, ingest


@pytest.fixture
def query(make_document):
    report = ingest(
        [
            Source("a.md", make_document(slug="a", date="2025-09-14", tags=["sql", "acid"])),
            Source("b.md", make_document(slug="b", date="2025-09-13", tags=["nosql"])),
            Source("c.md", make_document(slug="c", date="2025-09-12", tags=["sql"])),
            Source(
                "d.md",
                make_document(slug="d", date="2025-09-20", tags=["sql"], draft=True),
            ),
        ]
    )
    return report.query()


def slugs(documents):
    return [doc.slug for doc in documents]


def test_get(query):
    assert query.get("b").title == "Sample Article"


def test_get_missing(query):
    with pytest.raises(NotFound):
        query.get("nope")


def test_list_everything(query):
    assert slugs(query.list()) == ["d", "a", "b", "c"]
    assert len(query) == 4
    assert "d" in query


def test_filter_any_tag(query):
    assert slugs(query.list(DocumentFilter.create(["acid", "nosql"]))) == ["a", "b"]


def test_filter_all_tags(query):
    document_filter = DocumentFilter.create(["sql", "acid"], match_all=True)

    assert slugs(query.list(document_filter)) == ["a"]


def test_filter_published_only(query):
    assert slugs(query.list(DocumentFilter(drafts=False))) == ["a", "b", "c"]


def test_filter_drafts_only(query):
    assert slugs(query.list(DocumentFilter(drafts=True))) == ["d"]


def test_empty_filter_matches_everything(query):
    assert slugs(query.list(DocumentFilter())) == slugs(query.list())


def test_tag_counts(query):
    assert query.tags() == {"acid": 1, "nosql": 1, "sql": 3}
    assert query.tags(DocumentFilter(drafts=False)) == {"acid": 1, "nosql": 1, "sql": 2}


def test_query_has_no_mutation_api():
    assert not hasattr(DocumentQuery, "insert")
    assert not hasattr(DocumentQuery, "seal")
