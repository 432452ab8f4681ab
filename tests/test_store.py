"""Tests for the document record store."""

import datetime as dt

import pytest

from folio.documents import Document, DocumentStore
from folio.exceptions import DuplicateSlug, NotFound, StoreError, StoreSealed


def make_doc(slug, date, **kwargs):
    year, month, day = (int(part) for part in date.split("-"))
    fields = {
        "title": f"Title {slug}",
        "summary": f"Summary {slug}",
        "body": f"Body of {slug}\n",
    }
    fields.update(kwargs)
    return Document(slug=slug, date=dt.date(year, month, day), **fields)


@pytest.fixture
def store():
    return DocumentStore()


def test_insert_and_get(store):
    doc = make_doc("a", "2025-09-14")
    store.insert(doc)

    assert store.get("a") is doc
    assert "a" in store
    assert len(store) == 1


def test_list_newest_first(store):
    store.insert(make_doc("b", "2025-09-13"))
    store.insert(make_doc("a", "2025-09-14"))

    assert [doc.slug for doc in store.list()] == ["a", "b"]


def test_same_date_ordered_by_slug(store):
    store.insert(make_doc("zeta", "2025-09-14"))
    store.insert(make_doc("older", "2025-01-01"))
    store.insert(make_doc("alpha", "2025-09-14"))

    assert [doc.slug for doc in store.list()] == ["alpha", "zeta", "older"]


def test_duplicate_slug_keeps_first(store):
    first = make_doc("a", "2025-09-14", source="first.md")
    second = make_doc("a", "2025-10-01", title="Other", source="second.md")
    store.insert(first)

    with pytest.raises(DuplicateSlug) as exc_info:
        store.insert(second)

    assert exc_info.value.slug == "a"
    assert exc_info.value.source == "second.md"
    assert exc_info.value.existing == "first.md"
    assert store.get("a") is first
    assert len(store) == 1


def test_get_missing_raises_not_found(store):
    store.insert(make_doc("a", "2025-09-14"))

    with pytest.raises(NotFound) as exc_info:
        store.get("missing")

    assert exc_info.value.slug == "missing"


def test_not_found_is_a_lookup_error(store):
    with pytest.raises(LookupError):
        store.get("missing")


def test_list_is_restartable(store):
    store.insert(make_doc("a", "2025-09-14"))
    store.insert(make_doc("b", "2025-09-13"))
    store.seal()

    first = store.list()
    second = store.list()

    assert [doc.slug for doc in first] == ["a", "b"]
    assert list(first) == []
    assert [doc.slug for doc in second] == ["a", "b"]


def test_list_with_filter(store):
    store.insert(make_doc("a", "2025-09-14", tags=frozenset({"sql"})))
    store.insert(make_doc("b", "2025-09-13", tags=frozenset({"nosql"})))
    store.insert(make_doc("c", "2025-09-12", draft=True))

    assert [doc.slug for doc in store.list(lambda doc: "sql" in doc.tags)] == ["a"]
    assert [doc.slug for doc in store.list(lambda doc: doc.draft)] == ["c"]


def test_sealed_store_rejects_inserts(store):
    store.insert(make_doc("a", "2025-09-14"))
    store.seal()

    with pytest.raises(StoreSealed):
        store.insert(make_doc("b", "2025-09-13"))

    assert store.sealed
    assert store.slugs() == frozenset({"a"})


def test_store_errors_share_a_base(store):
    store.insert(make_doc("a", "2025-09-14"))

    with pytest.raises(StoreError):
        store.insert(make_doc("a", "2025-09-14"))
    with pytest.raises(StoreError):
        store.get("b")


def test_document_digest_tracks_body():
    one = make_doc("a", "2025-09-14", body="same\n")
    two = make_doc("b", "2025-01-01", body="same\n")
    three = make_doc("c", "2025-01-01", body="different\n")

    assert one.digest == two.digest
    assert one.digest != three.digest
    assert len(one.digest) == 64


def test_document_to_dict():
    doc = make_doc("a", "2025-09-14", tags=frozenset({"sql", "acid"}))

    data = doc.to_dict(include_body=False)

    assert data["date"] == "2025-09-14"
    assert data["tags"] == ["acid", "sql"]
    assert "body" not in data
    assert doc.to_dict()["body"] == "Body of a\n"
