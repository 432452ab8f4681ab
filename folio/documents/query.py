"""
Read-only query façade handed to renderers.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, Iterator, Optional

from folio.documents.store import DocumentPredicate, DocumentStore
from folio.documents.types import Document


@dataclass(frozen=True)
class DocumentFilter:
    """
    Predicate over tags and draft status.

    Attributes:
        tags: Tags to match. Empty matches every document.
        match_all: Require every tag instead of any of them.
        drafts: ``None`` for any document, ``True`` for drafts only,
            ``False`` for published documents only.
    """

    tags: FrozenSet[str] = frozenset()
    match_all: bool = False
    drafts: Optional[bool] = None

    @classmethod
    def create(
        cls,
        tags: Iterable[str] = (),
        match_all: bool = False,
        drafts: Optional[bool] = None,
    ) -> "DocumentFilter":
        return cls(tags=frozenset(tags), match_all=match_all, drafts=drafts)

    def __call__(self, document: Document) -> bool:
        if self.drafts is not None and document.draft != self.drafts:
            return False
        if not self.tags:
            return True
        if self.match_all:
            return self.tags <= document.tags
        return not self.tags.isdisjoint(document.tags)


class DocumentQuery:
    """Lookup and listing over a single store snapshot."""

    def __init__(self, store: DocumentStore):
        self._store = store

    def get(self, slug: str) -> Document:
        """Return the document for ``slug`` or raise ``NotFound``."""
        return self._store.get(slug)

    def list(self, filter: Optional[DocumentPredicate] = None) -> Iterator[Document]:
        """Iterate over documents newest first, optionally filtered."""
        return self._store.list(filter)

    def tags(self, filter: Optional[DocumentPredicate] = None) -> Dict[str, int]:
        """Count documents per tag, ordered by tag name."""
        counts: Counter = Counter()
        for document in self._store.list(filter):
            counts.update(document.tags)
        return dict(sorted(counts.items()))

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, slug: object) -> bool:
        return slug in self._store
