from dataclasses import dataclass, replace
from typing import Optional, Tuple

from folio.documents.query import DocumentQuery
from folio.documents.store import DocumentStore
from folio.documents.types import Rejected


@dataclass(frozen=True)
class Source:
    """Raw document text and the identifier it is reported under."""

    identifier: str
    text: str


@dataclass(frozen=True)
class IngestReport:
    store: DocumentStore
    rejected: Tuple[Rejected, ...] = ()
    accepted: int = 0
    directory: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True when every source made it into the store."""
        return not self.rejected

    @property
    def total(self) -> int:
        return self.accepted + len(self.rejected)

    def query(self) -> DocumentQuery:
        """Return a read-only façade over the loaded store."""
        return DocumentQuery(self.store)

    def with_failures(self, failures: Tuple[Rejected, ...]) -> "IngestReport":
        """Return a copy with extra failures reported ahead of the existing ones."""
        return replace(self, rejected=tuple(failures) + self.rejected)
