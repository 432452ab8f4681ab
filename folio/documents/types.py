import datetime as dt
import hashlib
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, NamedTuple, Optional, Union

from folio.exceptions import DocumentError


class FrontMatter(NamedTuple):
    """Raw metadata block and body split out of a source document."""

    metadata: str
    body: str


@dataclass(frozen=True)
class Document:
    slug: str
    title: str
    date: dt.date
    summary: str
    body: str
    tags: FrozenSet[str] = frozenset()
    draft: bool = False
    extra: Mapping[Any, Any] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    source: Optional[str] = field(default=None, compare=False)

    @property
    def digest(self) -> str:
        """SHA-256 of the body, used to address content independently of its slug."""
        return hashlib.sha256(self.body.encode("utf-8")).hexdigest()

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def metadata(self) -> Dict[str, Any]:
        """Return the front matter fields, known fields first, extras after."""
        fields: Dict[str, Any] = {
            "title": self.title,
            "slug": self.slug,
            "date": self.date,
            "summary": self.summary,
            "tags": sorted(self.tags),
            "draft": self.draft,
        }
        for key, value in self.extra.items():
            fields.setdefault(key, value)
        return fields

    def to_dict(self, include_body: bool = True) -> Dict[str, Any]:
        """Return a JSON-friendly representation for renderers and the CLI."""
        data = {
            "slug": self.slug,
            "title": self.title,
            "date": self.date.isoformat(),
            "summary": self.summary,
            "tags": sorted(self.tags),
            "draft": self.draft,
            "digest": self.digest,
            "source": self.source,
            "extra": {str(key): value for key, value in self.extra.items()},
        }
        if include_body:
            data["body"] = self.body
        return data


@dataclass(frozen=True)
class Accepted:
    """A source that produced a valid document."""

    source: Optional[str]
    document: Document

    ok = True


@dataclass(frozen=True)
class Rejected:
    """A source that failed parsing, validation or insertion."""

    source: Optional[str]
    error: DocumentError

    ok = False

    @property
    def reason(self) -> str:
        return self.error.reason

    @property
    def kind(self) -> str:
        return type(self.error).__name__


IngestOutcome = Union[Accepted, Rejected]
