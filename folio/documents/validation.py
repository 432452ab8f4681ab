"""
Metadata validation for Markdown documents.

Front matter is parsed with PyYAML and checked against the
:class:`DocumentMetadata` pydantic model. Pydantic errors are translated into
Folio's document error taxonomy so that callers only ever see
:class:`~folio.exceptions.DocumentError` subclasses.
"""

import datetime as dt
import re
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Optional

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictStr,
    ValidationError,
    field_validator,
)

from folio.documents.frontmatter import split_front_matter
from folio.documents.types import Accepted, Document, IngestOutcome, Rejected
from folio.exceptions import (
    DocumentError,
    InvalidDate,
    InvalidField,
    InvalidSlug,
    InvalidTags,
    MalformedDocument,
    MissingField,
)

REQUIRED_FIELDS = ("title", "slug", "date", "summary")

# Values left behind by templates that never got filled in.
PLACEHOLDER_VALUES = frozenset({"undefined"})

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
_SLUG = re.compile(r"[A-Za-z0-9][A-Za-z0-9._~-]*")

_FIELD_ERRORS = {
    "date": InvalidDate,
    "tags": InvalidTags,
    "slug": InvalidSlug,
}


class FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader that leaves impossible timestamps such as 2025-02-30 as strings."""


def _construct_timestamp(loader: FrontMatterLoader, node: yaml.ScalarNode) -> Any:
    try:
        return loader.construct_yaml_timestamp(node)
    except ValueError:
        return loader.construct_scalar(node)


FrontMatterLoader.add_constructor("tag:yaml.org,2002:timestamp", _construct_timestamp)


class DocumentMetadata(BaseModel):
    """Pydantic model for document front matter."""

    model_config = ConfigDict(extra="allow", frozen=True)

    title: StrictStr
    slug: StrictStr
    date: dt.date
    summary: StrictStr
    tags: FrozenSet[str] = frozenset()
    draft: StrictBool = False

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """Validate that the slug is a URL-safe token."""
        if not _SLUG.fullmatch(v):
            raise ValueError(f"{v!r} is not a URL-safe slug")
        return v

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> dt.date:
        """Accept YAML dates, datetimes and strict YYYY-MM-DD strings."""
        if isinstance(v, dt.datetime):
            return v.date()
        if isinstance(v, dt.date):
            return v
        if isinstance(v, str) and _ISO_DATE.fullmatch(v.strip()):
            try:
                return dt.date.fromisoformat(v.strip())
            except ValueError:
                raise ValueError(f"{v!r} is not a valid calendar date") from None
        raise ValueError(f"expected a calendar date in YYYY-MM-DD form, got {v!r}")

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, v: Any) -> FrozenSet[str]:
        """Validate that tags is a list of non-empty strings."""
        if v is None:
            return frozenset()
        if isinstance(v, str) or not isinstance(v, (list, tuple, set, frozenset)):
            raise ValueError(f"expected a list of strings, got {v!r}")
        for tag in v:
            if not isinstance(tag, str):
                raise ValueError(f"tag {tag!r} is not a string")
            if not tag.strip():
                raise ValueError("tags must not contain empty strings")
        return frozenset(v)

    @field_validator("draft", mode="before")
    @classmethod
    def default_draft(cls, v: Any) -> Any:
        """Treat an empty ``draft:`` as not a draft."""
        return False if v is None else v


def parse_metadata(block: str) -> Dict[Any, Any]:
    """
    Parse a front matter block into a mapping.

    Args:
        block: YAML text between the front matter delimiters.

    Returns:
        The parsed fields. An empty block yields an empty mapping. Keys that
        YAML reads as something other than a string (``2025: ...``) are kept
        as they are.

    Raises:
        MalformedDocument: If the block is not valid YAML or not a mapping.
    """
    try:
        data = yaml.load(block, Loader=FrontMatterLoader)
    except yaml.YAMLError as e:
        raise MalformedDocument(f"front matter is not valid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedDocument(
            f"front matter must be a mapping, got {type(data).__name__}"
        )
    return data


def _check_required(fields: Dict[str, Any]) -> None:
    for name in REQUIRED_FIELDS:
        value = fields.get(name)
        if value is None:
            raise MissingField(name)
        if isinstance(value, str):
            stripped = value.strip()
            if not stripped:
                raise MissingField(name, detail="value is blank")
            if stripped.lower() in PLACEHOLDER_VALUES:
                raise MissingField(name, detail=f"placeholder value {value!r}")


def _translate(exc: ValidationError) -> DocumentError:
    error = exc.errors()[0]
    name = str(error["loc"][0]) if error["loc"] else "front matter"
    detail = error["msg"].removeprefix("Value error, ")
    if error["type"] == "missing":
        return MissingField(name)
    if name in _FIELD_ERRORS:
        return _FIELD_ERRORS[name](detail)
    return InvalidField(name, detail)


def validate_metadata(
    fields: Dict[Any, Any], body: str, source: Optional[str] = None
) -> Document:
    """
    Validate front matter fields and build a document.

    Args:
        fields: Parsed front matter.
        body: Document body, kept as-is.
        source: Identifier of the source the document came from.

    Returns:
        The validated document.

    Raises:
        DocumentError: If a required field is missing or a field is invalid.
    """
    # Non-string keys can never name a known field; they pass through as extras.
    named = {key: value for key, value in fields.items() if isinstance(key, str)}
    extra = {key: value for key, value in fields.items() if not isinstance(key, str)}

    try:
        _check_required(named)
        try:
            metadata = DocumentMetadata.model_validate(named)
        except ValidationError as e:
            raise _translate(e) from e
    except DocumentError as e:
        raise e.attach_source(source)

    extra.update(metadata.model_extra or {})
    return Document(
        slug=metadata.slug,
        title=metadata.title,
        date=metadata.date,
        summary=metadata.summary,
        body=body,
        tags=metadata.tags,
        draft=metadata.draft,
        extra=MappingProxyType(extra),
        source=source,
    )


def parse_document(text: str, source: Optional[str] = None) -> Document:
    """
    Parse and validate a raw document.

    Args:
        text: Raw document text.
        source: Identifier of the source the text came from.

    Returns:
        The validated document.

    Raises:
        DocumentError: If the document is malformed or its metadata is invalid.
    """
    try:
        block, body = split_front_matter(text)
        fields = parse_metadata(block)
    except DocumentError as e:
        raise e.attach_source(source)
    return validate_metadata(fields, body, source)


def evaluate(text: str, source: Optional[str] = None) -> IngestOutcome:
    """Parse a raw document and wrap the outcome instead of raising."""
    try:
        return Accepted(source, parse_document(text, source))
    except DocumentError as e:
        return Rejected(source, e)
