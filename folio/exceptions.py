"""
Custom exception classes for Folio.

This module defines the error taxonomy shared by the parser, the validator,
the record store and the CLI.
"""

from typing import Optional


class FolioError(Exception):
    """
    Base class for Folio errors.

    ``exit_code`` is the process status the CLI exits with when the error
    reaches it.
    """

    def __init__(self, message: str, exit_code: int = 1):
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class ConfigurationError(FolioError):
    """
    Raised when the configuration cannot be loaded or fails validation.

    ``path`` names the configuration file and is appended to the message the
    same way :class:`SourceError` reports the directory it failed on.
    """

    def __init__(self, message: str, path: Optional[str] = None, exit_code: int = 2):
        self.path = path
        if path:
            message = f"{message} (path: {path})"
        super().__init__(message, exit_code)


class SourceError(FolioError):
    """
    Exception raised when a source directory cannot be scanned.
    """

    def __init__(self, message: str, path: Optional[str] = None, exit_code: int = 5):
        self.path = path
        if path:
            message = f"{message} (path: {path})"
        super().__init__(message, exit_code)


class DocumentError(FolioError):
    """
    Base class for per-document failures reported at ingestion time.

    ``reason`` keeps the bare message; ``message`` carries the source suffix
    once one is attached.
    """

    def __init__(self, reason: str, source: Optional[str] = None, exit_code: int = 3):
        """
        Initialize the exception.

        Args:
            reason: Description of what is wrong with the document.
            source: Identifier of the source the document was read from.
            exit_code: Exit code to use when this exception causes program termination.
        """
        self.reason = reason
        self.source = source
        super().__init__(self._format(reason, source), exit_code)

    @staticmethod
    def _format(reason: str, source: Optional[str]) -> str:
        if source:
            return f"{reason} (source: {source})"
        return reason

    def attach_source(self, source: Optional[str]) -> "DocumentError":
        """Record the source identifier if the error was raised without one."""
        if source and not self.source:
            self.source = source
            self.message = self._format(self.reason, source)
            self.args = (self.message,)
        return self


class MalformedDocument(DocumentError):
    """Raised when the front matter block cannot be located or parsed."""


class UnreadableSource(DocumentError):
    """Raised when a source file cannot be read or decoded."""


class MissingField(DocumentError):
    """Raised when a required front matter field is absent or blank."""

    def __init__(self, name: str, source: Optional[str] = None, detail: Optional[str] = None):
        self.name = name
        reason = f"missing required field '{name}'"
        if detail:
            reason = f"{reason}: {detail}"
        super().__init__(reason, source)


class InvalidField(DocumentError):
    """Raised when a front matter field is present but has the wrong shape."""

    def __init__(self, name: str, detail: str, source: Optional[str] = None):
        self.name = name
        self.detail = detail
        super().__init__(f"invalid field '{name}': {detail}", source)


class InvalidDate(InvalidField):
    """Raised when ``date`` is not an unambiguous calendar date."""

    def __init__(self, detail: str, source: Optional[str] = None):
        super().__init__("date", detail, source)


class InvalidTags(InvalidField):
    """Raised when ``tags`` is not a list of non-empty strings."""

    def __init__(self, detail: str, source: Optional[str] = None):
        super().__init__("tags", detail, source)


class InvalidSlug(InvalidField):
    """Raised when ``slug`` is not a URL-safe token."""

    def __init__(self, detail: str, source: Optional[str] = None):
        super().__init__("slug", detail, source)


class StoreError(FolioError):
    """
    Base class for record store errors.
    """

    def __init__(self, message: str, exit_code: int = 4):
        super().__init__(message, exit_code)


class DuplicateSlug(StoreError, DocumentError):
    """
    Raised when a document is inserted under a slug the store already holds.
    """

    def __init__(self, slug: str, source: Optional[str] = None, existing: Optional[str] = None):
        """
        Initialize the exception.

        Args:
            slug: The conflicting slug.
            source: Source of the rejected document.
            existing: Source of the document already stored under the slug.
        """
        self.slug = slug
        self.existing = existing
        reason = f"duplicate slug '{slug}'"
        if existing:
            reason = f"{reason}, already provided by {existing}"
        DocumentError.__init__(self, reason, source, exit_code=4)


class NotFound(StoreError, LookupError):
    """
    Raised when a slug is not present in the store.
    """

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"no document with slug '{slug}'")


class StoreSealed(StoreError):
    """
    Raised when inserting into a store that has already been sealed.
    """

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"store is sealed; cannot insert '{slug}'")
