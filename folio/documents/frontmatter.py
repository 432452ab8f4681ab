"""
Front matter handling for Markdown documents.

A document starts with a ``---`` line, followed by a YAML metadata block and a
closing ``---`` line. Everything after the closing line's terminator is the
body and is returned untouched.
"""

from typing import Any, Mapping, Tuple

import yaml

from folio.documents.types import FrontMatter
from folio.exceptions import MalformedDocument

DELIMITER = "---"
_BOM = "\ufeff"


def _read_line(text: str, pos: int) -> Tuple[str, int]:
    """Return the line starting at ``pos`` (without terminator) and the next offset."""
    end = text.find("\n", pos)
    if end == -1:
        return text[pos:], len(text)
    return text[pos:end], end + 1


def _is_delimiter(line: str) -> bool:
    return line.rstrip(" \t\r") == DELIMITER


def split_front_matter(text: str) -> FrontMatter:
    """
    Split raw document text into its metadata block and body.

    Args:
        text: Raw document text.

    Returns:
        The metadata block text and the body text.

    Raises:
        MalformedDocument: If the text is empty or a delimiter is missing.
    """
    if not text or not text.strip():
        raise MalformedDocument("document is empty")

    pos = len(_BOM) if text.startswith(_BOM) else 0
    first_line, pos = _read_line(text, pos)
    if not _is_delimiter(first_line):
        raise MalformedDocument(
            f"missing opening front matter delimiter '{DELIMITER}'"
        )

    metadata_start = pos
    while pos < len(text):
        line_start = pos
        line, pos = _read_line(text, pos)
        if _is_delimiter(line):
            return FrontMatter(text[metadata_start:line_start], text[pos:])

    raise MalformedDocument(f"missing closing front matter delimiter '{DELIMITER}'")


def dump_front_matter(metadata: Mapping[str, Any]) -> str:
    """
    Serialize metadata as a delimited YAML front matter block.

    Args:
        metadata: Front matter fields, written in insertion order.

    Returns:
        The block, including both delimiter lines and a trailing newline.
    """
    block = yaml.safe_dump(
        dict(metadata),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
    return f"{DELIMITER}\n{block}{DELIMITER}\n"


def compose_document(metadata: Mapping[str, Any], body: str) -> str:
    """Build raw document text from metadata and a body."""
    return dump_front_matter(metadata) + body
