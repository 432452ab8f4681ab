"""Test fixtures for Folio."""

import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

import pytest


def build_document(
    slug: Optional[str] = "sample",
    date: Optional[str] = "2025-09-14",
    title: Optional[str] = "Sample Article",
    summary: Optional[str] = "A short sample.",
    tags: Optional[Iterable[str]] = None,
    draft: Optional[bool] = None,
    body: str = "# Heading\n\nBody text.\n",
    extra: str = "",
) -> str:
    """Build raw document text with the given front matter values."""
    lines = ["---"]
    if title is not None:
        lines.append(f"title: {title}")
    if slug is not None:
        lines.append(f"slug: {slug}")
    if date is not None:
        lines.append(f"date: {date}")
    if summary is not None:
        lines.append(f"summary: {summary}")
    if tags is not None:
        lines.append("tags: [" + ", ".join(tags) + "]")
    if draft is not None:
        lines.append(f"draft: {'true' if draft else 'false'}")
    if extra:
        lines.append(extra.rstrip("\n"))
    lines.append("---")
    return "\n".join(lines) + "\n" + body


@pytest.fixture
def make_document() -> Callable[..., str]:
    """Factory for raw document text."""
    return build_document


@pytest.fixture
def article_dir(tmp_path: Path) -> Path:
    """Create a directory of articles with one broken document."""
    articles = tmp_path / "articles"
    articles.mkdir()
    (articles / "a.md").write_text(
        build_document(slug="a", date="2025-09-14", tags=["sql"])
    )
    (articles / "b.md").write_text(
        build_document(slug="b", date="2025-09-13", tags=["nosql"])
    )
    (articles / "draft.md").write_text(
        build_document(slug="wip", date="2025-09-20", tags=["sql"], draft=True)
    )
    (articles / "broken.md").write_text(build_document(slug="c", title=None))
    (articles / "notes.txt").write_text("not an article")
    return articles


@pytest.fixture
def config_file(tmp_path: Path, article_dir: Path) -> Path:
    """Create a configuration file pointing at the article directory."""
    config_path = tmp_path / "folio.toml"
    config_path.write_text(
        "[source]\n"
        'directory = "articles"\n'
        "\n"
        "[logging]\n"
        'level = "WARNING"\n'
        "structured = false\n"
    )
    return config_path


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo logging setup done by the code under test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
