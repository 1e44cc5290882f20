"""Utility helpers for working with note files."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Iterable, Iterator

MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"


def iter_markdown_paths(inputs: Iterable[Path]) -> Iterator[Path]:
    """Yield markdown paths from input paths, descending into directories."""
    for item in inputs:
        if item.is_dir():
            yield from iter_markdown_paths(sorted(child for child in item.rglob("*") if child.is_file()))
        elif item.is_file() and item.suffix.lower() == MARKDOWN_SUFFIX:
            yield item


def html_name_for(path: Path, root: Path) -> str:
    """Output identifier for a note: its path under ``root`` with an .html suffix.

    Only an exact ``.md`` suffix is replaced; other spellings such as ``.MD``
    are kept so ``plan.md`` and ``plan.MD`` map to different files.
    """
    relative = PurePosixPath(*path.relative_to(root).parts)
    if relative.suffix == MARKDOWN_SUFFIX:
        return str(relative.with_suffix(HTML_SUFFIX))
    return f"{relative}{HTML_SUFFIX}"


def is_within(path: Path, base: Path) -> bool:
    """Return True if ``path`` resolves to a location inside ``base``."""
    try:
        path.resolve().relative_to(base.resolve())
    except ValueError:
        return False
    return True
