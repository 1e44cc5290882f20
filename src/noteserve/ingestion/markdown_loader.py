"""Markdown note loading, stripping and rendering.

Front matter is parsed with python-frontmatter, markdown is rendered with
Python-Markdown and plain text is extracted from the rendered HTML with
BeautifulSoup. Note pages are filled in from a Jinja2 template.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping

import frontmatter
import markdown
import yaml
from bs4 import BeautifulSoup
from jinja2 import Environment, PackageLoader, select_autoescape
from markupsafe import Markup

from noteserve.utils.text import normalize_whitespace

LOGGER = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["extra", "toc", "sane_lists"]


class NoteParseError(ValueError):
    """Raised when a note's front matter cannot be parsed."""


@dataclass(slots=True)
class ParsedNote:
    """A note split into metadata and markdown body."""

    path: Path
    title: str
    tags: List[str] = field(default_factory=list)
    body: str = ""


def _title_from(metadata: Mapping[str, Any], default: str) -> str:
    title = metadata.get("title")
    return title if isinstance(title, str) else default


def _tags_from(metadata: Mapping[str, Any]) -> List[str]:
    tags = metadata.get("tags")
    if not isinstance(tags, list):
        return []
    return [str(tag) for tag in tags]


def parse_note(path: Path) -> ParsedNote:
    """Read a markdown file and split off its front matter."""
    text = path.read_text(encoding="utf-8")
    try:
        post = frontmatter.loads(text)
    except yaml.YAMLError as exc:
        raise NoteParseError(f"Front matter in {path} contains invalid YAML: {exc}") from exc

    metadata = dict(post.metadata or {})
    LOGGER.debug("Parsed front matter keys for %s: %s", path, sorted(metadata))
    return ParsedNote(
        path=path,
        title=_title_from(metadata, path.stem),
        tags=_tags_from(metadata),
        body=post.content or "",
    )


def markdown_to_html(text: str) -> str:
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


def strip_markdown(text: str) -> str:
    """Reduce markdown to plain text, one normalised line per block."""
    if not text.strip():
        return ""
    soup = BeautifulSoup(markdown_to_html(text), "html.parser")
    return normalize_whitespace(soup.get_text().splitlines())


_TEMPLATES = Environment(
    loader=PackageLoader("noteserve.web", "templates"),
    autoescape=select_autoescape(),
)


def render_html(note: ParsedNote) -> str:
    """Render a parsed note to a standalone HTML document."""
    template = _TEMPLATES.get_template("note.html")
    return template.render(
        title=note.title,
        tags=note.tags,
        body=Markup(markdown_to_html(note.body)),
    )
