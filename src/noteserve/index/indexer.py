"""Note rendering and indexing pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Set

from noteserve.index.storage import SUMMARY_FILENAME, SummaryStore
from noteserve.ingestion.markdown_loader import (
    ParsedNote,
    parse_note,
    render_html,
    strip_markdown,
)
from noteserve.models import NoteRecord
from noteserve.utils.files import html_name_for, iter_markdown_paths

LOGGER = logging.getLogger(__name__)


def find_notes(notes_dir: Path) -> list[Path]:
    """Find all markdown notes under ``notes_dir`` in discovery order."""
    return list(iter_markdown_paths([notes_dir]))


@dataclass(slots=True)
class IndexStats:
    rendered: int = 0
    failed: int = 0
    processed_files: list[Path] = field(default_factory=list)
    failed_files: list[Path] = field(default_factory=list)

    def record_success(self, path: Path) -> None:
        self.rendered += 1
        self.processed_files.append(path)

    def record_failure(self, path: Path) -> None:
        self.failed += 1
        self.processed_files.append(path)
        self.failed_files.append(path)


class Indexer:
    """Renders every note in a directory and writes the summary artifact."""

    def __init__(
        self,
        notes_dir: Path,
        output_dir: Path,
        *,
        summary_name: str = SUMMARY_FILENAME,
        render_retries: int = 1,
    ) -> None:
        self.notes_dir = Path(notes_dir)
        self.output_dir = Path(output_dir)
        self.store = SummaryStore(self.output_dir / summary_name)
        self.render_retries = max(render_retries, 0)
        self.records: List[NoteRecord] = []

    def index(self) -> IndexStats:
        """Render all notes and write the summary; failures are per note."""
        stats = IndexStats()
        self.records = []
        seen: Set[str] = set()
        self.output_dir.mkdir(parents=True, exist_ok=True)

        note_paths = find_notes(self.notes_dir)
        if not note_paths:
            LOGGER.warning("No markdown notes found in %s", self.notes_dir)

        for path in note_paths:
            try:
                LOGGER.info("Processing: %s", path)
                self.records.append(self._index_single(path, seen))
                stats.record_success(path)
            except Exception as exc:
                LOGGER.error("Could not process %s: %s", path, exc)
                stats.record_failure(path)

        self.store.write(self.records)
        LOGGER.info("Summary written to %s", self.store.path)
        return stats

    def _index_single(self, path: Path, seen: Set[str]) -> NoteRecord:
        note = parse_note(path)
        file = html_name_for(path, self.notes_dir)
        # Output names are compared case-folded to stay unique on case-insensitive filesystems.
        if file.casefold() in seen:
            raise ValueError(f"Output file {file} is already used by another note")
        content = strip_markdown(note.body)
        self._render_with_retry(note, self.output_dir / file)
        seen.add(file.casefold())
        return NoteRecord(file=file, title=note.title, tags=note.tags, content=content)

    def _render_with_retry(self, note: ParsedNote, destination: Path) -> None:
        attempts = self.render_retries + 1
        for attempt in range(1, attempts + 1):
            try:
                destination.parent.mkdir(parents=True, exist_ok=True)
                destination.write_text(render_html(note), encoding="utf-8")
            except Exception as exc:
                if attempt == attempts:
                    raise
                LOGGER.warning(
                    "Rendering %s failed (attempt %d/%d): %s", note.path, attempt, attempts, exc
                )
            else:
                LOGGER.debug("Rendered %s -> %s", note.path, destination)
                return
