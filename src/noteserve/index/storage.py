"""JSON summary artifact shared by the indexer and the server."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List

from noteserve.index.search import SearchIndex
from noteserve.models import NoteRecord

LOGGER = logging.getLogger(__name__)

SUMMARY_FILENAME = "summary.json"


class SummaryStore:
    """Persistence layer for the note summary array."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def write(self, records: Iterable[NoteRecord]) -> int:
        """Write all records and return how many were written."""
        payload = [record.to_dict() for record in records]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        LOGGER.debug("Wrote %d records to %s", len(payload), self.path)
        return len(payload)

    def read(self) -> List[NoteRecord]:
        """Read every record from the artifact.

        Raises:
            FileNotFoundError: if the artifact does not exist.
            ValueError: if it is not a JSON array of note records.
        """
        raw = self.path.read_text(encoding="utf-8")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Summary file {self.path} is not valid JSON: {exc}") from exc

        if not isinstance(data, list):
            raise ValueError(f"Summary file {self.path} must contain a JSON array")

        return [NoteRecord.from_dict(item) for item in data]


def load_index(path: Path, *, case_sensitive: bool = False) -> SearchIndex:
    """Build a search index from the summary artifact at ``path``.

    A missing artifact yields an index that is not built.
    """
    store = SummaryStore(path)
    if not store.exists():
        LOGGER.warning("Summary file not found at %s, search index not built", store.path)
        return SearchIndex(case_sensitive=case_sensitive)

    records = store.read()
    LOGGER.info("Loaded %d notes from %s", len(records), store.path)
    return SearchIndex.from_records(records, case_sensitive=case_sensitive)
