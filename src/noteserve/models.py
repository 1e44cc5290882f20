"""Core NoteServe data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple


@dataclass(frozen=True, slots=True)
class NoteRecord:
    """Indexed representation of one markdown note.

    Records are frozen so an index handing them out cannot be changed through them.
    """

    file: str
    title: str
    tags: Tuple[str, ...] = ()
    content: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(self.tags))

    def to_dict(self) -> Dict[str, Any]:
        """Full record, as stored in the summary artifact."""
        return {
            "file": self.file,
            "title": self.title,
            "tags": list(self.tags),
            "content": self.content,
        }

    def to_summary(self) -> Dict[str, Any]:
        """Record without its content, as sent in search responses."""
        return {"file": self.file, "title": self.title, "tags": list(self.tags)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NoteRecord":
        if not isinstance(data, Mapping):
            raise ValueError(f"Note record must be an object, got {type(data).__name__}")

        for key in ("file", "title", "content"):
            if not isinstance(data.get(key), str):
                raise ValueError(f"Note record field '{key}' must be a string")

        tags = data.get("tags", [])
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise ValueError("Note record field 'tags' must be a list of strings")

        return cls(file=data["file"], title=data["title"], tags=tags, content=data["content"])
