"""Text helpers."""

from __future__ import annotations

from typing import Iterable


def normalize_whitespace(lines: Iterable[str]) -> str:
    """Collapse whitespace and join lines."""
    return "\n".join(" ".join(line.split()) for line in lines if line.strip())
