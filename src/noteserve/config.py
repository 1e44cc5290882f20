"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from noteserve.index.storage import SUMMARY_FILENAME

DEFAULT_OUTPUT_DIR = Path("output")


def _resolve(path: Path, base_dir: Path | None) -> Path:
    if Path(path).is_absolute() or base_dir is None:
        return Path(path)
    return base_dir / path


@dataclass(slots=True)
class AppConfig:
    notes_dir: Path | None = None
    output_dir: Path = DEFAULT_OUTPUT_DIR
    summary_name: str = SUMMARY_FILENAME
    summary_path: Path | None = None
    html_dir: Path | None = None
    case_sensitive: bool = False
    host: str = "127.0.0.1"
    port: int = 8000
    render_retries: int = 1

    def resolve_output_dir(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.output_dir, base_dir)

    def resolve_summary_path(self, base_dir: Path | None = None) -> Path:
        """Explicit summary path, or ``summary_name`` inside the output directory."""
        if self.summary_path is not None:
            return _resolve(self.summary_path, base_dir)
        return self.resolve_output_dir(base_dir) / self.summary_name

    def resolve_html_dir(self, base_dir: Path | None = None) -> Path:
        if self.html_dir is not None:
            return _resolve(self.html_dir, base_dir)
        return self.resolve_output_dir(base_dir)
