"""Rendered export file held in memory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    content: bytes
    media_type: str

    def save(self, target: str | Path) -> Path:
        """Write the artifact to ``target``.

        A directory target receives the file under its own ``filename``;
        anything else is treated as the full output path.
        """
        path = Path(target)
        if path.is_dir():
            path = path / self.filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.content)
        return path
