"""Core data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class Document:
    """A markdown page and its raw text."""

    path: str
    text: str


@dataclass(slots=True)
class OutputArtifact:
    """Final text of one generated file."""

    path: Path
    text: str
    documents: int = 0

    @property
    def size(self) -> int:
        return len(self.text.encode("utf-8"))
