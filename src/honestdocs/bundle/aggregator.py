"""LLM documentation bundle pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Collection, Iterable, Iterator, List, Sequence

from honestdocs.config import FRAMEWORK_NAME, AppConfig
from honestdocs.models import Document, OutputArtifact
from honestdocs.utils.files import iter_markdown_paths, read_markdown, write_text
from honestdocs.utils.text import index_label, slice_ext, strip_front_matter

LOGGER = logging.getLogger(__name__)

Discover = Callable[..., Iterator[str]]
Reader = Callable[[Path, str], str]
Writer = Callable[[Path, str], None]


def build_index_text(config: AppConfig, paths: Iterable[str]) -> str:
    """Render ``llms.txt``: site summary followed by one link per page."""
    links = [f"- [{index_label(path)}]({config.doc_url(slice_ext(path))})" for path in paths]
    return "\n".join(
        [
            f"# {config.framework}",
            "",
            f"> {config.description}",
            "",
            "## Docs",
            "",
            f"- [Full Docs]({config.full_docs_url}) Full documentation of {config.framework}.",
            f"- [Tiny Docs]({config.tiny_docs_url}): Tiny documentation of {config.framework}. "
            "(includes only desciption of core)",
            "",
            "## Optional",
            "",
            *links,
        ]
    )


def build_bundle(
    documents: Iterable[Document], header: str, *, framework: str = FRAMEWORK_NAME
) -> str:
    """Concatenate pages after ``header``, front matter stripped, blank-line separated."""
    parts = [header, f"# Start of {framework} documentation\n"]
    for document in documents:
        LOGGER.debug("Writing '%s'", document.path)
        parts.append(strip_front_matter(document.text))
        parts.append("\n\n")
    return "".join(parts)


@dataclass(slots=True)
class RunStats:
    artifacts: List[OutputArtifact] = field(default_factory=list)

    def add(self, artifact: OutputArtifact) -> None:
        self.artifacts.append(artifact)


class DocsAggregator:
    """Builds ``llms.txt``, ``llms-full.txt`` and ``llms-small.txt`` from a docs tree."""

    def __init__(
        self,
        config: AppConfig,
        *,
        base_dir: Path | None = None,
        discover: Discover = iter_markdown_paths,
        reader: Reader = read_markdown,
        writer: Writer = write_text,
    ) -> None:
        self.config = config
        self.docs_dir = config.resolve_docs_dir(base_dir)
        self.base_dir = base_dir
        self.discover = discover
        self.reader = reader
        self.writer = writer

    def discover_documents(self, *, exclude: Collection[str] = ()) -> List[str]:
        return list(self.discover(self.docs_dir, exclude=exclude))

    def iter_documents(self, paths: Sequence[str]) -> Iterator[Document]:
        for path in paths:
            yield Document(path=path, text=self.reader(self.docs_dir, path))

    def build_index(self, paths: Sequence[str]) -> OutputArtifact:
        return OutputArtifact(
            path=self.config.index_path(self.base_dir),
            text=build_index_text(self.config, paths),
            documents=len(paths),
        )

    def build_full(self, paths: Sequence[str]) -> OutputArtifact:
        return self._bundle(self.config.full_path(self.base_dir), paths, self.config.full_header)

    def build_tiny(self) -> OutputArtifact:
        paths = self.discover_documents(exclude=self.config.tiny_exclude)
        return self._bundle(self.config.tiny_path(self.base_dir), paths, self.config.tiny_header)

    def _bundle(self, path: Path, paths: Sequence[str], header: str) -> OutputArtifact:
        text = build_bundle(self.iter_documents(paths), header, framework=self.config.framework)
        return OutputArtifact(path=path, text=text, documents=len(paths))

    def _write(self, artifact: OutputArtifact) -> None:
        self.writer(artifact.path, artifact.text)
        LOGGER.info("Output '%s'", artifact.path)

    def run(self) -> RunStats:
        """Discover pages once, then write the index, full and tiny outputs in order."""
        stats = RunStats()
        paths = self.discover_documents()
        if not paths:
            LOGGER.warning("No markdown files found under %s", self.docs_dir)

        index = self.build_index(paths)
        self._write(index)
        stats.add(index)

        full = self.build_full(paths)
        self._write(full)
        stats.add(full)

        tiny = self.build_tiny()
        self._write(tiny)
        stats.add(tiny)
        return stats
