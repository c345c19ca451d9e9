"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

FRAMEWORK_NAME = "HonestJS"
SITE_URL = "https://honestjs.dev"
DESCRIPTION = (
    "HonestJS is a small, simple, and ultrafast web framework built on Web Standards. "
    "It works on any JavaScript runtime: Cloudflare Workers, Fastly Compute, Deno, Bun, "
    "Vercel, Netlify, AWS Lambda, Lambda@Edge, and Node.js."
)
TINY_EXCLUDE: Tuple[str, ...] = ("concepts", "helpers", "middleware")


def _resolve(path: Path, base_dir: Path | None) -> Path:
    if Path(path).is_absolute() or base_dir is None:
        return Path(path)
    return base_dir / path


@dataclass(slots=True)
class AppConfig:
    docs_dir: Path = Path("docs")
    output_dir: Path = Path("public")
    index_name: str = "llms.txt"
    full_name: str = "llms-full.txt"
    tiny_name: str = "llms-small.txt"
    framework: str = FRAMEWORK_NAME
    site_url: str = SITE_URL
    description: str = DESCRIPTION
    tiny_exclude: Tuple[str, ...] = TINY_EXCLUDE

    @property
    def full_header(self) -> str:
        return f"<SYSTEM>This is the full developer documentation for {self.framework}.</SYSTEM>\n\n"

    @property
    def tiny_header(self) -> str:
        return f"<SYSTEM>This is the tiny developer documentation for {self.framework}.</SYSTEM>\n\n"

    @property
    def full_docs_url(self) -> str:
        return f"{self.site_url}/{self.full_name}"

    @property
    def tiny_docs_url(self) -> str:
        return f"{self.site_url}/{self.tiny_name}"

    def doc_url(self, stem_path: str) -> str:
        """Site URL of a page, given its docs-relative path without extension."""
        return f"{self.site_url}/docs/{stem_path}"

    def resolve_docs_dir(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.docs_dir, base_dir)

    def resolve_output_dir(self, base_dir: Path | None = None) -> Path:
        return _resolve(self.output_dir, base_dir)

    def index_path(self, base_dir: Path | None = None) -> Path:
        return self.resolve_output_dir(base_dir) / self.index_name

    def full_path(self, base_dir: Path | None = None) -> Path:
        return self.resolve_output_dir(base_dir) / self.full_name

    def tiny_path(self, base_dir: Path | None = None) -> Path:
        return self.resolve_output_dir(base_dir) / self.tiny_name
