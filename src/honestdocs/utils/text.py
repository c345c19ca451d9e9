"""Text helpers for markdown pages and index labels."""

from __future__ import annotations

import re
from pathlib import PurePosixPath

# Optional blank lines, then a block fenced by two lines of exactly "---".
# LF and CRLF line endings are both accepted; the body is never rewritten.
FRONT_MATTER_RE = re.compile(r"\A(?:\r?\n)*---(?:\r?\n[^\n]*?)*?\r?\n---\r?\n")


def strip_front_matter(text: str) -> str:
    """Remove a leading YAML front-matter block, if any.

    An unterminated block is left untouched.
    """
    return FRONT_MATTER_RE.sub("", text, count=1)


def slice_ext(path: str) -> str:
    """Drop the last extension of ``path`` (``concepts/routing.md`` -> ``concepts/routing``)."""
    name = PurePosixPath(path).name
    if "." not in name:
        return path
    return path[: len(path) - len(name)] + name.rsplit(".", 1)[0]


def capitalize_delimited(value: str, delimiter: str = "-") -> str:
    return delimiter.join(part[:1].upper() + part[1:] for part in value.split(delimiter))


def derive_label(path: str) -> str:
    """Display name for a page: ``dependency-injection.md`` -> ``Dependency-Injection``."""
    return capitalize_delimited(slice_ext(PurePosixPath(path).name))


def index_label(path: str) -> str:
    """Label used in ``llms.txt``; only the first hyphen becomes a space."""
    return derive_label(path).replace("-", " ", 1)
