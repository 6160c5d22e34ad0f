"""Error kinds raised while turning snippet files into documentation."""

from __future__ import annotations


class SnippetDocError(Exception):
    """Base class for documentation generation failures."""

    stage = "unknown"

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason


class MalformedSource(SnippetDocError):
    """A snippet file could not be read or is not well-formed XML."""

    stage = "parse"


class DirectoryUnavailable(SnippetDocError):
    """The input directory could not be listed."""

    stage = "load"


class WriteFailed(SnippetDocError):
    """An output document could not be persisted."""

    stage = "write"


__all__ = [
    "SnippetDocError",
    "MalformedSource",
    "DirectoryUnavailable",
    "WriteFailed",
]
