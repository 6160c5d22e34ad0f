from __future__ import annotations

from pydantic import BaseModel, ConfigDict

# Title Xcode gives a freshly created, never edited snippet.
PLACEHOLDER_TITLE = "My Code Snippet"


class Snippet(BaseModel):
    """One parsed ``.codesnippet`` definition."""

    identifier: str = ""
    title: str = ""
    summary: str = ""
    shortcut: str = ""
    language: str = ""
    contents: str = ""
    source_name: str = ""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def language_short(self) -> str:
        """``Xcode.SourceCodeLanguage.Swift`` -> ``Swift``."""
        return self.language.rsplit(".", 1)[-1]

    @property
    def is_valid(self) -> bool:
        return (
            bool(self.title)
            and self.title != PLACEHOLDER_TITLE
            and bool(self.contents.strip())
        )

    def sort_key(self) -> tuple[str, str]:
        return (self.title, self.source_name)


def sort_snippets(snippets) -> list[Snippet]:
    """Order snippets by title (code-point order), then by source file name."""
    return sorted(snippets, key=Snippet.sort_key)


__all__ = ["Snippet", "PLACEHOLDER_TITLE", "sort_snippets"]
