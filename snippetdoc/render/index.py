from __future__ import annotations

from typing import Iterable, List

from ..config import DEFAULT_COLLECTION_TITLE, DEFAULT_DETAIL_NAME
from ..snippet import Snippet, sort_snippets
from .markdown import escape_cell, file_link, inline_code

TABLE_HEADER = (
    "| Title | Description | Shortcut | Language | File |\n"
    "|-------|-------------|----------|----------|------|\n"
)


def _introduction(collection_title: str) -> str:
    return (
        f"# {collection_title}\n"
        "\n"
        "A collection of useful Xcode code snippets for Swift development.\n"
        "\n"
        "## 📥 Installation\n"
        "\n"
        "To use these snippets in Xcode:\n"
        "\n"
        "1. Download the desired `.codesnippet` file\n"
        "2. Place it in: `~/Library/Developer/Xcode/UserData/CodeSnippets/`\n"
        "3. Restart Xcode\n"
        "4. Type the completion prefix to use the snippet\n"
        "\n"
        "## 📚 Available Snippets\n"
        "\n"
    )


def _trailer(detail_name: str) -> str:
    return (
        "\n"
        "\n"
        "## 📖 Detailed Documentation\n"
        "\n"
        "For detailed documentation including the full code of each snippet, "
        f"see [{detail_name}](./{detail_name}).\n"
    )


def render_row(snippet: Snippet) -> str:
    shortcut = inline_code(escape_cell(snippet.shortcut)) if snippet.shortcut else "-"
    summary = escape_cell(snippet.summary) if snippet.summary else "-"
    cells = [
        escape_cell(snippet.title),
        summary,
        shortcut,
        escape_cell(snippet.language_short),
        file_link(snippet.source_name),
    ]
    return "| " + " | ".join(cells) + " |\n"


def render_index(
    snippets: Iterable[Snippet],
    *,
    collection_title: str = DEFAULT_COLLECTION_TITLE,
    detail_name: str = DEFAULT_DETAIL_NAME,
) -> str:
    """Render the overview document: install notes plus one table row per snippet."""
    parts: List[str] = [_introduction(collection_title), TABLE_HEADER]
    parts.extend(render_row(snippet) for snippet in sort_snippets(snippets))
    parts.append(_trailer(detail_name))
    return "".join(parts)


__all__ = ["render_index", "render_row", "TABLE_HEADER"]
