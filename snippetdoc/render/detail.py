from __future__ import annotations

from typing import Iterable, List

from ..snippet import Snippet, sort_snippets
from .markdown import code_fence, inline_code

HEADER = (
    "# Detailed Snippet Documentation\n"
    "\n"
    "This document contains the full code and details for each snippet.\n"
    "\n"
    "---\n"
    "\n"
)


def render_section(snippet: Snippet) -> str:
    """Heading, metadata lines and the verbatim code block for one snippet."""
    lines: List[str] = [
        f"## {snippet.title}\n\n",
        f"**Language:** {snippet.language_short}  \n",
    ]
    if snippet.shortcut:
        lines.append(f"**Completion Shortcut:** {inline_code(snippet.shortcut)}  \n")
    if snippet.summary:
        lines.append(f"**Description:** {snippet.summary}  \n")
    lines.append(f"**File:** `{snippet.source_name}`  \n\n")

    fence = code_fence(snippet.contents)
    lines.append(f"{fence}{snippet.language_short.lower()}\n")
    lines.append(snippet.contents)
    lines.append(f"\n{fence}\n\n")
    lines.append("---\n\n")
    return "".join(lines)


def render_detail(snippets: Iterable[Snippet]) -> str:
    return HEADER + "".join(render_section(s) for s in sort_snippets(snippets))


__all__ = ["render_detail", "render_section"]
