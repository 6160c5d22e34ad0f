"""Snippet data model and the plist reader that produces it."""

from .model import PLACEHOLDER_TITLE, Snippet, sort_snippets
from .parser import SnippetParser, parse_snippet_file

__all__ = [
    "Snippet",
    "PLACEHOLDER_TITLE",
    "sort_snippets",
    "SnippetParser",
    "parse_snippet_file",
]
