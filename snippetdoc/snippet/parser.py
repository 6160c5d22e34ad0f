"""Streaming reader for Xcode ``.codesnippet`` property lists.

A snippet file is a plist dictionary where every ``<key>`` names the role of
the value element that follows it::

    <dict>
        <key>IDECodeSnippetTitle</key>
        <string>KeyChain Service</string>
        ...
    </dict>

The parser walks the document once, remembers the last key it saw and, when
a ``<string>`` closes, routes the collected text to the matching field.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, List, Union

from ..exceptions import MalformedSource
from .model import Snippet

logger = logging.getLogger("snippetdoc")

KEY_FIELDS: Dict[str, str] = {
    "IDECodeSnippetIdentifier": "identifier",
    "IDECodeSnippetTitle": "title",
    "IDECodeSnippetSummary": "summary",
    "IDECodeSnippetCompletionPrefix": "shortcut",
    "IDECodeSnippetLanguage": "language",
    "IDECodeSnippetContents": "contents",
}

# Fields stored exactly as written; everything else is stripped.
VERBATIM_FIELDS = frozenset({"contents"})


class _PlistTarget:
    """ElementTree parser target that collects snippet fields."""

    def __init__(self) -> None:
        self.current_element = ""
        self.current_key = ""
        self._buffer: List[str] = []
        self.fields: Dict[str, str] = {}

    def start(self, tag: str, attrib: Dict[str, str]) -> None:
        self.current_element = tag
        self._buffer = []

    def data(self, text: str) -> None:
        self._buffer.append(text)

    def end(self, tag: str) -> None:
        raw = "".join(self._buffer)
        if tag == "key":
            self.current_key = raw.strip()
        elif tag == "string":
            field = KEY_FIELDS.get(self.current_key)
            if field is not None:
                self.fields[field] = raw if field in VERBATIM_FIELDS else raw.strip()
        self._buffer = []

    def close(self) -> Dict[str, str]:
        return self.fields


class SnippetParser:
    """Turn raw ``.codesnippet`` bytes into a :class:`Snippet`."""

    def parse(self, data: bytes, source_name: str) -> Snippet:
        target = _PlistTarget()
        parser = ET.XMLParser(target=target)
        try:
            parser.feed(data)
            fields = parser.close()
        except ET.ParseError as exc:
            raise MalformedSource(source_name, f"invalid XML ({exc})") from exc

        logger.debug("Parsed %s with fields %s", source_name, sorted(fields))
        return Snippet(source_name=source_name, **fields)

    def parse_file(self, path: Union[str, Path]) -> Snippet:
        path = Path(path)
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except OSError as exc:
            raise MalformedSource(path.name, f"unreadable ({exc.strerror or exc})") from exc
        return self.parse(data, path.name)


def parse_snippet_file(path: Union[str, Path]) -> Snippet:
    """Parse a single snippet file from disk."""
    return SnippetParser().parse_file(path)


__all__ = ["SnippetParser", "parse_snippet_file", "KEY_FIELDS"]
