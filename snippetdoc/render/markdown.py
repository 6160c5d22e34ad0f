"""Small Markdown helpers shared by the index and detail renderers."""
from __future__ import annotations

import re
from urllib.parse import quote

_LINE_BREAKS = re.compile(r"[\r\n]+")
_BACKTICK_RUN = re.compile(r"`{3,}")
_ANY_BACKTICKS = re.compile(r"`+")


def escape_cell(text: str) -> str:
    """Make ``text`` safe to place inside a table cell.

    Pipes would start a new column and line breaks would end the row, so pipes
    are backslash-escaped and each run of line breaks becomes one space.
    """
    text = _LINE_BREAKS.sub(" ", text)
    return text.replace("|", "\\|")


def inline_code(text: str) -> str:
    """Code span whose delimiter is longer than any backtick run in ``text``."""
    longest = max((len(run) for run in _ANY_BACKTICKS.findall(text)), default=0)
    ticks = "`" * (longest + 1)
    if text.startswith("`") or text.endswith("`"):
        text = f" {text} "
    return f"{ticks}{text}{ticks}"


def file_link(file_name: str, label: str = "Link") -> str:
    """Relative link to a file next to the generated document."""
    return f"[{label}](./{quote(file_name)})"


def code_fence(contents: str) -> str:
    """Backtick fence longer than any backtick run inside ``contents``."""
    longest = max((len(run) for run in _BACKTICK_RUN.findall(contents)), default=0)
    return "`" * max(3, longest + 1)


__all__ = ["escape_cell", "inline_code", "file_link", "code_fence"]
