"""Markdown renderers for the index and detail documents."""

from .detail import render_detail
from .index import render_index

__all__ = ["render_index", "render_detail"]
