"""Shared utility modules for the snippet documentation generator."""

from .file_loader import FileLoader, LoadResult

__all__ = [
    "FileLoader",
    "LoadResult",
]
