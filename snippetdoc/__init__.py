"""Generate Markdown documentation for a folder of Xcode code snippets."""

from .config import GeneratorConfig
from .exceptions import DirectoryUnavailable, MalformedSource, SnippetDocError, WriteFailed
from .orchestration import DocumentationPipeline, GenerationResult, generate_documentation
from .render import render_detail, render_index
from .snippet import Snippet, SnippetParser
from .utils import FileLoader

__all__ = [
    "GeneratorConfig",
    "DocumentationPipeline",
    "GenerationResult",
    "generate_documentation",
    "Snippet",
    "SnippetParser",
    "FileLoader",
    "render_index",
    "render_detail",
    "SnippetDocError",
    "MalformedSource",
    "DirectoryUnavailable",
    "WriteFailed",
]
