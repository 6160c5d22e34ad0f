from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger("snippetdoc")

DEFAULT_INDEX_NAME = "README.md"
DEFAULT_DETAIL_NAME = "SNIPPETS.md"
DEFAULT_EXTENSION = ".codesnippet"
DEFAULT_COLLECTION_TITLE = "Xcode Code Snippets Collection"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(slots=True)
class GeneratorConfig:
    """Where to read snippets from and what to call the generated documents."""

    input_dir: Path
    output_dir: Path
    index_name: str = DEFAULT_INDEX_NAME
    detail_name: str = DEFAULT_DETAIL_NAME
    extension: str = DEFAULT_EXTENSION
    log_level: str = "INFO"
    collection_title: str = DEFAULT_COLLECTION_TITLE

    def __post_init__(self) -> None:
        self.input_dir = Path(self.input_dir)
        self.output_dir = Path(self.output_dir)
        if self.extension and not self.extension.startswith("."):
            self.extension = f".{self.extension}"
        if self.log_level.upper() not in _LOG_LEVELS:
            logger.warning("Unknown log level %s, using INFO", self.log_level)
            self.log_level = "INFO"
        else:
            self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls, cwd: Path | None = None) -> "GeneratorConfig":
        base = Path(cwd) if cwd is not None else Path.cwd()
        input_dir = os.getenv("SNIPPETDOC_INPUT_DIR") or base
        return cls(
            input_dir=input_dir,
            output_dir=os.getenv("SNIPPETDOC_OUTPUT_DIR") or input_dir,
            index_name=os.getenv("SNIPPETDOC_INDEX_NAME", DEFAULT_INDEX_NAME),
            detail_name=os.getenv("SNIPPETDOC_DETAIL_NAME", DEFAULT_DETAIL_NAME),
            extension=os.getenv("SNIPPETDOC_EXTENSION", DEFAULT_EXTENSION),
            log_level=os.getenv("SNIPPETDOC_LOG_LEVEL", "INFO"),
            collection_title=os.getenv(
                "SNIPPETDOC_COLLECTION_TITLE", DEFAULT_COLLECTION_TITLE
            ),
        )


__all__ = [
    "GeneratorConfig",
    "DEFAULT_INDEX_NAME",
    "DEFAULT_DETAIL_NAME",
    "DEFAULT_EXTENSION",
    "DEFAULT_COLLECTION_TITLE",
]
