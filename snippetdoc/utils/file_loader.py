import logging
from pathlib import Path
from typing import List, NamedTuple, Optional, Union

from ..exception_handler import ErrorHandler
from ..exceptions import DirectoryUnavailable, MalformedSource
from ..snippet import Snippet, SnippetParser


class LoadResult(NamedTuple):
    """Outcome of scanning one snippet directory."""
    discovered: int
    parsed: int
    skipped: int
    snippets: List[Snippet]


class FileLoader:
    """Finds snippet files in a directory and parses the valid ones."""

    logger = logging.getLogger("snippetdoc")

    DEFAULT_EXTENSION = ".codesnippet"

    def __init__(
        self,
        extension: Optional[str] = None,
        parser: Optional[SnippetParser] = None,
        error_handler: Optional[ErrorHandler] = None,
    ):
        """Initialize file loader.

        Args:
            extension: Suffix marking snippet files (default: ``.codesnippet``)
            parser: Parser used for each file
            error_handler: Collector for per-file failures; parse errors are
                only logged when omitted
        """
        extension = extension or self.DEFAULT_EXTENSION
        self.extension = extension if extension.startswith('.') else f'.{extension}'
        self.parser = parser or SnippetParser()
        self.error_handler = error_handler

    def detect_files(self, directory: Union[str, Path]) -> List[Path]:
        """List snippet files directly inside ``directory``.

        Hidden entries and sub-directories are ignored. The result is sorted
        by name so log output is stable between runs.

        Raises:
            DirectoryUnavailable: If the directory is missing or can't be listed
        """
        dir_path = Path(directory)

        try:
            entries = list(dir_path.iterdir())
        except OSError as exc:
            raise DirectoryUnavailable(
                str(dir_path), exc.strerror or str(exc)
            ) from exc

        files = []
        for entry in entries:
            if entry.name.startswith('.'):
                continue
            if entry.suffix != self.extension:
                continue
            try:
                if not entry.is_file():
                    continue
            except OSError:
                continue
            files.append(entry)

        return sorted(files, key=lambda p: p.name)

    def load_snippets(self, directory: Union[str, Path]) -> LoadResult:
        """Parse every snippet file in ``directory`` and keep the valid ones.

        Raises:
            DirectoryUnavailable: If the directory is missing or can't be listed
        """
        files = self.detect_files(directory)
        self.logger.info("Found %d snippet files in %s", len(files), directory)

        parsed: List[Snippet] = []
        for file_path in files:
            try:
                parsed.append(self.parser.parse_file(file_path))
            except MalformedSource as exc:
                if self.error_handler is not None:
                    self.error_handler.collect(exc)
                else:
                    self.logger.warning("Failed to parse %s: %s", exc.name, exc.reason)

        snippets = [snippet for snippet in parsed if snippet.is_valid]
        for snippet in parsed:
            if not snippet.is_valid:
                self.logger.debug("Ignoring incomplete snippet %s", snippet.source_name)

        self.logger.info("Successfully parsed %d valid snippets", len(snippets))

        return LoadResult(
            discovered=len(files),
            parsed=len(parsed),
            skipped=len(parsed) - len(snippets),
            snippets=snippets,
        )
