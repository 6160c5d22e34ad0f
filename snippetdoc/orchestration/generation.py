import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..config import GeneratorConfig
from ..exception_handler import ErrorHandler
from ..exceptions import DirectoryUnavailable, WriteFailed
from ..render import render_detail, render_index
from ..snippet import sort_snippets
from ..utils.file_loader import FileLoader
from ..writer import write_document


logger = logging.getLogger("snippetdoc")


@dataclass
class GenerationResult:
    """Summary of one documentation run."""

    discovered: int = 0
    parsed: int = 0
    valid: int = 0
    written: List[Path] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    directory_unavailable: bool = False
    write_failed: bool = False

    @property
    def nothing_to_generate(self) -> bool:
        return self.valid == 0


class DocumentationPipeline:
    """Runs load, filter, sort, render and write for one snippet directory."""

    def __init__(self, config: GeneratorConfig, *, error_handler: Optional[ErrorHandler] = None) -> None:
        self.config = config
        self.error_handler = error_handler or ErrorHandler(config.log_level)
        self.loader = FileLoader(
            extension=config.extension,
            error_handler=self.error_handler,
        )
        self._last_run_stats: Optional[Dict[str, int]] = None

    def run(self) -> GenerationResult:
        result = GenerationResult()
        self.error_handler.clear_errors()

        try:
            loaded = self.loader.load_snippets(self.config.input_dir)
        except DirectoryUnavailable as exc:
            self.error_handler.collect(exc)
            result.directory_unavailable = True
            return self._finish(result)

        result.discovered = loaded.discovered
        result.parsed = loaded.parsed
        result.valid = len(loaded.snippets)

        if not loaded.snippets:
            logger.warning(
                "No valid snippets found in %s; nothing to generate",
                self.config.input_dir,
            )
            return self._finish(result)

        snippets = sort_snippets(loaded.snippets)

        self._write(
            result,
            self.config.index_name,
            lambda: render_index(
                snippets,
                collection_title=self.config.collection_title,
                detail_name=self.config.detail_name,
            ),
        )
        self._write(result, self.config.detail_name, lambda: render_detail(snippets))

        logger.info(
            "Documentation complete: %d/%d files valid, %d documents written",
            result.valid,
            result.discovered,
            len(result.written),
        )
        self._finish(result)
        if result.errors:
            logger.warning("Generation completed with %d errors", len(result.errors))

        return result

    def _write(self, result: GenerationResult, name: str, render) -> None:
        try:
            path = write_document(self.config.output_dir, name, render())
        except WriteFailed as exc:
            self.error_handler.collect(exc)
            result.write_failed = True
            return
        result.written.append(path)

    def _finish(self, result: GenerationResult) -> GenerationResult:
        result.errors = [
            f"{failure['file']}: {failure['error']}"
            for failure in self.error_handler.get_error_summary()["failed_files"]
        ]
        self._last_run_stats = {
            "discovered": result.discovered,
            "parsed": result.parsed,
            "valid": result.valid,
            "written": len(result.written),
            "errors": len(result.errors),
        }
        return result

    @property
    def last_run_stats(self) -> Optional[Dict[str, int]]:
        """Return summary statistics for the last pipeline run."""
        return self._last_run_stats


def generate_documentation(
    input_dir: Union[str, Path],
    output_dir: Optional[Union[str, Path]] = None,
    **options,
) -> GenerationResult:
    """Convenience helper to build a config and run the pipeline once."""
    config = GeneratorConfig(
        input_dir=input_dir,
        output_dir=output_dir if output_dir is not None else input_dir,
        **options,
    )
    return DocumentationPipeline(config).run()


__all__ = ["DocumentationPipeline", "GenerationResult", "generate_documentation"]
