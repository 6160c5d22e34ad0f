import logging
import traceback
from typing import Any, Dict, List

from .exceptions import SnippetDocError

_STAGE_MESSAGES = {
    "parse": (logging.WARNING, "Skipping %s: %s"),
    "load": (logging.ERROR, "Cannot read snippet directory %s: %s"),
    "write": (logging.ERROR, "Error writing %s: %s"),
}


class ErrorHandler:
    """Collects per-file failures so a run can report them at the end."""

    def __init__(self, log_level: str = "INFO"):
        self.logger = self._setup_logging(log_level)
        self.errors: List[Dict[str, Any]] = []

    def _setup_logging(self, level: str) -> logging.Logger:
        """Configure the shared ``snippetdoc`` logger."""
        logger = logging.getLogger("snippetdoc")
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    def handle_error(self, error: Exception, context: Dict[str, Any]) -> Dict[str, Any]:
        """Record an error with the file and stage it belongs to."""
        error_info = {
            "type": type(error).__name__,
            "message": getattr(error, "reason", None) or str(error),
            "context": context,
            "traceback": traceback.format_exc() if self.logger.level <= logging.DEBUG else None
        }

        level, template = _STAGE_MESSAGES.get(context.get("stage"), (logging.WARNING, "Failed on %s: %s"))
        self.logger.log(level, template, context.get("file_name", "unknown"), error_info["message"])

        self.errors.append(error_info)
        return error_info

    def collect(self, error: SnippetDocError) -> Dict[str, Any]:
        """Record one of the domain errors, which know their own file and stage."""
        return self.handle_error(error, {"file_name": error.name, "stage": error.stage})

    def get_error_summary(self) -> Dict[str, Any]:
        if not self.errors:
            return {"total_errors": 0, "error_types": {}, "failed_files": []}

        error_types: Dict[str, int] = {}
        failed_files = []

        for error in self.errors:
            error_type = error["type"]
            error_types[error_type] = error_types.get(error_type, 0) + 1

            context = error.get("context", {})
            failed_files.append({
                "file": context.get("file_name", "unknown"),
                "error": error["message"],
                "stage": context.get("stage", "unknown"),
            })

        return {
            "total_errors": len(self.errors),
            "error_types": error_types,
            "failed_files": failed_files
        }

    def clear_errors(self):
        self.errors.clear()

    def format_error_report(self) -> str:
        """Format user-friendly error report."""
        summary = self.get_error_summary()

        if summary["total_errors"] == 0:
            return ""

        lines = [
            f"\n⚠️  Error Summary: {summary['total_errors']} errors occurred",
            ""
        ]

        if summary["error_types"]:
            lines.append("Error Types:")
            for error_type, count in summary["error_types"].items():
                lines.append(f"  • {error_type}: {count}")
            lines.append("")

        if summary["failed_files"]:
            lines.append("Failed Files:")
            for failure in summary["failed_files"][:5]:  # Show first 5
                lines.append(f"  • {failure['file']} ({failure['stage']}): {failure['error']}")

            if len(summary["failed_files"]) > 5:
                lines.append(f"  ... and {len(summary['failed_files']) - 5} more")

        return "\n".join(lines)
