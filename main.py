import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from tqdm import tqdm

from snippetdoc import DocumentationPipeline, GeneratorConfig
from snippetdoc.exception_handler import ErrorHandler


logger = logging.getLogger("snippetdoc")


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    config = GeneratorConfig.from_env()
    if args.input_dir:
        config.input_dir = Path(args.input_dir)
        if not args.output_dir and not os.getenv("SNIPPETDOC_OUTPUT_DIR"):
            config.output_dir = Path(args.input_dir)
    if args.output_dir:
        config.output_dir = Path(args.output_dir)
    if args.log_level:
        config.log_level = args.log_level.upper()
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate README.md and SNIPPETS.md for a folder of Xcode code snippets"
    )
    parser.add_argument(
        "--input-dir",
        default=None,
        help="Directory containing .codesnippet files (default: current directory)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for the generated documents (default: the input directory)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        default=None,
        help="Logging verbosity (default: SNIPPETDOC_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero when the input directory is unreadable or a document fails to write",
    )

    args = parser.parse_args(argv)
    config = build_config(args)
    error_handler = ErrorHandler(config.log_level)

    tqdm.write("🚀 Starting Xcode Snippet Documentation Generator\n")

    pipeline = DocumentationPipeline(config, error_handler=error_handler)
    try:
        result = pipeline.run()
    except KeyboardInterrupt:
        print("\n⚠️ Generation interrupted", file=sys.stderr)
        return 1
    except Exception:
        logger.exception("Fatal error during documentation generation")
        print("\n❌ Fatal error occurred. See log for details.", file=sys.stderr)
        return 1

    if result.directory_unavailable:
        tqdm.write(f"❌ Error reading directory: {config.input_dir}")
    else:
        tqdm.write(f"📂 Found {result.discovered} snippet files")
        tqdm.write(f"✅ Successfully parsed {result.valid} valid snippets")

    if result.nothing_to_generate:
        tqdm.write(
            "⚠️  No valid snippets found. Make sure you're running this in the CodeSnippets directory."
        )
    else:
        for path in result.written:
            tqdm.write(f"✅ Generated: {path.name}")
        if result.written:
            tqdm.write("\n🎉 Documentation generation complete!")
            tqdm.write(f"📄 Files generated: {', '.join(p.name for p in result.written)}")

    report = error_handler.format_error_report()
    if report:
        tqdm.write(report)

    if args.strict and (result.directory_unavailable or result.write_failed):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
