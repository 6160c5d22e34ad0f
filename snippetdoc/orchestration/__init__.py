"""Orchestration components for coordinating documentation generation."""

from .generation import DocumentationPipeline, GenerationResult, generate_documentation

__all__ = ["DocumentationPipeline", "GenerationResult", "generate_documentation"]
