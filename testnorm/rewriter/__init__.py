"""Rewriter: turns classified occurrences into safe in-text fixes."""

from .models import FileFixResult, FixRunResult, OccurrenceResult, Outcome
from .rewriter import count_definitions, replace_name, rewrite_occurrence, rewrite_text

__all__ = [
    "FileFixResult",
    "FixRunResult",
    "OccurrenceResult",
    "Outcome",
    "count_definitions",
    "replace_name",
    "rewrite_occurrence",
    "rewrite_text",
]
