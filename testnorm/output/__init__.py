"""Text and JSON rendering of reports and fix results."""

from .formatter import format_corpus_report, format_fix_result

__all__ = ["format_corpus_report", "format_fix_result"]
