"""Extraction, classification and correction of test names."""

from .classifier import classify, classify_names
from .errors import InvalidNameError, NamingError, UnfixableNameError
from .extractor import definition_pattern, extract_names
from .fixer import fix_name
from .models import (
    AUTO_FIXABLE,
    AggregateCounts,
    Category,
    CorpusReport,
    FileReport,
    TestOccurrence,
)

__all__ = [
    # Models
    "AUTO_FIXABLE",
    "AggregateCounts",
    "Category",
    "CorpusReport",
    "FileReport",
    "TestOccurrence",
    # Errors
    "NamingError",
    "InvalidNameError",
    "UnfixableNameError",
    # Operations
    "classify",
    "classify_names",
    "definition_pattern",
    "extract_names",
    "fix_name",
]
