"""Safety-gated, single-occurrence rewrites of test names in file text."""

import logging

from ..naming.errors import UnfixableNameError
from ..naming.extractor import definition_pattern
from ..naming.fixer import fix_name
from ..naming.models import TestOccurrence
from .models import OccurrenceResult, Outcome

logger = logging.getLogger(__name__)


def count_definitions(text: str, keyword: str, name: str) -> int:
    """Count the test-definition lines that declare exactly this name."""
    return sum(1 for _ in definition_pattern(keyword, name).finditer(text))


def replace_name(text: str, keyword: str, name: str, new_name: str) -> str:
    """Return a copy of text with the name on its definition line replaced.

    Only the first definition line declaring the name is touched, and only
    the span of the name itself; the keyword and the rest of the file are
    kept byte for byte. Text without such a line is returned unchanged.
    """
    match = definition_pattern(keyword, name).search(text)
    if match is None:
        return text
    start, end = match.span("name")
    return text[:start] + new_name + text[end:]


def rewrite_occurrence(
    text: str, keyword: str, occurrence: TestOccurrence
) -> tuple[str, OccurrenceResult]:
    """Fix one occurrence if the fix is defined and the target is unique.

    The old name must be declared on exactly one definition line and the
    corrected name on none, so a rewrite never creates a duplicate test.

    Args:
        text: Current text of the file.
        keyword: The test-definition keyword.
        occurrence: The classified occurrence to fix.

    Returns:
        The (possibly unchanged) text and the outcome of the attempt.
    """
    if not occurrence.is_auto_fixable:
        return text, OccurrenceResult(occurrence, Outcome.SKIPPED_NOT_FIXABLE)

    try:
        new_name = fix_name(occurrence.name, occurrence.category)
    except UnfixableNameError as e:
        logger.debug("Skipping %s: %s", occurrence.name, e)
        return text, OccurrenceResult(occurrence, Outcome.SKIPPED_NOT_FIXABLE)

    count = count_definitions(text, keyword, occurrence.name)
    if count != 1:
        logger.debug(
            "Skipping %s: matched %d definition lines", occurrence.name, count
        )
        return text, OccurrenceResult(
            occurrence, Outcome.SKIPPED_AMBIGUOUS, match_count=count
        )

    if count_definitions(text, keyword, new_name):
        logger.debug("Skipping %s: %s is already defined", occurrence.name, new_name)
        return text, OccurrenceResult(
            occurrence,
            Outcome.SKIPPED_AMBIGUOUS,
            match_count=count,
            collides_with=new_name,
        )

    new_text = replace_name(text, keyword, occurrence.name, new_name)
    return new_text, OccurrenceResult(
        occurrence, Outcome.FIXED, new_name=new_name, match_count=count
    )


def rewrite_text(
    text: str, keyword: str, occurrences: list[TestOccurrence]
) -> tuple[str, list[OccurrenceResult]]:
    """Apply rewrite_occurrence to each occurrence in order.

    Each attempt sees the text produced by the previous one.
    """
    results = []
    for occurrence in occurrences:
        text, result = rewrite_occurrence(text, keyword, occurrence)
        results.append(result)
    return text, results
