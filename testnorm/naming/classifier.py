"""Classify test names against the "-test" suffix convention."""

from .errors import InvalidNameError
from .models import Category, TestOccurrence

VALID_SUFFIX = "-test"
PLURAL_SUFFIX = "tests"
TEST_PREFIX = "test-"
TEST_MARKER = "test"


def classify(name: str) -> Category:
    """Assign exactly one category to a name.

    Rules are checked in priority order and the first match wins:
    valid, pluralized, prefixed, missing-suffix, then unrecognized.

    Raises:
        InvalidNameError: If the name is empty or whitespace-only.
    """
    if not name.strip():
        raise InvalidNameError(name)

    if name.endswith(VALID_SUFFIX):
        return Category.VALID
    if name.endswith(PLURAL_SUFFIX):
        return Category.PLURALIZED
    if name.startswith(TEST_PREFIX):
        return Category.PREFIXED
    if TEST_MARKER not in name:
        return Category.MISSING_SUFFIX
    return Category.UNRECOGNIZED


def classify_names(names: list[str]) -> list[TestOccurrence]:
    """Classify a sequence of names, keeping their order."""
    return [TestOccurrence(name=name, category=classify(name)) for name in names]
