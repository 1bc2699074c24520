"""Compute corrected names for auto-fixable categories."""

from .classifier import PLURAL_SUFFIX, TEST_PREFIX, VALID_SUFFIX
from .errors import UnfixableNameError
from .models import Category

PLURAL_VALID_SUFFIX = VALID_SUFFIX + "s"


def fix_name(name: str, category: Category) -> str:
    """Return the corrected form of a name.

    - missing-suffix: append "-test"
    - prefixed: strip "test-", then apply the missing-suffix fix
    - pluralized: drop the trailing "s" of a name ending in "-tests"

    Args:
        name: The name as extracted.
        category: The category assigned by the classifier.

    Returns:
        A name that classifies as valid.

    Raises:
        UnfixableNameError: For valid or unrecognized names, and for
            pluralized names that do not end in "-tests".
    """
    if category == Category.MISSING_SUFFIX:
        return name + VALID_SUFFIX

    if category == Category.PREFIXED:
        return fix_name(name[len(TEST_PREFIX):], Category.MISSING_SUFFIX)

    if category == Category.PLURALIZED:
        if not name.endswith(PLURAL_VALID_SUFFIX):
            raise UnfixableNameError(
                name,
                category.value,
                f"ends with '{PLURAL_SUFFIX}' but not '{PLURAL_VALID_SUFFIX}'",
            )
        return name[:-1]

    raise UnfixableNameError(name, category.value)
