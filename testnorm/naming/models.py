"""Data models for test-name classification."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Category(str, Enum):
    """How a test name relates to the naming convention."""

    VALID = "valid"  # Ends with "-test"
    PLURALIZED = "pluralized"  # Ends with "tests"
    PREFIXED = "prefixed"  # Starts with "test-"
    MISSING_SUFFIX = "missing-suffix"  # No "test" anywhere
    UNRECOGNIZED = "unrecognized"


AUTO_FIXABLE = frozenset(
    {Category.MISSING_SUFFIX, Category.PREFIXED, Category.PLURALIZED}
)


@dataclass(frozen=True)
class TestOccurrence:
    """A single test-definition form found in a file."""

    __test__ = False  # Not a pytest test class

    name: str
    category: Category

    @property
    def is_auto_fixable(self) -> bool:
        """Check if a deterministic correction exists for this category."""
        return self.category in AUTO_FIXABLE


@dataclass
class FileReport:
    """All test occurrences found in one file, in file order."""

    path: Path
    occurrences: list[TestOccurrence] = field(default_factory=list)

    @property
    def violations(self) -> list[TestOccurrence]:
        """Get occurrences that do not follow the convention."""
        return [o for o in self.occurrences if o.category != Category.VALID]


AggregateCounts = dict[Category, int]


@dataclass
class CorpusReport:
    """Read-only classification summary for a whole corpus."""

    files: list[FileReport] = field(default_factory=list)
    counts: AggregateCounts = field(default_factory=dict)
    failures: dict[Path, str] = field(default_factory=dict)

    @property
    def total(self) -> int:
        """Total number of extracted names across all files."""
        return sum(self.counts.values())

    @property
    def has_violations(self) -> bool:
        """Check if any name does not follow the convention."""
        return any(f.violations for f in self.files)
