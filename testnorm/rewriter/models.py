"""Result models for rewrite attempts."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..naming.models import AggregateCounts, TestOccurrence


class Outcome(str, Enum):
    """What happened to a single occurrence during a rewrite."""

    FIXED = "fixed"
    SKIPPED_AMBIGUOUS = "skipped-ambiguous"  # Matched 0 or 2+ definition lines
    SKIPPED_NOT_FIXABLE = "skipped-not-fixable"


@dataclass(frozen=True)
class OccurrenceResult:
    """The outcome of one rewrite attempt."""

    occurrence: TestOccurrence
    outcome: Outcome
    new_name: str | None = None
    match_count: int | None = None  # Definition lines declaring the old name
    collides_with: str | None = None  # Corrected name already defined in the file

    @property
    def reason(self) -> str | None:
        """Explain why an ambiguous occurrence was skipped."""
        if self.outcome != Outcome.SKIPPED_AMBIGUOUS:
            return None
        if self.collides_with is not None:
            return f"{self.collides_with} is already defined"
        return f"matched {self.match_count} definition lines"

    def __str__(self) -> str:
        if self.outcome == Outcome.FIXED:
            return f"{self.occurrence.name} -> {self.new_name}"
        if self.reason:
            return f"{self.occurrence.name} ({self.outcome.value}: {self.reason})"
        return f"{self.occurrence.name} ({self.outcome.value})"


@dataclass
class FileFixResult:
    """Rewrite results for every occurrence in one file."""

    path: Path
    results: list[OccurrenceResult] = field(default_factory=list)
    changed: bool = False
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the file could not be read or written."""
        return self.error is not None

    @property
    def fixed(self) -> list[OccurrenceResult]:
        """Get results that were rewritten."""
        return [r for r in self.results if r.outcome == Outcome.FIXED]


@dataclass
class FixRunResult:
    """Rewrite results for a whole corpus."""

    files: list[FileFixResult] = field(default_factory=list)
    counts: AggregateCounts = field(default_factory=dict)

    @property
    def failed_files(self) -> list[FileFixResult]:
        """Get files whose read or write failed."""
        return [f for f in self.files if f.failed]

    @property
    def outcome_counts(self) -> dict[Outcome, int]:
        """Number of occurrences per outcome."""
        counts = {outcome: 0 for outcome in Outcome}
        for file_result in self.files:
            for result in file_result.results:
                counts[result.outcome] += 1
        return counts
