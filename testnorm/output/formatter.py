"""Output formatting for corpus reports and fix results."""

import json
from typing import Literal

from ..naming.models import AggregateCounts, Category, CorpusReport, TestOccurrence
from ..rewriter.models import FixRunResult, OccurrenceResult, Outcome

OutputFormat = Literal["text", "json"]


def format_corpus_report(report: CorpusReport, format: OutputFormat = "text") -> str:
    """Format a read-only corpus report.

    Args:
        report: The report to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _report_json(report)
    return _report_text(report)


def format_fix_result(
    result: FixRunResult, format: OutputFormat = "text", dry_run: bool = False
) -> str:
    """Format the results of a rewrite pass.

    Args:
        result: The fix results to format.
        format: Output format ("text" or "json").
        dry_run: Whether the pass ran without writing files.

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _fix_json(result, dry_run)
    return _fix_text(result, dry_run)


def _report_text(report: CorpusReport) -> str:
    """Format a report as human-readable text."""
    lines: list[str] = []

    for file_report in report.files:
        lines.append(str(file_report.path))
        for occurrence in file_report.occurrences:
            lines.append(f"  {_format_occurrence_text(occurrence)}")
        lines.append("")

    lines.extend(_failures_text({str(p): msg for p, msg in report.failures.items()}))
    lines.extend(_summary_text(report.counts))

    lines.append("")
    violations = report.total - report.counts.get(Category.VALID, 0)
    lines.append(
        f"Checked {report.total} test name(s) in {len(report.files)} file(s): "
        f"{violations} violation(s)"
    )

    return "\n".join(lines)


def _fix_text(result: FixRunResult, dry_run: bool) -> str:
    """Format fix results as human-readable text."""
    lines: list[str] = []

    for file_result in result.files:
        if file_result.failed:
            continue
        lines.append(str(file_result.path))
        for occurrence_result in file_result.results:
            lines.append(f"  {_format_result_text(occurrence_result)}")
        lines.append("")

    lines.extend(
        _failures_text({str(f.path): f.error for f in result.failed_files})
    )
    lines.extend(_summary_text(result.counts))

    lines.append("")
    fixed = result.outcome_counts[Outcome.FIXED]
    changed = sum(1 for f in result.files if f.changed)
    verb = "Would fix" if dry_run else "Fixed"
    lines.append(f"{verb} {fixed} test name(s) in {changed} file(s)")

    return "\n".join(lines)


def _failures_text(failures: dict[str, str | None]) -> list[str]:
    """Format unreadable/unwritable files, if any."""
    if not failures:
        return []
    lines = ["FAILED:"]
    for path, message in failures.items():
        lines.append(f"  ✘ {path}: {message}")
    lines.append("")
    return lines


def _summary_text(counts: AggregateCounts) -> list[str]:
    """Format the per-category counts."""
    lines = ["SUMMARY:"]
    for category in Category:
        lines.append(f"  {category.value}: {counts.get(category, 0)}")
    return lines


def _format_occurrence_text(occurrence: TestOccurrence) -> str:
    """Format a single occurrence as text."""
    if occurrence.category == Category.VALID:
        symbol = "✔"
    elif occurrence.is_auto_fixable:
        symbol = "✘"
    else:
        symbol = "⚠"
    return f"{symbol} {occurrence.category.value}: {occurrence.name}"


def _format_result_text(result: OccurrenceResult) -> str:
    """Format a single rewrite outcome as text."""
    if result.outcome == Outcome.FIXED:
        return f"✔ {result.outcome.value}: {result}"

    if result.outcome == Outcome.SKIPPED_AMBIGUOUS:
        symbol = "⚠"
    else:
        symbol = "ℹ"
    line = f"{symbol} {result.outcome.value}: {result.occurrence.name}"
    if result.reason:
        line += f" ({result.reason})"
    return line


def _counts_json(counts: AggregateCounts) -> dict[str, int]:
    return {category.value: counts.get(category, 0) for category in Category}


def _report_json(report: CorpusReport) -> str:
    """Format a report as JSON."""
    data = {
        "total": report.total,
        "counts": _counts_json(report.counts),
        "files": [
            {
                "path": str(file_report.path),
                "occurrences": [
                    {"name": o.name, "category": o.category.value}
                    for o in file_report.occurrences
                ],
            }
            for file_report in report.files
        ],
        "failures": {str(path): msg for path, msg in report.failures.items()},
    }
    return json.dumps(data, indent=2)


def _fix_json(result: FixRunResult, dry_run: bool) -> str:
    """Format fix results as JSON."""
    data = {
        "dry_run": dry_run,
        "counts": _counts_json(result.counts),
        "outcomes": {k.value: v for k, v in result.outcome_counts.items()},
        "files": [
            {
                "path": str(file_result.path),
                "changed": file_result.changed,
                "error": file_result.error,
                "results": [
                    {
                        "name": r.occurrence.name,
                        "category": r.occurrence.category.value,
                        "outcome": r.outcome.value,
                        "new_name": r.new_name,
                        "match_count": r.match_count,
                        "collides_with": r.collides_with,
                    }
                    for r in file_result.results
                ],
            }
            for file_result in result.files
        ],
    }
    return json.dumps(data, indent=2)
