"""Runner that drives extraction, classification and rewrites across files."""

import logging
from collections import Counter
from pathlib import Path
from typing import Iterable

from .config.models import DEFAULT_KEYWORD
from .files import FileAccessError, read_text, write_text
from .naming.classifier import classify_names
from .naming.extractor import extract_names
from .naming.models import (
    AggregateCounts,
    Category,
    CorpusReport,
    FileReport,
    TestOccurrence,
)
from .rewriter.models import FileFixResult, FixRunResult
from .rewriter.rewriter import rewrite_text

logger = logging.getLogger(__name__)


def scan_text(text: str, keyword: str = DEFAULT_KEYWORD) -> list[TestOccurrence]:
    """Extract and classify every test definition in a piece of text."""
    return classify_names(extract_names(text, keyword))


def scan_file(path: str | Path, keyword: str = DEFAULT_KEYWORD) -> FileReport | None:
    """Build a FileReport for one file.

    Returns:
        The report, or None when the file has no test definitions.

    Raises:
        FileAccessError: If the file cannot be read.
    """
    occurrences = scan_text(read_text(path), keyword)
    if not occurrences:
        return None
    return FileReport(path=Path(path), occurrences=occurrences)


def fix_file(
    path: str | Path, keyword: str = DEFAULT_KEYWORD, dry_run: bool = False
) -> FileFixResult | None:
    """Rewrite every fixable test name in one file and persist the result.

    The file is written once, after all occurrences have been processed,
    and only when its text changed. Files without test definitions are
    never written.

    Args:
        path: The file to fix.
        keyword: The test-definition keyword.
        dry_run: Compute outcomes without writing anything.

    Returns:
        Per-occurrence results, or None when the file has no test definitions.

    Raises:
        FileAccessError: If the file cannot be read or written.
    """
    text = read_text(path)
    occurrences = scan_text(text, keyword)
    if not occurrences:
        return None

    new_text, results = rewrite_text(text, keyword, occurrences)
    changed = new_text != text

    if changed and not dry_run:
        write_text(path, new_text)

    for result in results:
        if result.new_name is not None:
            logger.info("%s: %s", path, result)

    return FileFixResult(path=Path(path), results=results, changed=changed)


def fix_corpus(
    paths: Iterable[Path], keyword: str = DEFAULT_KEYWORD, dry_run: bool = False
) -> FixRunResult:
    """Run fix_file over every path.

    A file that cannot be read or written is recorded as failed and the
    remaining files are still processed.
    """
    files: list[FileFixResult] = []

    for path in paths:
        try:
            file_result = fix_file(path, keyword, dry_run=dry_run)
        except FileAccessError as e:
            logger.warning("Skipping %s: %s", path, e)
            files.append(FileFixResult(path=Path(path), error=str(e)))
            continue
        if file_result is not None:
            files.append(file_result)

    counts = tally(
        result.occurrence.category for f in files for result in f.results
    )
    return FixRunResult(files=files, counts=counts)


def report_corpus(paths: Iterable[Path], keyword: str = DEFAULT_KEYWORD) -> CorpusReport:
    """Classify every test name in the corpus without modifying any file."""
    reports: list[FileReport] = []
    failures: dict[Path, str] = {}

    for path in paths:
        try:
            report = scan_file(path, keyword)
        except FileAccessError as e:
            logger.warning("Skipping %s: %s", path, e)
            failures[Path(path)] = str(e)
            continue
        if report is not None:
            reports.append(report)

    counts = tally(o.category for report in reports for o in report.occurrences)
    return CorpusReport(files=reports, counts=counts, failures=failures)


def tally(categories: Iterable[Category]) -> AggregateCounts:
    """Count categories, listing every category even when unseen."""
    counter = Counter(categories)
    return {category: counter[category] for category in Category}
