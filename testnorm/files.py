"""File discovery and text access for a source tree."""

from pathlib import Path
from typing import Iterable


class FileAccessError(Exception):
    """Raised when a file or directory cannot be read or written."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


def discover_files(
    root: str | Path, pattern: str, exclude: Iterable[str] = ()
) -> list[Path]:
    """Find files under root whose name matches a glob pattern.

    Args:
        root: Directory to search recursively.
        pattern: Glob pattern matched against file names, e.g. ``*.clj``.
        exclude: Directory names whose contents are skipped.

    Returns:
        Matching file paths in sorted order.

    Raises:
        FileAccessError: If root is not a directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise FileAccessError(f"Not a directory: {root}", str(root))

    excluded = set(exclude)
    return sorted(
        path
        for path in root.rglob(pattern)
        if path.is_file()
        and not excluded.intersection(path.relative_to(root).parts[:-1])
    )


def read_text(path: str | Path) -> str:
    """Read a file as UTF-8, keeping its line endings as they are."""
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(f"Cannot read file: {e}", str(path)) from e


def write_text(path: str | Path, text: str) -> None:
    """Write text back to a file as UTF-8 without translating line endings."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise FileAccessError(f"Cannot write file: {e}", str(path)) from e
