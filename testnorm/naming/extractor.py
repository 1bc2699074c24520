"""Locate test-definition forms in file text."""

import re

# Non-blank, runs to the end of the line, trailing whitespace excluded
NAME_TOKEN = r"\S(?:[^\r\n]*\S)?"


def definition_pattern(keyword: str, name: str | None = None) -> re.Pattern[str]:
    """Build the pattern for a whole test-definition line.

    The keyword, and the name when given, are quoted with ``re.escape`` so
    they are matched literally. The name is exposed as the ``name`` group.
    A byte-order mark before the first line is skipped, never captured.

    Args:
        keyword: The test-definition keyword, e.g. ``(deftest``.
        name: An exact name to match; any name token when omitted.

    Returns:
        A compiled multiline pattern that never crosses a line boundary.
    """
    name_part = re.escape(name) if name is not None else NAME_TOKEN
    return re.compile(
        rf"^\ufeff?[ \t]*{re.escape(keyword)}[ \t]+(?P<name>{name_part})[ \t]*\r?$",
        re.MULTILINE,
    )


def extract_names(text: str, keyword: str) -> list[str]:
    """Return the name token of every test-definition line, top to bottom.

    Args:
        text: Full text of one file.
        keyword: The test-definition keyword.

    Returns:
        Name tokens in file order; empty when the file has no definitions.
    """
    return [m.group("name") for m in definition_pattern(keyword).finditer(text)]
