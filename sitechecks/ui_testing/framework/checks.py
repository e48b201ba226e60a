"""
================================================================================
Content Checks
================================================================================

Pure verification rules applied to text scraped from rendered pages.

The league table's leading cell sometimes renders the position glued to other
text (e.g. "1Liverpool"), so the position is read as the first run of digits
rather than by parsing the whole cell.

================================================================================
"""

from __future__ import annotations

import re
from typing import Optional, Sequence

import allure
from loguru import logger


RANK_PATTERN = re.compile(r"\d+", re.ASCII)


def extract_rank(cell_text: Optional[str]) -> Optional[str]:
    """
    Return the first maximal run of decimal digits in ``cell_text``.

    >>> extract_rank("1Liverpool")
    '1'
    >>> extract_rank("Liverpool") is None
    True
    """
    if not cell_text:
        return None
    match = RANK_PATTERN.search(cell_text)
    return match.group(0) if match else None


def first_cell(cells: Sequence[str]) -> Optional[str]:
    """Leading cell of a row, or None for a row without cells."""
    return cells[0] if cells else None


def heading_contains(heading: Optional[str], expected: str) -> bool:
    """Case-insensitive substring check; headings may carry suffixes."""
    if heading is None:
        return False
    return expected.lower() in heading.lower()


def assert_rank(cells: Sequence[str], expected_rank: str, team: str = "") -> None:
    """
    Assert that the row's leading cell encodes ``expected_rank``.

    Args:
        cells: Cell texts of the matched row, in document order
        expected_rank: Expected position as a string (e.g. "1")
        team: Team name, used only in the failure message
    """
    actual = extract_rank(first_cell(cells))
    with allure.step(f"Verify position of {team or 'row'} is {expected_rank}"):
        logger.info(f"Position for {team or 'row'}: {actual!r} (cells={list(cells)!r})")
        assert actual == expected_rank, (
            f"Expected {team or 'row'} at position {expected_rank!r}, "
            f"got {actual!r} from cells {list(cells)!r}"
        )


def assert_heading_contains(heading: Optional[str], expected: str) -> None:
    """Assert that ``heading`` contains ``expected``, ignoring case."""
    with allure.step(f"Verify heading contains '{expected}'"):
        logger.info(f"Heading text: {heading!r}")
        assert heading_contains(heading, expected), (
            f"Expected heading to contain {expected!r} (case-insensitive), "
            f"got {heading!r}"
        )


__all__ = [
    "RANK_PATTERN",
    "extract_rank",
    "first_cell",
    "heading_contains",
    "assert_rank",
    "assert_heading_contains",
]
