"""
Date parsing for resume date tokens.

Drafts carry dates as the text found in the document ("Jan 2020",
"03/2019", "2016", "Sept. '19"). These helpers turn them into month
precision dates.
"""

import re
from datetime import date
from typing import Optional

from resumecraft.utils.constants import ONGOING_END_TOKENS

_MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

_MONTH_ABBREVIATIONS = tuple(name.capitalize() for name in _MONTHS)

_MONTH_YEAR = re.compile(r"^(?P<month>[a-z]{3,9})\.?\s*'?(?P<year>\d{4}|\d{2})$")
_NUMERIC_MONTH_YEAR = re.compile(r"^(?P<month>\d{1,2})\s*[/.-]\s*(?P<year>\d{4}|\d{2})$")
_BARE_YEAR = re.compile(r"^'?(?P<year>\d{4}|\d{2})$")
_EMBEDDED_YEAR = re.compile(r"\b(?:19|20)\d{2}\b")

# Two-digit years up to this value are read as 20xx, above as 19xx
TWO_DIGIT_YEAR_PIVOT = 50


def _full_year(value: str) -> int:
    year = int(value)
    if len(value) == 2:
        year += 2000 if year <= TWO_DIGIT_YEAR_PIVOT else 1900
    return year


def is_ongoing(value: Optional[str]) -> bool:
    """True for end-date tokens like "Present" or "current"."""
    return bool(value) and value.strip().lower() in ONGOING_END_TOKENS


def parse_resume_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a resume date token to the first day of its month.

    Accepts month name plus year, MM/YYYY, a bare year (January), and
    two-digit years. Ongoing tokens and unparseable text return None.
    """
    if not value:
        return None

    cleaned = value.strip().lower()
    if not cleaned or is_ongoing(cleaned):
        return None

    match = _MONTH_YEAR.match(cleaned)
    if match and match.group("month")[:3] in _MONTHS:
        return date(_full_year(match.group("year")), _MONTHS[match.group("month")[:3]], 1)

    match = _NUMERIC_MONTH_YEAR.match(cleaned)
    if match and 1 <= int(match.group("month")) <= 12:
        return date(_full_year(match.group("year")), int(match.group("month")), 1)

    match = _BARE_YEAR.match(cleaned)
    if match:
        return date(_full_year(match.group("year")), 1, 1)

    match = _EMBEDDED_YEAR.search(cleaned)
    if match:
        return date(int(match.group()), 1, 1)

    return None


def month_year_key(value: Optional[date]) -> str:
    """Month precision key used when comparing records; "-" for no date."""
    if value is None:
        return "-"
    return f"{value.year:04d}-{value.month:02d}"


def format_resume_date(value: Optional[date]) -> str:
    """Format a date the way the canonical text writes it ("Oct 2022")."""
    if value is None:
        return ""
    return f"{_MONTH_ABBREVIATIONS[value.month - 1]} {value.year}"
