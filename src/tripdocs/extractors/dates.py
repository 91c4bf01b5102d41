"""
Date extraction from OCR text.

Supported formats:
- Numeric day first: 25/12/2024, 25-12-24, 25.12.2024
- English month names: Dec 25, 2024 / December 25th 2024
- ISO-like year first: 2024-12-25, 2024/12/25, 2024.12.25

Every candidate is normalized to YYYY-MM-DD.
"""

import logging
import re
from datetime import date

logger = logging.getLogger(__name__)

# (pattern, pattern_type)
DATE_PATTERNS = [
    (re.compile(r"\b(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{2,4})\b", re.ASCII), "day_first"),
    (
        re.compile(
            r"\b(Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]* "
            r"(\d{1,2})(?:st|nd|rd|th)?,? (\d{4})\b",
            re.IGNORECASE | re.ASCII,
        ),
        "month_name",
    ),
    (re.compile(r"\b(\d{4})[/\-.](\d{1,2})[/\-.](\d{1,2})\b", re.ASCII), "year_first"),
]

ENGLISH_MONTHS = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}


def parse_date_match(match: re.Match, pattern_type: str) -> str | None:
    """Parse a date regex match into YYYY-MM-DD, or None if malformed."""
    try:
        if pattern_type == "month_name":
            month = ENGLISH_MONTHS[match.group(1).lower()[:3]]
            day = int(match.group(2))
            year = int(match.group(3))
        elif pattern_type == "year_first":
            year = int(match.group(1))
            month = int(match.group(2))
            day = int(match.group(3))
        else:
            day = int(match.group(1))
            month = int(match.group(2))
            year = int(match.group(3))

            if year < 100:
                year += 2000

            # Ambiguous locale ordering: 12/25/2024 read as day first
            if month > 12:
                day, month = month, day

        return date(year, month, day).isoformat()
    except (ValueError, KeyError):
        logger.debug("Skipping malformed date token: %r", match.group(0))
        return None


def extract_dates(text: str) -> list[str]:
    """
    Find every date in the text.

    Returns:
        Deduplicated ISO dates in ascending order (empty if none found)
    """
    found: set[str] = set()

    for pattern, pattern_type in DATE_PATTERNS:
        for match in pattern.finditer(text):
            parsed = parse_date_match(match, pattern_type)
            if parsed:
                found.add(parsed)

    return sorted(found)
