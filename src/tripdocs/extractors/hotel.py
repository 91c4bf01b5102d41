"""
Hotel detail extraction (hotel name, booking reference).
"""

import re

from ..schemas.travel_document import HotelDetails

# Generic terms first, then major chains
HOTEL_KEYWORDS = [
    "hotel",
    "resort",
    "inn",
    "suites",
    "plaza",
    "palace",
    "grand",
    "hyatt",
    "hilton",
    "marriott",
    "sheraton",
    "westin",
    "intercontinental",
    "radisson",
    "novotel",
]

BOOKING_REFERENCE_PATTERN = re.compile(
    r"\b(?:confirmation|booking|reservation|ref|reference|number):?\s*([a-z0-9]{5,10})\b",
    re.IGNORECASE | re.ASCII,
)


def title_case_words(phrase: str) -> str:
    """Upper-case the first letter and lower-case the rest of each word."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in phrase.split())


def extract_hotel_name(text: str) -> str | None:
    """
    Two-word window around the first hotel keyword that matches.

    Keywords are tried in order; within one keyword the leftmost
    "word keyword" or "keyword word" occurrence wins.
    """
    for keyword in HOTEL_KEYWORDS:
        escaped = re.escape(keyword)
        pattern = rf"(\w+\s+{escaped}|{escaped}\s+\w+)"
        match = re.search(pattern, text, re.IGNORECASE | re.ASCII)
        if match:
            return title_case_words(match.group(0))
    return None


def extract_booking_reference(text: str) -> str | None:
    match = BOOKING_REFERENCE_PATTERN.search(text)
    if not match:
        return None
    return match.group(1).upper()


def extract_hotel_info(text: str) -> HotelDetails:
    return HotelDetails(
        hotel_name=extract_hotel_name(text),
        booking_reference=extract_booking_reference(text),
    )
