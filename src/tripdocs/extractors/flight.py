"""
Flight detail extraction (airline, flight number).
"""

import re

from ..schemas.travel_document import FlightDetails

AIRLINES = [
    "Thai Airways",
    "Japan Airlines",
    "ANA",
    "Delta",
    "United",
    "American Airlines",
    "British Airways",
    "Air France",
    "Lufthansa",
    "Emirates",
    "Qatar Airways",
    "Singapore Airlines",
    "Cathay Pacific",
    "Air Canada",
    "Turkish Airlines",
    "Etihad Airways",
    "KLM",
    "Air China",
    "Korean Air",
    "Southwest",
    "JetBlue",
    "Virgin Atlantic",
]

# 2-3 letter carrier prefix followed by 1-4 digits: TG315, tg 315
FLIGHT_NUMBER_PATTERN = re.compile(r"\b([A-Za-z]{2,3})\s*(\d{1,4})\b", re.ASCII)


def extract_airline(text: str) -> str | None:
    normalized = text.lower()
    for airline in AIRLINES:
        if airline.lower() in normalized:
            return airline
    return None


def extract_flight_number(text: str) -> str | None:
    """
    First carrier-code-plus-digits token in the text.

    Not anchored to any "flight" label, so an unrelated token such as a
    document number can be picked up. Best-effort only.
    """
    match = FLIGHT_NUMBER_PATTERN.search(text)
    if not match:
        return None
    return f"{match.group(1).upper()}{match.group(2)}"


def extract_flight_info(text: str) -> FlightDetails:
    return FlightDetails(
        airline=extract_airline(text),
        flight_number=extract_flight_number(text),
    )
