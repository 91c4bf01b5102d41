"""
Keyword-based document type classifier.

Flight keywords are checked before hotel keywords, so a document mentioning
both is a flight. This is a fixed priority, not a scored decision.
"""

from ..schemas.travel_document import DocumentKind

FLIGHT_KEYWORDS = [
    "flight",
    "airline",
    "boarding",
    "reservation",
    "confirmation",
    "e-ticket",
    "passenger",
]

HOTEL_KEYWORDS = [
    "hotel",
    "reservation",
    "booking",
    "stay",
    "accommodation",
    "check-in",
    "check in",
    "check-out",
    "check out",
    "guest",
]

KEYWORD_RULES = [
    (DocumentKind.FLIGHT, FLIGHT_KEYWORDS),
    (DocumentKind.HOTEL, HOTEL_KEYWORDS),
]


def classify_document(text: str) -> DocumentKind:
    """Classify OCR text as a flight, hotel or other document."""
    normalized = text.lower()

    for kind, keywords in KEYWORD_RULES:
        if any(keyword in normalized for keyword in keywords):
            return kind

    return DocumentKind.OTHER
