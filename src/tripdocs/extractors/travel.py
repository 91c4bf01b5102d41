"""
Travel information extractor.

Combines classification, date, destination and detail extraction into one
TravelDocumentInfo record. Never raises: unexpected failures are returned as
a failed ParseResult so document upload is never blocked.
"""

import logging
from datetime import date, timedelta
from typing import Optional

from ..schemas.travel_document import (
    DocumentKind,
    ParseResult,
    TravelDocumentInfo,
)
from .classifier import classify_document
from .dates import extract_dates
from .destination import extract_destination
from .flight import extract_flight_info
from .hotel import extract_hotel_info

logger = logging.getLogger(__name__)

DEFAULT_TRIP_DAYS = 7
EXTRACTION_FAILED_MESSAGE = "Failed to extract travel information from document"


def resolve_date_range(
    dates: list[str],
    today: date,
    trip_days: int = DEFAULT_TRIP_DAYS,
) -> tuple[str, str]:
    """
    Pick start and end dates from sorted candidates.

    Missing start defaults to today; missing end defaults to start + trip_days.
    """
    start_date = dates[0] if dates else today.isoformat()
    if len(dates) > 1:
        end_date = dates[1]
    else:
        try:
            end = date.fromisoformat(start_date) + timedelta(days=trip_days)
        except OverflowError:
            end = date.max
        end_date = end.isoformat()
    return start_date, end_date


def extract_travel_info(
    text: str,
    today: Optional[date] = None,
    trip_days: int = DEFAULT_TRIP_DAYS,
) -> ParseResult:
    """
    Extract travel information from OCR text.

    Args:
        text: Raw OCR text of a single document
        today: Reference date for default dates (defaults to date.today())
        trip_days: Default trip length when only one date is found

    Returns:
        ParseResult with TravelDocumentInfo on success, or a generic error
    """
    try:
        logger.debug("Extracting travel info from text: %.200s", text)

        kind = classify_document(text)
        logger.debug("Document type determined: %s", kind.value)

        dates = extract_dates(text)
        logger.debug("Extracted dates: %s", dates)
        start_date, end_date = resolve_date_range(dates, today or date.today(), trip_days)

        destination = extract_destination(text)
        logger.debug("Extracted destination: %s", destination)

        if kind == DocumentKind.FLIGHT:
            details = extract_flight_info(text)
            if details.airline:
                title = f"{details.airline} to {destination}"
            else:
                title = f"Flight to {destination}"
        elif kind == DocumentKind.HOTEL:
            details = extract_hotel_info(text)
            if details.hotel_name:
                title = f"{details.hotel_name} in {destination}"
            else:
                title = f"Hotel in {destination}"
        else:
            details = None
            title = f"Travel to {destination}"

        logger.debug("Details: %s", details)

        return ParseResult.ok(
            TravelDocumentInfo(
                kind=kind,
                title=title,
                destination=destination,
                start_date=start_date,
                end_date=end_date,
                details=details,
            )
        )
    except Exception:
        logger.exception("Error extracting travel information")
        return ParseResult.failure(EXTRACTION_FAILED_MESSAGE)
