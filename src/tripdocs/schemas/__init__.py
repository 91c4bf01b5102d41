"""
Canonical schemas for extracted travel documents.
"""

from .travel_document import (
    DocumentKind,
    FlightDetails,
    HotelDetails,
    ParseResult,
    TravelDocumentInfo,
)

__all__ = [
    "DocumentKind",
    "FlightDetails",
    "HotelDetails",
    "ParseResult",
    "TravelDocumentInfo",
]
