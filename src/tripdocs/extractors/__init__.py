"""
Travel document extractors.

Provides:
- classify_document: flight / hotel / other classification
- extract_dates: date candidates normalized to ISO
- extract_destination: gazetteer destination lookup
- extract_flight_info / extract_hotel_info: kind-specific details
- extract_travel_info: full extraction into a ParseResult

All functions are pure and synchronous.
"""

from .classifier import classify_document
from .dates import extract_dates
from .destination import extract_destination
from .flight import extract_flight_info
from .hotel import extract_hotel_info
from .travel import extract_travel_info

__all__ = [
    "classify_document",
    "extract_dates",
    "extract_destination",
    "extract_flight_info",
    "extract_hotel_info",
    "extract_travel_info",
]
