"""
Canonical extracted travel document (SSOT).

Every extractor and service maps into these records. They are built once per
extraction call and handed to the caller, which owns persistence.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class DocumentKind(str, Enum):
    """Classification tag for a travel document."""

    FLIGHT = "flight"
    HOTEL = "hotel"
    OTHER = "other"


@dataclass
class FlightDetails:
    """Flight-specific fields. Missing fields mean "not specified"."""

    airline: Optional[str] = None
    flight_number: Optional[str] = None

    def to_dict(self) -> dict:
        data = {}
        if self.airline:
            data["airline"] = self.airline
        if self.flight_number:
            data["flight_number"] = self.flight_number
        return data


@dataclass
class HotelDetails:
    """Hotel-specific fields. Missing fields mean "not specified"."""

    hotel_name: Optional[str] = None
    booking_reference: Optional[str] = None

    def to_dict(self) -> dict:
        data = {}
        if self.hotel_name:
            data["hotel_name"] = self.hotel_name
        if self.booking_reference:
            data["booking_reference"] = self.booking_reference
        return data


Details = Union[FlightDetails, HotelDetails, None]


@dataclass
class TravelDocumentInfo:
    """
    Structured travel record extracted from one document.

    start_date <= end_date is not enforced: the two earliest dates found are
    used as-is.
    """

    kind: DocumentKind
    title: str
    destination: str
    start_date: str  # YYYY-MM-DD
    end_date: str  # YYYY-MM-DD
    details: Details = None

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "type": self.kind.value,
            "title": self.title,
            "destination": self.destination,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "details": self.details.to_dict() if self.details else {},
        }


@dataclass
class ParseResult:
    """Tagged success/failure outcome of an extraction or parse attempt."""

    success: bool
    data: Optional[TravelDocumentInfo] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: TravelDocumentInfo) -> "ParseResult":
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, error: str) -> "ParseResult":
        return cls(success=False, error=error)

    def to_dict(self) -> dict:
        if self.success and self.data is not None:
            return {"success": True, "data": self.data.to_dict()}
        return {"success": False, "error": self.error}
