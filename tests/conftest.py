"""Test fixtures and utilities."""

from datetime import date
from pathlib import Path

import pytest

# Sample OCR text for testing
SAMPLE_OCR_FLIGHT = """
THAI AIRWAYS INTERNATIONAL
E-TICKET ITINERARY / RECEIPT

Passenger: SMITH/JOHN MR
Booking Reference: QX7P2K

Flight TG 315    Departure 25/12/2024 10:35
From: Delhi      To: Bangkok
Return TG 316    Departure 02/01/2025 13:50
"""

SAMPLE_OCR_HOTEL = """
Bangkok Marriott Hotel Sukhumvit
Booking: MB48213
Guest name: Jane Doe
Check-in: Dec 20, 2024
Check-out: Dec 23, 2024
Room type: Deluxe King
"""

SAMPLE_OCR_OTHER = """
Museum entry pass valid for 3 persons.
Tokyo National Museum, 2024-05-03
"""

FIXED_TODAY = date(2026, 10, 18)


@pytest.fixture
def sample_ocr_flight() -> str:
    """Sample flight e-ticket OCR text."""
    return SAMPLE_OCR_FLIGHT


@pytest.fixture
def sample_ocr_hotel() -> str:
    """Sample hotel booking OCR text."""
    return SAMPLE_OCR_HOTEL


@pytest.fixture
def sample_ocr_other() -> str:
    """Sample non-flight, non-hotel OCR text."""
    return SAMPLE_OCR_OTHER


@pytest.fixture
def today() -> date:
    """Fixed reference date for default date ranges."""
    return FIXED_TODAY


@pytest.fixture
def sample_pdf(tmp_path) -> Path:
    """Placeholder PDF file on disk."""
    path = tmp_path / "ticket.pdf"
    path.write_bytes(b"%PDF-1.4 placeholder")
    return path


@pytest.fixture
def sample_image(tmp_path) -> Path:
    """Placeholder JPEG file on disk."""
    path = tmp_path / "booking.jpg"
    path.write_bytes(b"\xff\xd8\xff\xe0 placeholder")
    return path
