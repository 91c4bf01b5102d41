"""Tests for hotel detail extraction."""

from tripdocs.extractors.hotel import (
    extract_booking_reference,
    extract_hotel_info,
    extract_hotel_name,
    title_case_words,
)


class TestHotelName:
    """Tests for extract_hotel_name."""

    def test_word_before_keyword(self):
        assert extract_hotel_name("Stay at the Peninsula Hotel tonight") == "Peninsula Hotel"

    def test_keyword_before_word(self):
        assert extract_hotel_name("Grand Hyatt Erawan") == "Grand Hyatt"

    def test_keyword_order(self):
        """Generic keywords are tried before chain names."""
        assert extract_hotel_name("Hilton Garden Inn Phuket") == "Garden Inn"

    def test_title_cased(self):
        assert extract_hotel_name("THE PENINSULA HOTEL") == "Peninsula Hotel"

    def test_no_keyword(self):
        assert extract_hotel_name("Room 12 booked") is None


class TestBookingReference:
    """Tests for extract_booking_reference."""

    def test_uppercased(self):
        assert extract_booking_reference("Confirmation: ab12cd") == "AB12CD"

    def test_label_without_colon(self):
        assert extract_booking_reference("Booking MB48213 confirmed") == "MB48213"

    def test_token_too_short(self):
        assert extract_booking_reference("Booking: AB1") is None

    def test_no_label(self):
        assert extract_booking_reference("Room 12 booked") is None


class TestHotelInfo:
    """Tests for extract_hotel_info."""

    def test_booking_confirmation(self):
        result = extract_hotel_info("Booking confirmation: ABC12345 at Bangkok Marriott Hotel")

        assert result.booking_reference == "ABC12345"
        assert result.hotel_name == "Marriott Hotel"
        assert "Hotel" in result.hotel_name

    def test_sample(self, sample_ocr_hotel):
        result = extract_hotel_info(sample_ocr_hotel)

        assert result.hotel_name == "Marriott Hotel"
        assert result.booking_reference == "MB48213"
        assert result.to_dict() == {
            "hotel_name": "Marriott Hotel",
            "booking_reference": "MB48213",
        }


def test_title_case_words():
    assert title_case_words("bangkok  MARRIOTT\nhotel") == "Bangkok Marriott Hotel"


def test_hotel_name_ascii_word_characters():
    """Accented letters are not word characters, so the window starts after them."""
    assert extract_hotel_name("Hôtel Plaza Athénée") == "Tel Plaza"
