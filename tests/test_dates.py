"""Tests for date extraction."""

from tripdocs.extractors.dates import extract_dates


class TestDateFormats:
    """Each supported date shape normalizes to ISO."""

    def test_day_first_slash(self):
        assert extract_dates("Departure 25/12/2024") == ["2024-12-25"]

    def test_day_first_dash_and_dot(self):
        assert extract_dates("on 05-03-2024") == ["2024-03-05"]
        assert extract_dates("on 5.3.2024") == ["2024-03-05"]

    def test_two_digit_year(self):
        """Two-digit years are read as 20xx."""
        assert extract_dates("Datum 25.12.24") == ["2024-12-25"]

    def test_month_greater_than_twelve_swaps(self):
        """US ordering 12/25/2024 is recovered by swapping day and month."""
        assert extract_dates("Check-in 12/25/2024") == ["2024-12-25"]

    def test_month_name_abbreviated(self):
        assert extract_dates("Check-in: Dec 20, 2024") == ["2024-12-20"]

    def test_month_name_full_with_suffix(self):
        assert extract_dates("Departs March 3rd, 2025") == ["2025-03-03"]
        assert extract_dates("DECEMBER 5 2024") == ["2024-12-05"]

    def test_year_first(self):
        assert extract_dates("Date: 2024-11-18") == ["2024-11-18"]
        assert extract_dates("Date: 2024/1/8") == ["2024-01-08"]
        assert extract_dates("Date: 2024.01.08") == ["2024-01-08"]


class TestDateCollection:
    """Deduplication, ordering and malformed tokens."""

    def test_two_dates_sorted(self):
        text = "Flight on 25/12/2024 returning 02/01/2025"
        assert extract_dates(text) == ["2024-12-25", "2025-01-02"]

    def test_output_is_ascending_regardless_of_text_order(self):
        text = "Return 02/01/2025, outbound 25/12/2024"
        assert extract_dates(text) == ["2024-12-25", "2025-01-02"]

    def test_same_date_in_different_formats_deduplicated(self):
        text = "25/12/2024 or 2024-12-25 or Dec 25th, 2024"
        assert extract_dates(text) == ["2024-12-25"]

    def test_invalid_calendar_date_skipped(self):
        """Tokens that are not real dates are dropped, others kept."""
        text = "Bad 31/02/2024 and 45/45/2024, good 01/03/2024"
        assert extract_dates(text) == ["2024-03-01"]

    def test_no_dates(self):
        assert extract_dates("no dates in here") == []
        assert extract_dates("") == []

    def test_idempotent(self, sample_ocr_flight):
        assert extract_dates(sample_ocr_flight) == extract_dates(sample_ocr_flight)

    def test_flight_sample(self, sample_ocr_flight):
        assert extract_dates(sample_ocr_flight) == ["2024-12-25", "2025-01-02"]

    def test_hotel_sample(self, sample_ocr_hotel):
        assert extract_dates(sample_ocr_hotel) == ["2024-12-20", "2024-12-23"]


def test_non_ascii_digits_ignored():
    """Only ASCII digits form dates."""
    assert extract_dates("Departure ٢٥/١٢/٢٠٢٤") == []
    assert extract_dates("٢٠٢٤-١٢-٢٥") == []
