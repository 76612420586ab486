from datetime import date, datetime

import pytest

from hotel_booking.shared.utils.dates import to_date


class TestToDate:
    def test_none_stays_none(self):
        assert to_date(None) is None

    def test_date_is_returned_as_is(self):
        assert to_date(date(2024, 1, 1)) == date(2024, 1, 1)

    def test_datetime_is_truncated(self):
        assert to_date(datetime(2024, 1, 1, 23, 59)) == date(2024, 1, 1)

    def test_iso_string(self):
        assert to_date("2024-01-01") == date(2024, 1, 1)

    def test_invalid_string_raises_error(self):
        with pytest.raises(ValueError, match="Invalid date format"):
            to_date("01/01/2024")

    @pytest.mark.parametrize("value", [20240101, 1.5, ["2024-01-01"]])
    def test_non_string_value_raises_value_error(self, value):
        with pytest.raises(ValueError, match="Invalid date value"):
            to_date(value)
