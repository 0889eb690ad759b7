"""Tests for date formatting functions."""

from datetime import datetime, timedelta, timezone

import pytest

from ginatra.utils import nicetime, parse_timestamp, rfc_date, time_tag

SAMPLE = datetime(2003, 12, 13, 18, 30, 2)


class TestNicetime:
    """Tests for nicetime function."""

    def test_format(self):
        """Test friendly date format."""
        assert nicetime(SAMPLE) == "Dec 13, 2003 &ndash; 18:30"

    def test_zero_padding(self):
        """Test day, hour and minute are zero padded."""
        assert nicetime(datetime(2020, 3, 5, 7, 4)) == "Mar 05, 2020 &ndash; 07:04"


class TestTimeTag:
    """Tests for time_tag function."""

    def test_naive_is_utc(self):
        """Test naive datetimes get a +0000 offset."""
        assert time_tag(SAMPLE) == (
            "<time datetime='2003-12-13T18:30:02+0000' title='2003-12-13 18:30:02'>"
            "December 13, 2003 18:30</time>"
        )

    def test_keeps_offset(self):
        """Test aware datetimes keep their own offset."""
        tz = timezone(timedelta(hours=5, minutes=30))
        result = time_tag(datetime(2003, 12, 13, 18, 30, 2, tzinfo=tz))
        assert "datetime='2003-12-13T18:30:02+0530'" in result
        assert "title='2003-12-13 18:30:02'" in result

    def test_negative_offset(self):
        """Test negative offsets."""
        tz = timezone(timedelta(hours=-8))
        assert "-0800" in time_tag(datetime(2003, 12, 13, 18, 30, 2, tzinfo=tz))


class TestRfcDate:
    """Tests for rfc_date function."""

    def test_utc(self):
        """Test the canonical feed format."""
        assert rfc_date(SAMPLE) == "2003-12-13T18:30:02Z"

    def test_aware_utc(self):
        """Test aware UTC datetime."""
        assert rfc_date(SAMPLE.replace(tzinfo=timezone.utc)) == "2003-12-13T18:30:02Z"

    def test_aware_converted(self):
        """Test aware non-UTC datetimes are converted to UTC."""
        tz = timezone(timedelta(hours=2))
        assert rfc_date(datetime(2003, 12, 13, 20, 30, 2, tzinfo=tz)) == "2003-12-13T18:30:02Z"


class TestParseTimestamp:
    """Tests for parse_timestamp function."""

    def test_zulu(self):
        """Test trailing Z means UTC."""
        assert parse_timestamp("2003-12-13T18:30:02Z") == SAMPLE.replace(tzinfo=timezone.utc)

    def test_offset(self):
        """Test explicit offsets are kept."""
        parsed = parse_timestamp("2003-12-13T20:30:02+02:00")
        assert parsed.utcoffset() == timedelta(hours=2)

    def test_naive(self):
        """Test timestamps without offset stay naive."""
        assert parse_timestamp("2003-12-13T18:30:02") == SAMPLE

    @pytest.mark.parametrize("value", ["yesterday", 1071340202, None])
    def test_invalid(self, value):
        """Test non-ISO values raise ValueError."""
        with pytest.raises(ValueError):
            parse_timestamp(value)
