"""Tests for date_to_string()."""

import os
import re
import time
from collections.abc import Iterator
from datetime import date, datetime, timedelta, timezone

import pytest

from memlog.core.dates import date_to_string

ISO_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}$")
SAMPLE = datetime(2018, 5, 1, 10, 6, 7, 50000, tzinfo=timezone.utc)


@pytest.fixture
def utc_plus_two() -> Iterator[None]:
    """Run the test with the process timezone set to UTC+2."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available on this platform")
    previous = os.environ.get("TZ")
    os.environ["TZ"] = "Etc/GMT-2"
    time.tzset()
    yield
    if previous is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = previous
    time.tzset()


class TestDateToString:
    """Tests for date_to_string()."""

    @pytest.mark.encoding
    def test_utc_rendering(self) -> None:
        """UTC fields are printed without a zone designator."""
        assert date_to_string(SAMPLE, False) == "2018-05-01T10:06:07.050"

    @pytest.mark.encoding
    def test_local_rendering_applies_local_offset(self) -> None:
        """Local rendering equals UTC fields shifted by the local offset."""
        offset = SAMPLE.astimezone().utcoffset()
        assert offset is not None
        expected = (SAMPLE + offset).replace(tzinfo=None).isoformat(
            timespec="milliseconds"
        )
        assert date_to_string(SAMPLE) == expected

    @pytest.mark.encoding
    def test_local_rendering_in_fixed_zone(self, utc_plus_two: None) -> None:
        assert date_to_string(SAMPLE, True) == "2018-05-01T12:06:07.050"
        assert date_to_string(SAMPLE, False) == "2018-05-01T10:06:07.050"

    @pytest.mark.encoding
    def test_aware_datetime_in_other_zone_is_converted(self) -> None:
        tokyo = SAMPLE.astimezone(timezone(timedelta(hours=9)))
        assert date_to_string(tokyo, False) == "2018-05-01T10:06:07.050"

    @pytest.mark.encoding
    def test_naive_datetime_is_local_time(self) -> None:
        naive = datetime(2020, 1, 2, 3, 4, 5, 6000)
        assert date_to_string(naive, True) == "2020-01-02T03:04:05.006"

    @pytest.mark.encoding
    def test_microseconds_are_truncated_to_milliseconds(self) -> None:
        value = SAMPLE.replace(microsecond=50999)
        assert date_to_string(value, False) == "2018-05-01T10:06:07.050"

    @pytest.mark.encoding
    def test_default_is_now(self) -> None:
        assert ISO_PATTERN.match(date_to_string())

    @pytest.mark.encoding
    @pytest.mark.parametrize(
        "value",
        [1525169167050, 3.5, "2018-05-01T10:06:07.050", date(2018, 5, 1), [], {}],
    )
    def test_non_datetime_returns_empty_string(self, value: object) -> None:
        assert date_to_string(value) == ""

    @pytest.mark.encoding
    def test_out_of_range_conversion_returns_empty_string(self) -> None:
        """A datetime that cannot be shifted into range renders as empty."""
        earliest = datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=1)))
        assert date_to_string(earliest, False) == ""
