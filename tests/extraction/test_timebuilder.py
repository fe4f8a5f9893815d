"""Tests for raw capture conversion."""

from datetime import date, datetime

import pytest

from date_extractor.extraction.models import MatchSpan
from date_extractor.extraction.timebuilder import (
    build_range,
    clock_components,
    normalize_digits,
    resolve_minute,
    to_int,
    try_build_date,
    try_build_timestamp,
)


class TestDigits:
    def test_full_width_digits_normalised(self):
        assert normalize_digits("２０１７") == "2017"

    def test_other_characters_pass_through(self):
        assert normalize_digits("１５時") == "15時"

    @pytest.mark.parametrize("raw, expected", [("15", 15), ("１５", 15), ("０８", 8)])
    def test_to_int(self, raw, expected):
        assert to_int(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "15時", "abc"])
    def test_to_int_rejects_non_numbers(self, raw):
        assert to_int(raw) is None


class TestMinutes:
    def test_explicit_minute(self):
        assert resolve_minute("45", None) == 45

    def test_half_marker_means_thirty(self):
        assert resolve_minute(None, "半") == 30

    def test_explicit_minute_wins_over_marker(self):
        assert resolve_minute("10", "半") == 10

    def test_absent(self):
        assert resolve_minute(None, None) is None


class TestTryBuild:
    def test_valid_date(self):
        assert try_build_date(2017, 8, 31) == date(2017, 8, 31)

    @pytest.mark.parametrize(
        "year, month, day",
        [(2017, 2, 29), (2017, 13, 1), (2017, 0, 1), (2017, 8, 0), (0, 1, 1), (10**20, 1, 1), (2017, None, 1)],
    )
    def test_invalid_date(self, year, month, day):
        assert try_build_date(year, month, day) is None

    def test_leap_day(self):
        assert try_build_date(2020, 2, 29) == date(2020, 2, 29)

    def test_timestamp_without_minute_is_on_the_hour(self):
        assert try_build_timestamp(2017, 8, 1, 19, None) == datetime(2017, 8, 1, 19, 0)

    def test_timestamp_without_hour(self):
        assert try_build_timestamp(2017, 8, 1, None, 30) is None

    @pytest.mark.parametrize("hour, minute", [(24, 0), (23, 60), (99, 99)])
    def test_timestamp_out_of_range(self, hour, minute):
        assert try_build_timestamp(2017, 8, 1, hour, minute) is None

    def test_timestamp_on_invalid_date(self):
        assert try_build_timestamp(2017, 2, 30, 10, 0) is None


class TestBuildRange:
    def test_clock_components(self):
        span = MatchSpan(
            text="１３時半ー15時",
            start=0,
            end=8,
            captures={"start_hour": "１３", "start_half": "半", "end_hour": "15"},
        )

        assert clock_components(span) == (13, 30, 15, None)

    def test_open_start(self):
        span = MatchSpan(text="朝-13:00", start=0, end=8, captures={"end_hour": "13", "end_min": "00"})

        assert build_range(date(2017, 8, 17), span) == (None, datetime(2017, 8, 17, 13, 0))
