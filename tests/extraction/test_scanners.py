"""Tests for date anchor and time range scanning."""

from datetime import date, datetime

from date_extractor.extraction.models import FallbackState
from date_extractor.extraction.scanners import (
    DateAnchorScanner,
    TimeslotScanner,
    default_fallback,
)


class TestDateAnchorScanner:
    def test_contexts_in_text_order(self):
        contexts = DateAnchorScanner(8, 2017).scan("8/3 と 8/1")

        assert [context.span.start for context in contexts] == [0, 6]
        assert [context.date for context in contexts] == [date(2017, 8, 3), date(2017, 8, 1)]

    def test_fallback_threaded_through_contexts(self):
        contexts = DateAnchorScanner(8, 2017).scan("15日、2018/1/5、6日、3月2日")

        assert [context.fallback for context in contexts] == [
            FallbackState(month=8, year=2017),
            FallbackState(month=1, year=2018),
            FallbackState(month=1, year=2018),
            FallbackState(month=3, year=2018),
        ]
        assert contexts[2].date == date(2018, 1, 6)
        assert contexts[3].date == date(2018, 3, 2)

    def test_invalid_date_has_no_inline_times(self):
        contexts = DateAnchorScanner(8, 2017).scan("9/31 10:00-11:00")

        assert len(contexts) == 1
        assert contexts[0].date is None
        assert contexts[0].start is None
        assert contexts[0].end is None
        assert contexts[0].fallback == FallbackState(month=9, year=2017)

    def test_inline_time_range(self):
        contexts = DateAnchorScanner(8, 2017).scan("8/11（金）10:00〜12:00")

        assert contexts[0].start == datetime(2017, 8, 11, 10, 0)
        assert contexts[0].end == datetime(2017, 8, 11, 12, 0)

    def test_missing_fallbacks_use_today(self):
        scanner = DateAnchorScanner()

        assert scanner.initial == default_fallback()

    def test_default_fallback_from_given_day(self):
        assert default_fallback(date(2017, 8, 20)) == FallbackState(month=8, year=2017)


class TestTimeslotScanner:
    def test_finds_ranges_independent_of_dates(self):
        spans = TimeslotScanner().scan("8/11（金）10:00〜12:00 14:00〜19:00")

        assert [span.text for span in spans] == ["10:00〜12:00", "14:00〜19:00"]
        assert spans[1].start == 19
        assert spans[1].end == 30

    def test_no_ranges(self):
        assert TimeslotScanner().scan("8/1（火）") == []
