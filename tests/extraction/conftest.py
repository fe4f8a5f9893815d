"""Fixtures for extraction tests.

All fixtures pin the fallback to August 2017 so expectations do not depend
on the current date.
"""

from datetime import date

import pytest

from date_extractor.extraction.extractor import DateExtractor
from date_extractor.extraction.models import DateContext, FallbackState, MatchSpan


@pytest.fixture
def extractor():
    """Extractor that keeps invalid matches, for inspecting every anchor."""
    return DateExtractor(fallback_month=8, fallback_year=2017, keep_invalid=True)


@pytest.fixture
def strict_extractor():
    return DateExtractor(fallback_month=8, fallback_year=2017)


@pytest.fixture
def make_context():
    """Build a DateContext covering ``[start, end)`` with an optional date."""

    def _make(start: int, end: int, day: date | None) -> DateContext:
        span = MatchSpan(text="x" * (end - start), start=start, end=end, captures={})
        return DateContext(
            span=span,
            date=day,
            start=None,
            end=None,
            fallback=FallbackState(month=8, year=2017),
        )

    return _make


@pytest.fixture
def make_timeslot():
    """Build a timeslot span covering ``[start, end)`` starting at ``hour``:00."""

    def _make(start: int, end: int, hour: str = "10") -> MatchSpan:
        return MatchSpan(
            text="y" * (end - start),
            start=start,
            end=end,
            captures={"start_hour": hour, "start_min": "00"},
        )

    return _make
