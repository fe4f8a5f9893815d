"""Scanning text for date anchors and standalone time ranges."""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Dict, List, Optional, Pattern

from date_extractor.extraction.models import DateContext, FallbackState, MatchSpan
from date_extractor.extraction.patterns import DATE_RE, TIMESLOT_RE, component_name
from date_extractor.extraction.timebuilder import build_range, to_int, try_build_date

logger = logging.getLogger(__name__)


def span_from_match(match: re.Match) -> MatchSpan:
    captures: Dict[str, str] = {}
    for group_name, value in match.groupdict().items():
        if value is not None:
            captures[component_name(group_name)] = value
    return MatchSpan(
        text=match.group(0),
        start=match.start(),
        end=match.end(),
        captures=captures,
    )


def find_spans(pattern: Pattern[str], text: str) -> List[MatchSpan]:
    """All non-overlapping matches of ``pattern``, left to right."""
    return [span_from_match(match) for match in pattern.finditer(text)]


def default_fallback(today: Optional[date] = None) -> FallbackState:
    today = today or date.today()
    return FallbackState(month=today.month, year=today.year)


class DateAnchorScanner:
    """Resolve every date anchor in a text against a running month/year.

    Anchors without a year or month borrow the most recently seen one (or the
    initial fallback), so ``6月27日..., 28日`` puts the 28th in June.
    """

    def __init__(
        self,
        fallback_month: Optional[int] = None,
        fallback_year: Optional[int] = None,
        pattern: Pattern[str] = DATE_RE,
    ):
        today = default_fallback()
        self.initial = FallbackState(
            month=fallback_month if fallback_month is not None else today.month,
            year=fallback_year if fallback_year is not None else today.year,
        )
        self.pattern = pattern

    def scan(self, text: str) -> List[DateContext]:
        contexts: List[DateContext] = []
        state = self.initial
        for span in find_spans(self.pattern, text):
            context = self.resolve(span, state)
            contexts.append(context)
            state = context.fallback
        return contexts

    @staticmethod
    def resolve(span: MatchSpan, state: FallbackState) -> DateContext:
        """Resolve one anchor; the returned context carries the next state.

        The fallback advances on explicit fields even when the date itself
        turns out to be invalid.
        """
        year = to_int(span.get("year"))
        month = to_int(span.get("month"))
        day = to_int(span.get("day"))

        year = state.year if year is None else year
        month = state.month if month is None else month
        next_state = FallbackState(month=month, year=year)

        resolved = try_build_date(year, month, day)
        if resolved is None:
            logger.debug("Date anchor %r did not resolve to a calendar date", span.text)
            return DateContext(span=span, date=None, start=None, end=None, fallback=next_state)

        start, end = build_range(resolved, span)
        return DateContext(span=span, date=resolved, start=start, end=end, fallback=next_state)


class TimeslotScanner:
    """Find time ranges anywhere in a text, regardless of date anchors."""

    def __init__(self, pattern: Pattern[str] = TIMESLOT_RE):
        self.pattern = pattern

    def scan(self, text: str) -> List[MatchSpan]:
        return find_spans(self.pattern, text)
