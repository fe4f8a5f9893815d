"""Conversion of raw captures into validated dates and timestamps.

Every function here is total: malformed or out-of-range input yields
``None`` instead of an exception, so a single bad fragment in a message
never aborts extraction of the rest.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Tuple

from date_extractor.extraction.models import MatchSpan
from date_extractor.extraction.patterns import HALF_HOUR_MARKER

logger = logging.getLogger(__name__)


FULL_WIDTH_DIGITS = str.maketrans("０１２３４５６７８９", "0123456789")


def normalize_digits(raw: str) -> str:
    """Replace full-width numerals with ASCII digits, leave the rest alone."""
    return raw.translate(FULL_WIDTH_DIGITS)


def to_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    normalized = normalize_digits(raw)
    if not normalized.isascii() or not normalized.isdigit():
        return None
    return int(normalized)


def resolve_minute(raw_min: Optional[str], half_marker: Optional[str]) -> Optional[int]:
    """Explicit minutes win; ``半`` alone means half past."""
    if raw_min is not None:
        return to_int(raw_min)
    if half_marker == HALF_HOUR_MARKER:
        return 30
    return None


def try_build_date(year: Optional[int], month: Optional[int], day: Optional[int]) -> Optional[date]:
    if year is None or month is None or day is None:
        return None
    try:
        return date(year, month, day)
    except (ValueError, OverflowError):
        logger.debug("Rejected calendar date %s/%s/%s", year, month, day)
        return None


def try_build_timestamp(
    year: int,
    month: int,
    day: int,
    hour: Optional[int],
    minute: Optional[int],
) -> Optional[datetime]:
    """Build a timestamp, or None when the hour is missing or anything is out of range.

    A present hour without minutes means on the hour.
    """
    if hour is None:
        return None
    try:
        return datetime(year, month, day, hour, minute or 0)
    except (ValueError, OverflowError):
        logger.debug("Rejected time %s:%s on %s/%s/%s", hour, minute, year, month, day)
        return None


def clock_components(span: MatchSpan) -> Tuple[Optional[int], Optional[int], Optional[int], Optional[int]]:
    """Return ``(start_hour, start_min, end_hour, end_min)`` for a span."""
    start_hour = to_int(span.get("start_hour"))
    start_min = resolve_minute(span.get("start_min"), span.get("start_half"))
    end_hour = to_int(span.get("end_hour"))
    end_min = resolve_minute(span.get("end_min"), span.get("end_half"))
    return start_hour, start_min, end_hour, end_min


def build_range(day: date, span: MatchSpan) -> Tuple[Optional[datetime], Optional[datetime]]:
    """Anchor a span's start/end clock readings to ``day``."""
    start_hour, start_min, end_hour, end_min = clock_components(span)
    start = try_build_timestamp(day.year, day.month, day.day, start_hour, start_min)
    end = try_build_timestamp(day.year, day.month, day.day, end_hour, end_min)
    return start, end
