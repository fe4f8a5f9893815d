"""Extract dates and time ranges from free-form Japanese schedule text.

Typical input is a reply proposing meeting slots::

    >>> strings, results = extract("15日18時〜、17日13時以降", fallback_month=8, fallback_year=2017)
    >>> strings
    ['15日18時〜', '17日13時以降']

``results`` holds ``(date, start, end)`` tuples aligned with ``strings``;
``start``/``end`` are None when the text does not give them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

from date_extractor.extraction.association import Associator
from date_extractor.extraction.models import DateContext, ExtractionResult, ResultEntry
from date_extractor.extraction.scanners import DateAnchorScanner, TimeslotScanner

if TYPE_CHECKING:
    from date_extractor.configuration.settings import ExtractionSettings

logger = logging.getLogger(__name__)


class ResultAssembler:
    """Merge date anchors with their associated time ranges in text order."""

    def __init__(self, keep_invalid: bool = False):
        self.keep_invalid = keep_invalid

    def assemble(
        self,
        contexts: Sequence[DateContext],
        buckets: Sequence[Sequence[ResultEntry]],
    ) -> ExtractionResult:
        entries: List[ResultEntry] = []
        for context, bucket in zip(contexts, buckets):
            entries.append(
                ResultEntry(span=context.span, date=context.date, start=context.start, end=context.end)
            )
            if context.date is None:
                continue
            entries.extend(bucket)

        if not self.keep_invalid:
            dropped = sum(1 for entry in entries if entry.date is None)
            if dropped:
                logger.debug("Dropping %d entries without a valid date", dropped)
            entries = [entry for entry in entries if entry.date is not None]

        return ExtractionResult(entries=tuple(entries))


class DateExtractor:
    """Reusable extractor holding default fallbacks.

    Fallbacks left as None resolve to the current month/year at each call.
    """

    def __init__(
        self,
        fallback_month: Optional[int] = None,
        fallback_year: Optional[int] = None,
        keep_invalid: bool = False,
    ):
        self.fallback_month = fallback_month
        self.fallback_year = fallback_year
        self.keep_invalid = keep_invalid
        self.timeslot_scanner = TimeslotScanner()
        self.associator = Associator()

    @classmethod
    def from_settings(cls, settings: "ExtractionSettings") -> "DateExtractor":
        """Build from an ``ExtractionSettings`` instance."""
        return cls(
            fallback_month=settings.fallback_month,
            fallback_year=settings.fallback_year,
            keep_invalid=settings.keep_invalid,
        )

    def extract(
        self,
        text: str,
        fallback_month: Optional[int] = None,
        fallback_year: Optional[int] = None,
        keep_invalid: Optional[bool] = None,
    ) -> ExtractionResult:
        if fallback_month is None:
            fallback_month = self.fallback_month
        if fallback_year is None:
            fallback_year = self.fallback_year
        if keep_invalid is None:
            keep_invalid = self.keep_invalid

        contexts = DateAnchorScanner(fallback_month, fallback_year).scan(text)
        timeslots = self.timeslot_scanner.scan(text)
        buckets = self.associator.associate(contexts, timeslots)
        return ResultAssembler(keep_invalid=keep_invalid).assemble(contexts, buckets)


def extract(
    text: str,
    fallback_month: Optional[int] = None,
    fallback_year: Optional[int] = None,
    keep_invalid: bool = False,
) -> ExtractionResult:
    """Extract dates and time ranges from ``text``.

    Args:
        text: Message body to scan.
        fallback_month: Month for anchors without one (default: current month).
        fallback_year: Year for anchors without one (default: current year).
        keep_invalid: Keep matches that do not form a valid date, as
            ``(None, None, None)``. Useful for diagnostics.

    Returns:
        ExtractionResult, which unpacks to ``(matched_strings, results)``.
    """
    return DateExtractor().extract(
        text,
        fallback_month=fallback_month,
        fallback_year=fallback_year,
        keep_invalid=keep_invalid,
    )
