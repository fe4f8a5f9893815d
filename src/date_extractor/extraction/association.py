"""Attach standalone time ranges to the date they belong to.

A time range belongs to the nearest valid date anchor before it, as long as
it ends before the text of the next valid anchor starts:

    8/11（金）10:00〜12:00 14:00〜19:00 8/12（土）...
                           ^^^^^^^^^^^ -> 8/11

Invalid anchors are skipped as left boundaries. As right boundaries only a
single invalid anchor is skipped; when two follow in a row the second one
still closes the region.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from date_extractor.extraction.models import DateContext, MatchSpan, ResultEntry
from date_extractor.extraction.timebuilder import build_range

logger = logging.getLogger(__name__)


class Associator:
    """Distribute time ranges into one bucket per date context."""

    def associate(
        self,
        contexts: Sequence[DateContext],
        timeslots: Sequence[MatchSpan],
    ) -> List[List[ResultEntry]]:
        buckets: List[List[ResultEntry]] = [[] for _ in contexts]

        for timeslot in timeslots:
            # Every index is tested; overlapping regions may claim a slot twice.
            for index, context in enumerate(contexts):
                if context.date is None:
                    continue
                right = self.right_boundary(contexts, index)
                if not self.within(timeslot, context, right):
                    continue
                start, end = build_range(context.date, timeslot)
                buckets[index].append(
                    ResultEntry(span=timeslot, date=context.date, start=start, end=end)
                )

        logger.debug(
            "Associated %d of %d time ranges with %d date anchors",
            sum(len(bucket) for bucket in buckets),
            len(timeslots),
            len(contexts),
        )
        return buckets

    @staticmethod
    def right_boundary(contexts: Sequence[DateContext], index: int) -> Optional[DateContext]:
        """The anchor closing ``contexts[index]``'s region, if any."""
        if index + 1 >= len(contexts):
            return None
        right = contexts[index + 1]
        if right.date is None:
            right = contexts[index + 2] if index + 2 < len(contexts) else None
        return right

    @staticmethod
    def within(timeslot: MatchSpan, left: DateContext, right: Optional[DateContext]) -> bool:
        if timeslot.start < left.span.end:
            return False
        if right is None:
            return True
        return timeslot.end - 1 < right.span.start
