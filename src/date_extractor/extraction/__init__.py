"""Date and time range extraction.

Pipeline: anchors and time ranges are scanned independently, time ranges
are associated with anchors by position, then everything is merged back
into text order.
"""

from date_extractor.extraction.association import Associator
from date_extractor.extraction.extractor import DateExtractor, ResultAssembler, extract
from date_extractor.extraction.models import (
    DateContext,
    ExtractionResult,
    FallbackState,
    MatchSpan,
    ResultEntry,
)
from date_extractor.extraction.scanners import DateAnchorScanner, TimeslotScanner, find_spans

__all__ = [
    # Pipeline
    "DateAnchorScanner",
    "TimeslotScanner",
    "Associator",
    "ResultAssembler",
    "DateExtractor",
    "extract",
    "find_spans",
    # Records
    "MatchSpan",
    "FallbackState",
    "DateContext",
    "ResultEntry",
    "ExtractionResult",
]
