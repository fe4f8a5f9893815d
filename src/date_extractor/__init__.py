"""Extract dates and time ranges from Japanese schedule text.

Usage:
    from date_extractor import extract

    strings, results = extract("8/1（火）19時半以降", fallback_month=8, fallback_year=2017)
"""

from date_extractor.extraction import (
    DateExtractor,
    ExtractionResult,
    ResultEntry,
    extract,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DateExtractor",
    "ExtractionResult",
    "ResultEntry",
    "extract",
]
