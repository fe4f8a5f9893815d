"""Value records produced by a single extraction pass.

All records are frozen: a scan produces them once, in text order, and
nothing downstream mutates them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple


DateTriple = Tuple[Optional[date], Optional[datetime], Optional[datetime]]


@dataclass(frozen=True)
class MatchSpan:
    """A matched substring with its offsets and raw captured components.

    ``captures`` only holds components that actually participated in the
    match; use :meth:`get` / :meth:`has` to query them.
    """

    text: str
    start: int                          # offset of the first character
    end: int                            # offset one past the last character
    captures: Mapping[str, str] = field(default_factory=dict)

    def get(self, component: str) -> Optional[str]:
        return self.captures.get(component)

    def has(self, component: str) -> bool:
        return component in self.captures


@dataclass(frozen=True)
class FallbackState:
    """Month/year applied to anchors that omit them."""

    month: int
    year: int


@dataclass(frozen=True)
class DateContext:
    """A date anchor resolved against the running fallback state.

    ``fallback`` is the state in effect *after* this anchor, i.e. what the
    next anchor inherits. When ``date`` is None both inline timestamps are
    None as well.
    """

    span: MatchSpan
    date: Optional[date]
    start: Optional[datetime]
    end: Optional[datetime]
    fallback: FallbackState

    @property
    def is_valid(self) -> bool:
        return self.date is not None


@dataclass(frozen=True)
class ResultEntry:
    """One line of output: where it came from and what it resolved to."""

    span: MatchSpan
    date: Optional[date]
    start: Optional[datetime]
    end: Optional[datetime]

    @property
    def text(self) -> str:
        return self.span.text

    def as_tuple(self) -> DateTriple:
        return (self.date, self.start, self.end)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialisation."""
        return {
            "text": self.span.text,
            "span_start": self.span.start,
            "span_end": self.span.end,
            "date": self.date.isoformat() if self.date else None,
            "start": self.start.isoformat() if self.start else None,
            "end": self.end.isoformat() if self.end else None,
        }


@dataclass(frozen=True)
class ExtractionResult:
    """Ordered output of :func:`date_extractor.extract`.

    Unpacks as ``(matched_strings, results)``, the two aligned sequences.
    """

    entries: Tuple[ResultEntry, ...] = ()

    @property
    def matched_strings(self) -> List[str]:
        return [entry.text for entry in self.entries]

    @property
    def results(self) -> List[DateTriple]:
        return [entry.as_tuple() for entry in self.entries]

    def __iter__(self) -> Iterator[Any]:
        return iter((self.matched_strings, self.results))

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> Dict[str, Any]:
        return {"entries": [entry.to_dict() for entry in self.entries]}
