"""Regular expressions recognising Japanese schedule notation.

Patterns are built from small string fragments so every alternative can be
read on its own. Python's ``re`` rejects duplicate group names, so each
alternative gets its own suffix (``start_hour__t1``); the component name is
the part before ``__``. See :func:`component_name`.

Recognised date forms:
- ``2017/8/1``, ``8/1``, ``8月1日`` and the day-only ``1日``
- each optionally followed by a weekday annotation ``(火)`` / ``（火）``
  and an embedded time range

Recognised time ranges:
- ``10:00〜12:00`` and open-ended ``16:00-``
- ``16時以降`` ("from 16:00 onward")
- ``13時30分ー15時``, ``19時半``
- ``朝-13:00`` (open start)
"""

from __future__ import annotations

import re

GROUP_SEPARATOR = "__"

# Components a match may carry. Each is present or absent independently.
COMPONENTS = (
    "year",
    "month",
    "day",
    "start_hour",
    "start_min",
    "start_half",
    "end_hour",
    "end_min",
    "end_half",
)

HALF_HOUR_MARKER = "半"
MORNING_MARKER = "朝"

RANGE = r"[-~〜～ー]"
NUMBER = r"(?:[0-9]+|[０-９]+)"

WEEKDAY = r"(?:\([^()]+\)|（[^（）]+）)"


def _group(name: str, tag: str, body: str) -> str:
    return f"(?P<{name}{GROUP_SEPARATOR}{tag}>{body})"


def _clock(prefix: str, tag: str) -> str:
    """``H:M`` (``;`` tolerated as a typo for ``:``)."""
    return (
        _group(f"{prefix}_hour", tag, NUMBER)
        + r"[:;]"
        + _group(f"{prefix}_min", tag, NUMBER)
    )


def _kanji_clock(prefix: str, tag: str) -> str:
    """``H時``, ``H時M分`` or ``H時半``. ``時間`` is a duration and is rejected."""
    return (
        _group(f"{prefix}_hour", tag, NUMBER)
        + r"時(?!間)"
        + r"(?:"
        + _group(f"{prefix}_min", tag, NUMBER)
        + r"分|"
        + _group(f"{prefix}_half", tag, HALF_HOUR_MARKER)
        + r")?"
    )


def timeslot_pattern(tag: str) -> str:
    """Alternation of every time range form, groups suffixed with ``tag``."""
    colon_range = (
        _clock("start", f"{tag}a")
        + rf"\s*{RANGE}?\s*"
        + r"(?:" + _clock("end", f"{tag}a") + r")?"
    )
    onward = _kanji_clock("start", f"{tag}b") + r"以降"
    kanji_range = (
        _kanji_clock("start", f"{tag}c")
        + rf"\s*{RANGE}?\s*"
        + r"(?:" + _kanji_clock("end", f"{tag}c") + r")?"
    )
    open_start = (
        rf"(?:{MORNING_MARKER})?{RANGE}\s*"
        + r"(?:" + _clock("end", f"{tag}d") + r")"
    )
    return rf"(?:{colon_range})|(?:{onward})|(?:{kanji_range})|(?:{open_start})"


def _date_tail(tag: str) -> str:
    return rf"\s*{WEEKDAY}?\s*(?:{timeslot_pattern(tag)})?"


def date_pattern() -> str:
    """Alternation of every date anchor form, longest notation first."""
    full_date = (
        _group("year", "d1", NUMBER)
        + "/"
        + _group("month", "d1", NUMBER)
        + "/"
        + _group("day", "d1", NUMBER)
        + _date_tail("d1")
    )
    month_day = (
        _group("month", "d2", NUMBER)
        + "/"
        + _group("day", "d2", NUMBER)
        + _date_tail("d2")
    )
    kanji_month_day = (
        _group("month", "d3", NUMBER)
        + "月"
        + _group("day", "d3", NUMBER)
        + "日"
        + _date_tail("d3")
    )
    # ``N日間`` / ``N日ほど`` are durations, not days of the month.
    day_only = (
        _group("day", "d4", NUMBER)
        + r"日(?!間|ほど)"
        + _date_tail("d4")
    )
    return (
        rf"(?:{full_date})|(?:{month_day})|(?:{kanji_month_day})"
        rf"|(?:{day_only})"
    )


TIMESLOT_RE = re.compile(timeslot_pattern("t"))
DATE_RE = re.compile(date_pattern())


def component_name(group_name: str) -> str:
    """Map a suffixed group name back to its component (``day__d2`` -> ``day``)."""
    return group_name.split(GROUP_SEPARATOR, 1)[0]
