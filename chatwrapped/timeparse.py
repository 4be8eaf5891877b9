"""Parsing of the timestamps that chat exports put in front of each message."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from dateutil import parser as _dateparser

__all__ = ["DateParseError", "parse_flexible"]


class DateParseError(ValueError):
    """Raised when a timestamp cannot be understood."""


_TIME_RE = re.compile(r"([0-9]{1,2}):([0-9]{2}):([0-9]{2})(?:( *)(AM|PM))?")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_time(part: str) -> tuple[int, int, int]:
    match = _TIME_RE.fullmatch(part)
    if match is None:
        raise DateParseError("time component not recognised")
    hour, minute, second = (int(match.group(i)) for i in (1, 2, 3))
    meridiem = match.group(5)
    if minute >= 60 or second >= 60:
        raise DateParseError("time component not recognised")
    if meridiem is None:
        if hour >= 24:
            raise DateParseError("time component not recognised")
    else:
        if hour > 12:
            raise DateParseError("time component not recognised")
        if meridiem == "PM" and hour < 12:
            hour += 12
        elif meridiem == "AM" and hour == 12:
            hour = 0
    return hour, minute, second


def _to_int(field: str) -> int:
    digits = field.lstrip("0")
    if not _INT_RE.fullmatch(digits):
        raise DateParseError(f"invalid date component {field!r}")
    return int(digits)


def _three_ints(fields: list[str]) -> tuple[int, int, int]:
    if len(fields) != 3:
        raise DateParseError("date must have three components")
    first, second, third = (_to_int(field) for field in fields)
    return first, second, third


def _parse_date(part: str) -> tuple[int, int, int]:
    """Return (day, month, year) from a dotted or slashed date."""
    if "." in part:
        return _three_ints(part.split("."))
    if "/" in part:
        fields = part.split("/")
        a, b, c = _three_ints(fields)
        if len(fields[2]) == 4 or a > 12:
            return a, b, c
        return b, a, c
    raise DateParseError("unknown date separator")


def _build(year: int, month: int, day: int, hour: int, minute: int, second: int) -> datetime:
    # Out-of-range months and days roll over into the following ones.
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        base = datetime(year, month, 1, tzinfo=timezone.utc)
        return base + timedelta(days=day - 1, hours=hour, minutes=minute, seconds=second)
    except (ValueError, OverflowError) as exc:
        raise DateParseError("date out of range") from exc


def _parse_custom(text: str) -> datetime:
    cleaned = text.replace(",", "").strip()
    date_part, sep, time_part = cleaned.partition(" ")
    if not sep:
        raise DateParseError("expected exactly one space separating date and time")
    hour, minute, second = _parse_time(time_part)
    day, month, year = _parse_date(date_part)
    if year < 100:
        year += 2000
    return _build(year, month, day, hour, minute, second)


def parse_flexible(text: str) -> datetime:
    """Parse a chat timestamp into an aware UTC datetime.

    The layouts ``6.09.25, 15:00:00``, ``06/09/2025 15:00:00`` and
    ``9/6/25, 3:00:00 PM`` are handled directly; anything else is handed to a
    general date parser, reading times without a zone as local time.
    """
    try:
        return _parse_custom(text)
    except DateParseError:
        pass
    cleaned = text.replace(",", "").strip()
    try:
        parsed = _dateparser.parse(cleaned)
    except (ValueError, OverflowError) as exc:
        raise DateParseError(f"unrecognised datetime {text!r}") from exc
    return parsed.astimezone(timezone.utc)