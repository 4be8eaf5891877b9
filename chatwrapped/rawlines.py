"""Reading chat exports and normalising their timestamps."""

from __future__ import annotations

import re
import sqlite3
from collections.abc import Iterable
from os import PathLike

from .timeparse import DateParseError, parse_flexible

__all__ = ["normalize_line", "normalize_lines", "read_raw_lines", "load_raw_lines"]

_TIMESTAMP_RE = re.compile(r"^\[(.+?)\]")
_OUTPUT_FORMAT = "%y.%m.%d, %H:%M:%S"
_INVISIBLE = str.maketrans("", "", "\u200e\u202f")


def normalize_line(line: str) -> str:
    """Strip invisible marks and rewrite a leading ``[timestamp]`` as ``yy.mm.dd, HH:MM:SS``."""
    line = line.translate(_INVISIBLE)
    match = _TIMESTAMP_RE.match(line)
    if match is None:
        return line
    stamp = match.group(0).strip("[]")
    if not stamp:
        return line
    try:
        parsed = parse_flexible(stamp)
    except DateParseError as exc:
        raise DateParseError(f"cannot parse time in line {line!r}: {exc}") from exc
    return line.replace(stamp, parsed.strftime(_OUTPUT_FORMAT))


def normalize_lines(lines: Iterable[str]) -> list[str]:
    """Normalise every line of an export."""
    return [normalize_line(line) for line in lines]


def _strip_terminator(raw: str) -> str:
    return raw.removesuffix("\n").removesuffix("\r")


def read_raw_lines(path: str | PathLike[str]) -> list[str]:
    """Read an exported chat file and return its normalised lines."""
    with open(path, encoding="utf-8", errors="replace", newline="\n") as handle:
        return normalize_lines(_strip_terminator(raw) for raw in handle)


def load_raw_lines(conn: sqlite3.Connection, lines: Iterable[str]) -> None:
    """Replace the ``rawest`` table with the given lines, carriage returns trimmed."""
    with conn:
        conn.execute("DROP TABLE IF EXISTS rawest")
        conn.execute("CREATE TABLE rawest (line VARCHAR)")
        conn.executemany(
            "INSERT INTO rawest VALUES (?)",
            ((line.strip("\r"),) for line in lines),
        )