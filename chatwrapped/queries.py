"""Aggregate queries over the prepared chat tables."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

__all__ = [
    "QueryError",
    "SenderCount",
    "TopEmoji",
    "Couple",
    "total_messages",
    "messages_per_person",
    "media_counter",
    "conversation_count",
]


class QueryError(Exception):
    """Raised when a statistics query fails."""


@dataclass(frozen=True)
class SenderCount:
    """A sender and how many items they sent."""

    sender: str
    count: int


@dataclass(frozen=True)
class TopEmoji:
    """An emoji and how often it was used."""

    emoji: str
    count: int


@dataclass(frozen=True)
class Couple:
    """The two people who talked together most, and how often."""

    person_one: str = ""
    person_two: str = ""
    count: int = 0


def _fetch(conn: sqlite3.Connection, sql: str, what: str) -> list[tuple]:
    try:
        return conn.execute(sql).fetchall()
    except sqlite3.Error as exc:
        raise QueryError(f"failed to {what}: {exc}") from exc


def _sender_counts(rows: list[tuple], what: str) -> list[SenderCount]:
    counts = []
    for sender, count in rows:
        if sender is None:
            raise QueryError(f"failed to scan {what}: missing sender")
        counts.append(SenderCount(str(sender), int(count)))
    return counts


def total_messages(conn: sqlite3.Connection) -> int:
    """Return the number of messages in the chat."""
    rows = _fetch(conn, "SELECT count(*) AS total_messages FROM chat", "get total messages")
    return int(rows[0][0])


def messages_per_person(conn: sqlite3.Connection) -> list[SenderCount]:
    """Return message counts per sender, most active first."""
    rows = _fetch(
        conn,
        "SELECT msg_sender, count(*) AS message_count FROM chat "
        "GROUP BY msg_sender ORDER BY message_count DESC",
        "query messages per person",
    )
    return _sender_counts(rows, "messages per person")


def media_counter(conn: sqlite3.Connection, media: str) -> list[SenderCount]:
    """Return per-sender counts from the named media table, largest first."""
    table = '"' + media.replace('"', '""') + '"'
    rows = _fetch(
        conn,
        f"SELECT msg_sender, count(*) AS cnt FROM {table} GROUP BY msg_sender ORDER BY cnt DESC",
        f"query media ({media})",
    )
    return _sender_counts(rows, "media counter")


def conversation_count(conn: sqlite3.Connection) -> int:
    """Return the number of distinct conversations."""
    rows = _fetch(
        conn,
        "SELECT count(DISTINCT conversation_id) AS cnt FROM conversations",
        "read total conversations",
    )
    return int(rows[0][0])