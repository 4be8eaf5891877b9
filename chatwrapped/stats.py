"""Collected chat statistics."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from typing import Any

from .queries import (
    Couple,
    QueryError,
    SenderCount,
    TopEmoji,
    conversation_count,
    media_counter,
    messages_per_person,
    total_messages,
)

__all__ = ["Stats", "get_stats"]


def _counts(items: list[SenderCount]) -> list[dict[str, Any]]:
    return [{"sender": item.sender, "count": item.count} for item in items]


@dataclass
class Stats:
    """Aggregate figures about a chat."""

    total_messages: int = 0
    messages_per_person: list[SenderCount] = field(default_factory=list)
    top3_emojis: list[TopEmoji] = field(default_factory=list)
    images_per_person: list[SenderCount] = field(default_factory=list)
    videos_per_person: list[SenderCount] = field(default_factory=list)
    audio_per_person: list[SenderCount] = field(default_factory=list)
    stickers_per_person: list[SenderCount] = field(default_factory=list)
    total_conversations: int = 0
    duo: Couple = field(default_factory=Couple)

    def to_dict(self) -> dict[str, Any]:
        """Return the statistics as a JSON-ready mapping."""
        return {
            "totalMessages": self.total_messages,
            "messagesPerPerson": _counts(self.messages_per_person),
            "top3emojis": [{"emoji": e.emoji, "count": e.count} for e in self.top3_emojis],
            "imagesPerPerson": _counts(self.images_per_person),
            "videosPerPerson": _counts(self.videos_per_person),
            "AudioPerPerson": _counts(self.audio_per_person),
            "stickersPerPerson": _counts(self.stickers_per_person),
            "totalConversations": self.total_conversations,
            "couple": {
                "personOne": self.duo.person_one,
                "personTwo": self.duo.person_two,
                "count": self.duo.count,
            },
        }


def get_stats(conn: sqlite3.Connection) -> Stats:
    """Gather every statistic available; a query that fails leaves its default."""
    stats = Stats()

    try:
        stats.total_messages = total_messages(conn)
    except QueryError:
        pass

    try:
        stats.messages_per_person = messages_per_person(conn)
    except QueryError:
        pass

    media_fields = {
        "images": "images_per_person",
        "videos": "videos_per_person",
        "audios": "audio_per_person",
        "stickers": "stickers_per_person",
    }
    for table, attribute in media_fields.items():
        try:
            setattr(stats, attribute, media_counter(conn, table))
        except QueryError:
            pass

    try:
        stats.total_conversations = conversation_count(conn)
    except QueryError:
        pass

    return stats