"""Assignment of personality cards to chat members."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from .stats import Stats

__all__ = ["CARD_TYPES", "Card", "assign_cards"]

CARD_TYPES = (
    "GRANDMA",
    "OPENER",
    "BOT",
    "JESTER",
    "LURKER",
    "SPAMMER",
    "CORE",
    "BASICBITCH",
)

_RARE_CARD = "TIMECHEESE"
_RARE_ODDS = 10000
_RARE_HIT = 1337
_MAX_CARDS = 5


class _Random(Protocol):
    def shuffle(self, x: list) -> None: ...

    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class Card:
    """A card given to one person."""

    person: str
    type: str
    value: int

    def to_dict(self) -> dict[str, Any]:
        """Return the card as a JSON-ready mapping."""
        return {"person": self.person, "type": self.type, "value": self.value}


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _candidates(
    stats: Stats,
    opener: Optional[tuple[str, int]],
    bot: Optional[tuple[str, float]],
    jester: Optional[tuple[str, int]],
    basic: Optional[tuple[str, float]],
) -> list[Card]:
    per_person = stats.messages_per_person
    if not per_person:
        raise ValueError("cannot assign cards without any messages")

    cards: dict[str, Card] = {}

    grandma_sender, grandma_count = "", 0
    for entry in stats.stickers_per_person:
        if entry.count > grandma_count:
            grandma_sender, grandma_count = entry.sender, entry.count
    if grandma_count > 0:
        cards["GRANDMA"] = Card(grandma_sender, "GRANDMA", grandma_count)

    if opener is not None:
        cards["OPENER"] = Card(opener[0], "OPENER", opener[1])

    if bot is not None:
        cards["BOT"] = Card(bot[0], "BOT", _round_half_away(bot[1]))

    if jester is not None:
        cards["JESTER"] = Card(jester[0], "JESTER", jester[1])

    lurker = per_person[-1]
    cards["LURKER"] = Card(lurker.sender, "LURKER", lurker.count)

    media: dict[str, int] = {entry.sender: 0 for entry in per_person}
    for group in (stats.audio_per_person, stats.images_per_person, stats.videos_per_person):
        for entry in group:
            media[entry.sender] = media.get(entry.sender, 0) + entry.count
    spammer, spammer_count = "", 0
    for sender, count in media.items():
        if count > spammer_count:
            spammer, spammer_count = sender, count
    if spammer_count > 0:
        cards["SPAMMER"] = Card(spammer, "SPAMMER", spammer_count)

    core = per_person[0]
    cards["CORE"] = Card(core.sender, "CORE", core.count)

    if basic is not None and basic[1] > 2:
        cards["BASICBITCH"] = Card(basic[0], "BASICBITCH", _round_half_away(basic[1]))

    return [cards[kind] for kind in CARD_TYPES if kind in cards]


def assign_cards(
    stats: Stats,
    opener: Optional[tuple[str, int]] = None,
    bot: Optional[tuple[str, float]] = None,
    jester: Optional[tuple[str, int]] = None,
    basic: Optional[tuple[str, float]] = None,
    rng: Optional[_Random] = None,
) -> list[Card]:
    """Give at most one card to each of up to five members.

    ``opener``, ``jester`` are ``(name, count)`` pairs and ``bot``, ``basic``
    are ``(name, average)`` pairs, or ``None`` when unknown. Raises
    ``ValueError`` if nobody has sent a message.
    """
    rng = rng if rng is not None else random.Random()
    candidates = _candidates(stats, opener, bot, jester, basic)
    rng.shuffle(candidates)

    card_count = min(len(candidates), len(stats.messages_per_person), _MAX_CARDS)
    used: set[str] = set()
    result: list[Card] = []

    for person in stats.messages_per_person:
        if len(result) >= card_count:
            break

        if _RARE_CARD not in used and rng.randrange(_RARE_ODDS) == _RARE_HIT:
            used.add(_RARE_CARD)
            result.append(Card(person.sender, _RARE_CARD, 0))
            continue

        match = next(
            (card for card in candidates if card.person == person.sender and card.type not in used),
            None,
        )
        if match is None:
            continue
        used.add(match.type)
        result.append(match)

    return result