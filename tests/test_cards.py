import random

import pytest

from chatwrapped.cards import Card, assign_cards
from chatwrapped.queries import SenderCount
from chatwrapped.stats import Stats


class FixedRandom:
    """Deterministic stand-in: shuffle keeps or reverses, randrange returns a fixed value."""

    def __init__(self, draw=0, reverse=False):
        self.draw = draw
        self.reverse = reverse

    def shuffle(self, items):
        if self.reverse:
            items.reverse()

    def randrange(self, stop):
        return self.draw


def people(*pairs):
    return [SenderCount(name, count) for name, count in pairs]


def test_core_and_lurker():
    stats = Stats(messages_per_person=people(("alice", 10), ("bob", 3)))
    cards = assign_cards(stats, rng=FixedRandom())
    assert cards == [Card("alice", "CORE", 10), Card("bob", "LURKER", 3)]


def test_single_person_gets_one_card():
    stats = Stats(messages_per_person=people(("alice", 7)))
    cards = assign_cards(stats, rng=FixedRandom())
    assert len(cards) == 1
    assert cards[0].person == "alice"
    assert cards[0].type in {"CORE", "LURKER"}


def test_no_messages_raises():
    with pytest.raises(ValueError):
        assign_cards(Stats(), rng=FixedRandom())


def test_spammer_sums_media():
    stats = Stats(
        messages_per_person=people(("a", 5), ("b", 4), ("c", 3)),
        images_per_person=people(("c", 2)),
        videos_per_person=people(("c", 1)),
        audio_per_person=people(("b", 1)),
    )
    cards = assign_cards(stats, rng=FixedRandom(reverse=True))
    assert Card("c", "SPAMMER", 3) in cards
    assert Card("a", "CORE", 5) in cards


def test_basic_needs_average_above_two():
    stats = Stats(messages_per_person=people(("a", 5), ("b", 4), ("c", 3)))
    low = assign_cards(stats, basic=("b", 2.0), rng=FixedRandom(reverse=True))
    assert all(card.type != "BASICBITCH" for card in low)
    high = assign_cards(stats, basic=("b", 2.5), rng=FixedRandom(reverse=True))
    assert Card("b", "BASICBITCH", 3) in high


def test_bot_rounds_half_away_from_zero():
    stats = Stats(messages_per_person=people(("a", 5), ("b", 4), ("c", 3)))
    cards = assign_cards(stats, bot=("b", 0.5), rng=FixedRandom())
    assert Card("b", "BOT", 1) in cards


def test_grandma_opener_jester():
    stats = Stats(
        messages_per_person=people(("a", 9), ("b", 8), ("c", 7), ("d", 6)),
        stickers_per_person=people(("b", 4), ("a", 4)),
    )
    cards = assign_cards(stats, opener=("a", 12), jester=("c", 6), rng=FixedRandom())
    assert cards[0] == Card("a", "OPENER", 12)
    assert Card("b", "GRANDMA", 4) in cards
    assert Card("c", "JESTER", 6) in cards


def test_rare_card_goes_to_first_person_once():
    stats = Stats(messages_per_person=people(("alice", 10), ("bob", 3)))
    cards = assign_cards(stats, rng=FixedRandom(draw=1337))
    assert cards[0] == Card("alice", "TIMECHEESE", 0)
    assert cards[1] == Card("bob", "LURKER", 3)


def test_card_to_dict():
    assert Card("alice", "CORE", 10).to_dict() == {"person": "alice", "type": "CORE", "value": 10}


@pytest.mark.parametrize("seed", range(20))
def test_invariants_with_random_rng(seed):
    names = [f"p{i}" for i in range(8)]
    stats = Stats(
        messages_per_person=people(*[(name, 100 - i) for i, name in enumerate(names)]),
        stickers_per_person=people(("p3", 2)),
        images_per_person=people(("p5", 4)),
    )
    cards = assign_cards(
        stats,
        opener=("p1", 5),
        bot=("p2", 3.2),
        jester=("p4", 8),
        basic=("p6", 3.0),
        rng=random.Random(seed),
    )
    assert 0 < len(cards) <= 5
    assert len({card.person for card in cards}) == len(cards)
    assert len({card.type for card in cards}) == len(cards)
    assert all(card.person in names for card in cards)