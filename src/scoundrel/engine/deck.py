from __future__ import annotations

import logging
import random
from typing import Iterable, TypeVar

from .state import GameState
from .types import MAX_RANK, MIN_RANK, SUITS, Card

logger = logging.getLogger(__name__)

T = TypeVar("T")

DECK_SIZE = 44


def _in_dungeon_deck(suit: str, rank: int) -> bool:
    # Red faces and red aces are removed.
    return not (suit in ("hearts", "diamonds") and rank > 10)


def build_deck() -> list[Card]:
    """Return the 44-card dungeon in canonical order.

    Suits run hearts, diamonds, clubs, spades; ranks ascend within a suit.
    """
    cards: list[Card] = []
    for suit in SUITS:
        for rank in range(MIN_RANK, MAX_RANK + 1):
            if not _in_dungeon_deck(suit, rank):
                continue
            cards.append(Card(suit=suit, rank=rank, uid=len(cards)))
    return cards


def shuffle(rng: random.Random, items: list[T]) -> None:
    """Uniform in-place Fisher-Yates shuffle driven by ``rng``."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


def draw_one(state: GameState) -> Card | None:
    if not state.deck:
        if not state.discard:
            return None
        recycled = state.discard
        state.discard = []
        shuffle(state.rng, recycled)
        state.deck = recycled
        state.event_log.append({"type": "DECK_RESHUFFLED", "count": len(recycled)})
        logger.debug("discard pile recycled into deck (%d cards)", len(recycled))
    card = state.deck.pop(0)
    state.event_log.append({"type": "CARD_DRAWN", "card_id": card.id})
    return card


def put_on_bottom(state: GameState, cards: Iterable[Card]) -> None:
    state.deck.extend(cards)


def fill_room(state: GameState) -> None:
    while len(state.room) < state.config.room_size:
        card = draw_one(state)
        if card is None:
            break
        state.room.append(card)
