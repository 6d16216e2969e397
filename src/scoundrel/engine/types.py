from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

Suit = Literal["hearts", "diamonds", "clubs", "spades"]
CardCategory = Literal["monster", "weapon", "potion", "other"]
FightMethod = Literal["bare", "weapon"]

SUITS: tuple[Suit, ...] = ("hearts", "diamonds", "clubs", "spades")
MIN_RANK = 2
MAX_RANK = 14

_FACE_LABELS = {11: "J", 12: "Q", 13: "K", 14: "A"}


class RulesError(RuntimeError):
    """Raised when an internal resolver is handed a card it cannot handle."""


def rank_label(rank: int) -> str:
    return _FACE_LABELS.get(rank, str(rank))


def category_for_suit(suit: str) -> CardCategory:
    if suit in ("clubs", "spades"):
        return "monster"
    if suit == "diamonds":
        return "weapon"
    if suit == "hearts":
        return "potion"
    return "other"


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: int
    # Instance tag for tracking a physical card; rules never compare on it.
    uid: int = field(default=-1, compare=False)

    @property
    def category(self) -> CardCategory:
        return category_for_suit(self.suit)

    @property
    def label(self) -> str:
        return rank_label(self.rank)

    @property
    def id(self) -> str:
        return f"{self.suit[0]}-{self.rank}-{self.uid}"

    def __str__(self) -> str:
        return f"{self.label}{self.suit[0].upper()}"


def category_of(card: Card) -> CardCategory:
    return card.category


def is_monster(card: Card) -> bool:
    return card.category == "monster"


def is_weapon(card: Card) -> bool:
    return card.category == "weapon"


def is_potion(card: Card) -> bool:
    return card.category == "potion"
