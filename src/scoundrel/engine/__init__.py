"""Deterministic, headless rules engine for Scoundrel.

IMPORTANT: This package must never do I/O or import a UI toolkit.
"""

from .actions import AvoidAction, PickAction
from .combat import FightOutcome, can_use_weapon_on
from .deck import build_deck, shuffle
from .game import get_valid_actions, new_game, replay, step
from .serialize import snapshot
from .session import Scoundrel
from .state import GameConfig, GameState, StepResult, WeaponState
from .types import Card, CardCategory, FightMethod, RulesError, Suit, rank_label

__all__ = [
    "AvoidAction",
    "Card",
    "CardCategory",
    "FightMethod",
    "FightOutcome",
    "GameConfig",
    "GameState",
    "PickAction",
    "RulesError",
    "Scoundrel",
    "StepResult",
    "Suit",
    "WeaponState",
    "build_deck",
    "can_use_weapon_on",
    "get_valid_actions",
    "new_game",
    "rank_label",
    "replay",
    "shuffle",
    "snapshot",
    "step",
]
