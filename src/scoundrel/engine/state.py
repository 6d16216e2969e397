from __future__ import annotations

import random
from dataclasses import dataclass, field

from .actions import Action
from .types import Card

Event = dict[str, object]


@dataclass(frozen=True)
class GameConfig:
    starting_health: int = 20
    room_size: int = 4
    max_picks_per_turn: int = 3

    def validate(self) -> None:
        if self.starting_health <= 0:
            raise ValueError("starting_health must be positive.")
        if self.room_size <= 0:
            raise ValueError("room_size must be positive.")
        if not 0 < self.max_picks_per_turn <= self.room_size:
            raise ValueError("max_picks_per_turn must be between 1 and room_size.")


@dataclass
class WeaponState:
    card: Card
    monsters: list[Card] = field(default_factory=list)
    last_slain_value: int | None = None


@dataclass
class StepResult:
    ok: bool
    events: list[Event]
    error: str | None = None


@dataclass
class GameState:
    config: GameConfig
    seed: int
    rng: random.Random
    deck: list[Card]
    discard: list[Card] = field(default_factory=list)
    room: list[Card] = field(default_factory=list)
    equipped: WeaponState | None = None
    health: int = 0
    picks_this_turn: int = 0
    used_potion_this_turn: bool = False
    previous_avoided: bool = False  # blocks a second avoid until a turn with a pick
    turn_number: int = 0
    game_over: bool = False
    score: int | None = None
    action_log: list[Action] = field(default_factory=list)
    event_log: list[Event] = field(default_factory=list)

    def card_count(self) -> int:
        """Cards across every zone; constant for the whole game."""
        held = 0
        if self.equipped is not None:
            held = 1 + len(self.equipped.monsters)
        return len(self.deck) + len(self.discard) + len(self.room) + held
