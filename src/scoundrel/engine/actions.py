from __future__ import annotations

from dataclasses import dataclass

from .types import FightMethod


@dataclass(frozen=True)
class PickAction:
    index: int
    fight_method: FightMethod = "bare"


@dataclass(frozen=True)
class AvoidAction:
    pass


Action = PickAction | AvoidAction
