"""Card resolution: monster fights, weapon equips and potions.

These helpers mutate ``GameState`` but never evaluate game over; the
command layer does that once per pick. Misuse (wrong card category)
raises ``RulesError``.
"""

from __future__ import annotations

from enum import Enum

from .state import GameState, WeaponState
from .types import Card, RulesError, is_monster, is_potion, is_weapon


class FightOutcome(Enum):
    ACCEPTED = "accepted"
    REJECTED_TOO_STRONG = "rejected_too_strong"


def can_use_weapon_on(weapon: WeaponState | None, card: Card) -> bool:
    """A weapon only fights monsters no stronger than the last one it slew."""
    if weapon is None or not is_monster(card):
        return False
    if weapon.last_slain_value is None:
        return True
    return card.rank <= weapon.last_slain_value


def fight_barehanded(state: GameState, card: Card) -> None:
    if not is_monster(card):
        raise RulesError("Not a monster.")
    state.discard.append(card)
    state.health -= card.rank
    state.event_log.append(
        {"type": "MONSTER_FOUGHT", "card_id": card.id, "method": "bare", "damage": card.rank}
    )


def fight_with_weapon(state: GameState, card: Card) -> FightOutcome:
    weapon = state.equipped
    if weapon is None:
        raise RulesError("No weapon equipped.")
    if not is_monster(card):
        raise RulesError("Not a monster.")
    if not can_use_weapon_on(weapon, card):
        return FightOutcome.REJECTED_TOO_STRONG

    weapon.monsters.append(card)
    damage = max(0, card.rank - weapon.card.rank)
    state.health -= damage
    weapon.last_slain_value = card.rank
    state.event_log.append(
        {"type": "MONSTER_FOUGHT", "card_id": card.id, "method": "weapon", "damage": damage}
    )
    return FightOutcome.ACCEPTED


def equip_weapon(state: GameState, card: Card) -> None:
    if not is_weapon(card):
        raise RulesError("Not a weapon.")
    old = state.equipped
    if old is not None:
        state.discard.append(old.card)
        state.discard.extend(old.monsters)
        state.event_log.append(
            {"type": "WEAPON_DISCARDED", "card_id": old.card.id, "monsters": len(old.monsters)}
        )
    state.equipped = WeaponState(card=card)
    state.event_log.append({"type": "WEAPON_EQUIPPED", "card_id": card.id, "strength": card.rank})


def use_potion(state: GameState, card: Card) -> bool:
    """Drink a potion. Returns False when a potion was already used this turn."""
    if not is_potion(card):
        raise RulesError("Not a potion.")
    state.discard.append(card)
    if state.used_potion_this_turn:
        state.event_log.append({"type": "POTION_WASTED", "card_id": card.id})
        return False
    healed = min(state.config.starting_health - state.health, card.rank)
    state.health += healed
    state.used_potion_this_turn = True
    state.event_log.append({"type": "POTION_USED", "card_id": card.id, "healed": healed})
    return True
