from __future__ import annotations

from typing import Mapping

from .actions import Action, AvoidAction, PickAction
from .state import GameState, WeaponState
from .types import Card


def card_to_dict(c: Card) -> dict[str, object]:
    return {
        "id": c.id,
        "suit": c.suit,
        "rank": c.rank,
        "label": c.label,
        "category": c.category,
    }


def _weapon_to_dict(w: WeaponState | None) -> dict[str, object] | None:
    if w is None:
        return None
    return {
        "card": card_to_dict(w.card),
        "monsters": [card_to_dict(m) for m in w.monsters],
        "last_slain_value": w.last_slain_value,
    }


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, PickAction):
        return {"type": "pick", "index": a.index, "fight_method": a.fight_method}
    if isinstance(a, AvoidAction):
        return {"type": "avoid"}
    # should be unreachable
    return {"type": "unknown"}


def action_from_dict(d: Mapping[str, object]) -> Action:
    t = d.get("type")
    if t == "pick":
        index = d.get("index")
        method = d.get("fight_method", "bare")
        if not isinstance(index, int) or isinstance(index, bool) or method not in ("bare", "weapon"):
            raise ValueError(f"Invalid pick action: {dict(d)}")
        return PickAction(index=index, fight_method=method)  # type: ignore[arg-type]
    if t == "avoid":
        return AvoidAction()
    raise ValueError(f"Unknown action type: {t}")


def snapshot(state: GameState) -> dict[str, object]:
    """Return a JSON-serializable read-only view of the game for rendering.

    Deck and discard are exposed as counts only; every list is freshly built.
    """
    return {
        "seed": state.seed,
        "starting_health": state.config.starting_health,
        "health": state.health,
        "deck_count": len(state.deck),
        "discard_count": len(state.discard),
        "room": [card_to_dict(c) for c in state.room],
        "equipped": _weapon_to_dict(state.equipped),
        "monsters_slain_by_weapon": len(state.equipped.monsters) if state.equipped else 0,
        "picks_this_turn": state.picks_this_turn,
        "used_potion_this_turn": state.used_potion_this_turn,
        "previous_avoided": state.previous_avoided,
        "game_over": state.game_over,
        "score": state.score,
        "turn_number": state.turn_number,
    }
