from __future__ import annotations

import logging
import random
from typing import Iterable, Sequence

from .actions import Action, AvoidAction, PickAction
from .combat import (
    FightOutcome,
    can_use_weapon_on,
    equip_weapon,
    fight_barehanded,
    fight_with_weapon,
    use_potion,
)
from .deck import build_deck, fill_room, put_on_bottom, shuffle
from .state import GameConfig, GameState, StepResult
from .types import Card, FightMethod, RulesError, is_monster, is_potion

logger = logging.getLogger(__name__)

FIGHT_METHODS: tuple[FightMethod, ...] = ("bare", "weapon")


def _fail(message: str) -> StepResult:
    return StepResult(ok=False, events=[], error=message)


def _check_game_over(state: GameState) -> None:
    if state.game_over:
        return
    if state.health <= 0:
        penalty = sum(c.rank for c in (*state.deck, *state.room) if is_monster(c))
        score = state.health - penalty
        reason = "defeat"
    elif not state.deck and not state.room:
        score = state.health
        last = state.discard[-1] if state.discard else None
        # Flawless run that ended on a potion keeps the potion as bonus.
        if state.health == state.config.starting_health and last is not None and is_potion(last):
            score += last.rank
        reason = "victory"
    else:
        return
    state.game_over = True
    state.score = score
    state.event_log.append({"type": "GAME_ENDED", "reason": reason, "score": score})
    logger.info("game %s ended: %s with score %d", state.seed, reason, score)


def _end_turn(state: GameState) -> None:
    state.turn_number += 1
    if state.picks_this_turn > 0:
        state.previous_avoided = False
    state.picks_this_turn = 0
    state.used_potion_this_turn = False
    state.event_log.append({"type": "TURN_ENDED", "turn_number": state.turn_number})
    fill_room(state)
    _check_game_over(state)


def can_avoid(state: GameState) -> bool:
    return (
        not state.game_over
        and not state.previous_avoided
        and len(state.room) == state.config.room_size
    )


def _avoid_room(state: GameState) -> StepResult:
    if state.game_over:
        return _fail("Game already over.")
    if state.previous_avoided:
        return _fail("Cannot avoid two rooms in a row.")
    if len(state.room) != state.config.room_size:
        return _fail("Only a full room can be avoided.")

    start = len(state.event_log)
    taken = state.room
    state.room = []
    put_on_bottom(state, taken)
    state.previous_avoided = True
    state.event_log.append({"type": "ROOM_AVOIDED", "card_ids": [c.id for c in taken]})
    _end_turn(state)
    return StepResult(ok=True, events=state.event_log[start:])


def _resolve_pick(state: GameState, card: Card, fight_method: FightMethod) -> None:
    category = card.category
    if category == "weapon":
        equip_weapon(state, card)
    elif category == "potion":
        use_potion(state, card)
    elif category == "monster":
        weapon = state.equipped
        if fight_method == "weapon" and weapon is not None:
            outcome = fight_with_weapon(state, card)
            if outcome is FightOutcome.REJECTED_TOO_STRONG:
                state.event_log.append(
                    {
                        "type": "WEAPON_REJECTED",
                        "card_id": card.id,
                        "last_slain_value": weapon.last_slain_value,
                    }
                )
                fight_barehanded(state, card)
        else:
            fight_barehanded(state, card)
    else:
        # unreachable with the four standard suits
        state.discard.append(card)
        state.event_log.append({"type": "CARD_DISCARDED", "card_id": card.id})


def _pick_from_room(state: GameState, action: PickAction) -> StepResult:
    if state.game_over:
        return _fail("Game already over.")
    if action.index < 0 or action.index >= len(state.room):
        return _fail("Invalid room index.")
    if state.picks_this_turn >= state.config.max_picks_per_turn:
        return _fail(f"Already picked {state.config.max_picks_per_turn} cards this turn.")
    if action.fight_method not in FIGHT_METHODS:
        return _fail(f"Unknown fight method: {action.fight_method!r}.")

    start = len(state.event_log)
    card = state.room.pop(action.index)
    state.event_log.append(
        {"type": "CARD_PICKED", "index": action.index, "card_id": card.id, "category": card.category}
    )
    try:
        _resolve_pick(state, card, action.fight_method)
    except RulesError as e:
        state.discard.append(card)
        state.event_log.append({"type": "CARD_DISCARDED", "card_id": card.id})
        return StepResult(ok=False, events=state.event_log[start:], error=str(e))

    state.picks_this_turn += 1
    _check_game_over(state)
    if not state.game_over and state.picks_this_turn >= state.config.max_picks_per_turn:
        _end_turn(state)
    return StepResult(ok=True, events=state.event_log[start:])


def step(state: GameState, action: Action) -> StepResult:
    """Apply a single player command to the game state.

    This mutates `state` in-place but remains deterministic for a given
    (seed, action sequence). Rejected commands leave every zone untouched.
    """
    if state.game_over:
        return _fail("Game already over.")

    state.action_log.append(action)

    if isinstance(action, PickAction):
        return _pick_from_room(state, action)
    if isinstance(action, AvoidAction):
        return _avoid_room(state)
    return _fail("Unknown action.")


def get_valid_actions(state: GameState) -> list[Action]:
    """Commands that the rules accept right now.

    Weapon fights are only listed when the equipped weapon can take the
    monster; a rejected weapon fight would fall back to bare hands anyway.
    """
    if state.game_over:
        return []
    actions: list[Action] = []
    if state.picks_this_turn < state.config.max_picks_per_turn:
        for i, card in enumerate(state.room):
            actions.append(PickAction(index=i, fight_method="bare"))
            if can_use_weapon_on(state.equipped, card):
                actions.append(PickAction(index=i, fight_method="weapon"))
    if can_avoid(state):
        actions.append(AvoidAction())
    return actions


def new_game(
    config: GameConfig | None = None,
    seed: int | None = None,
    randomize: bool = True,
    deck: Sequence[Card] | None = None,
) -> GameState:
    """Create a game and deal the first room.

    ``randomize=False`` keeps the canonical deck order. An explicit ``deck``
    is dealt front-first exactly as given.
    """
    cfg = config or GameConfig()
    cfg.validate()
    if seed is None:
        seed = random.SystemRandom().randrange(2**32)

    rng = random.Random(seed)
    if deck is None:
        cards = build_deck()
        if randomize:
            shuffle(rng, cards)
    else:
        cards = list(deck)

    state = GameState(config=cfg, seed=seed, rng=rng, deck=cards, health=cfg.starting_health)
    state.event_log.append({"type": "GAME_STARTED", "seed": seed, "randomized": randomize})
    fill_room(state)
    _check_game_over(state)
    return state


def replay(
    seed: int,
    actions: Iterable[Action],
    config: GameConfig | None = None,
    randomize: bool = True,
) -> GameState:
    state = new_game(config=config, seed=seed, randomize=randomize)
    for a in actions:
        step(state, a)
        if state.game_over:
            break
    return state
