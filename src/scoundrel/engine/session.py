from __future__ import annotations

from .actions import AvoidAction, PickAction
from .game import new_game, step
from .serialize import snapshot
from .state import GameConfig, GameState, StepResult
from .types import FightMethod


class Scoundrel:
    """Stateful wrapper around the functional engine for a single session.

    Usage:
        game = Scoundrel(seed=7)
        game.pick_from_room(0, fight_method="weapon")
        view = game.snapshot()
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        randomize: bool = True,
    ) -> None:
        self._config = config or GameConfig()
        self.state: GameState = new_game(self._config, seed=seed, randomize=randomize)

    def reset(self, randomize: bool = True, seed: int | None = None) -> None:
        self.state = new_game(self._config, seed=seed, randomize=randomize)

    def snapshot(self) -> dict[str, object]:
        return snapshot(self.state)

    def pick_from_room(self, index: int, fight_method: FightMethod = "bare") -> dict[str, object]:
        result = step(self.state, PickAction(index=index, fight_method=fight_method))
        return _as_reply(result)

    def avoid_room(self) -> bool:
        return step(self.state, AvoidAction()).ok

    @property
    def events(self) -> list[dict[str, object]]:
        return list(self.state.event_log)


def _as_reply(result: StepResult) -> dict[str, object]:
    if result.ok:
        return {"ok": True}
    return {"ok": False, "reason": result.error or "Error"}
