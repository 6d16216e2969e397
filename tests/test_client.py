from __future__ import annotations

import io
import json
from pathlib import Path

from scoundrel.client.main import parse_command, run
from scoundrel.client.render import render_snapshot
from scoundrel.engine.actions import AvoidAction, PickAction
from scoundrel.engine.game import new_game
from scoundrel.engine.serialize import snapshot
from scoundrel.services.telemetry import TelemetryService


def test_parse_command() -> None:
    assert parse_command("2") == PickAction(index=2)
    assert parse_command(" w1 \n") == PickAction(index=1, fight_method="weapon")
    assert parse_command("a") == AvoidAction()
    assert parse_command("q") == "quit"
    assert parse_command("help") == "help"
    assert parse_command("fight") is None


def test_render_snapshot() -> None:
    text = render_snapshot(snapshot(new_game(seed=1, randomize=False)))
    assert "HP 20/20" in text
    assert "[0] 2H(P)" in text
    assert "Weapon: none" in text


def test_run_session_with_telemetry(tmp_path: Path) -> None:
    out = io.StringIO()
    telemetry = TelemetryService(tmp_path / "telemetry.jsonl")
    code = run(
        seed=5,
        randomize=False,
        rules_path=None,
        telemetry=telemetry,
        stdin=io.StringIO("0\nx\n9\na\nq\n"),
        stdout=out,
    )
    assert code == 0
    output = out.getvalue()
    assert "Seed 5" in output
    assert "Unrecognised command." in output
    assert "Rejected: Invalid room index." in output
    assert "Rejected: Only a full room can be avoided." in output

    records = [json.loads(line) for line in telemetry.path.read_text(encoding="utf-8").splitlines()]
    types = [r["type"] for r in records]
    assert types[0] == "GAME_STARTED"
    assert "CARD_PICKED" in types
    assert all("ts" in r for r in records)


def test_telemetry_batches_events_and_skips_empty_writes(tmp_path: Path) -> None:
    telemetry = TelemetryService(tmp_path / "nested" / "events.jsonl")
    telemetry.log_events([])
    assert not telemetry.path.exists()

    telemetry.log_events([{"type": "CARD_PICKED", "index": 1}, {"type": "TURN_ENDED", "turn_number": 1}])
    telemetry.log("NOTE", {"text": "done"})
    records = [json.loads(line) for line in telemetry.path.read_text(encoding="utf-8").splitlines()]
    assert [r["type"] for r in records] == ["CARD_PICKED", "TURN_ENDED", "NOTE"]
    assert records[0]["payload"] == {"index": 1}
