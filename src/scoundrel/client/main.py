from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from scoundrel.engine.actions import Action, AvoidAction, PickAction
from scoundrel.engine.game import new_game, step
from scoundrel.engine.serialize import snapshot
from scoundrel.paths import get_paths
from scoundrel.services.content import ContentError, ContentService
from scoundrel.services.logging_utils import LOG_LEVEL, get_logger, setup_logging
from scoundrel.services.telemetry import TelemetryService

from .render import render_snapshot

logger = get_logger(__name__)

HELP = """Commands:
  <n>     take room card n (monsters fought bare-handed)
  w<n>    fight room monster n with the equipped weapon
  a       avoid the room
  h       show this help
  q       quit"""

Command = Action | str


def parse_command(text: str) -> Command | None:
    """Translate a typed line into an engine action or a client keyword."""
    t = text.strip().lower()
    if t in ("q", "quit", "exit"):
        return "quit"
    if t in ("h", "help", "?"):
        return "help"
    if t in ("a", "avoid"):
        return AvoidAction()
    method = "bare"
    if t.startswith("w"):
        method = "weapon"
        t = t[1:].strip()
    if t.isdigit():
        return PickAction(index=int(t), fight_method=method)  # type: ignore[arg-type]
    return None


def run(
    seed: int | None,
    randomize: bool,
    rules_path: Path | None,
    telemetry: TelemetryService | None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> int:
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    try:
        config = content.load_rules(rules_path)
    except ContentError as e:
        print(str(e), file=sys.stderr)
        return 2

    state = new_game(config, seed=seed, randomize=randomize)
    logger.info("started game with seed %s", state.seed)
    if telemetry is not None:
        telemetry.log_events(state.event_log)

    print(f"Seed {state.seed}. Type 'h' for help.", file=stdout)
    while True:
        print(render_snapshot(snapshot(state)), file=stdout)
        if state.game_over:
            return 0
        print("> ", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            return 0
        cmd = parse_command(line)
        if cmd is None:
            print("Unrecognised command.", file=stdout)
            continue
        if cmd == "quit":
            return 0
        if cmd == "help":
            print(HELP, file=stdout)
            continue
        if not isinstance(cmd, (PickAction, AvoidAction)):
            print("Unrecognised command.", file=stdout)
            continue
        result = step(state, cmd)
        if telemetry is not None:
            telemetry.log_events(result.events)
        if not result.ok:
            print(f"Rejected: {result.error}", file=stdout)


def main() -> int:
    parser = argparse.ArgumentParser(prog="scoundrel")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--no-shuffle", action="store_true", help="deal the canonical deck order")
    parser.add_argument("--rules", type=Path, default=None, help="alternative rules.json")
    parser.add_argument("--telemetry", type=Path, default=None, help="append engine events as JSONL")
    parser.add_argument("--log-level", default=LOG_LEVEL)
    args = parser.parse_args()

    setup_logging(args.log_level)
    telemetry = TelemetryService(args.telemetry) if args.telemetry else None
    return run(args.seed, not args.no_shuffle, args.rules, telemetry)


if __name__ == "__main__":
    raise SystemExit(main())
