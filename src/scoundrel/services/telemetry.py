from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Mapping


def _record(event_type: str, payload: Mapping[str, object]) -> str:
    return json.dumps(
        {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "type": event_type,
            "payload": dict(payload),
        },
        ensure_ascii=False,
    )


@dataclass
class TelemetryService:
    """Append-only JSONL sink for engine events, one record per line."""

    path: Path

    def _append(self, lines: list[str]) -> None:
        if not lines:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as f:
            f.writelines(line + "\n" for line in lines)

    def log(self, event_type: str, payload: Mapping[str, object]) -> None:
        self._append([_record(event_type, payload)])

    def log_events(self, events: Iterable[Mapping[str, object]]) -> None:
        """Forward a step's events in one write; ``type`` becomes the record type."""
        self._append(
            [
                _record(str(ev.get("type", "UNKNOWN")), {k: v for k, v in ev.items() if k != "type"})
                for ev in events
            ]
        )
