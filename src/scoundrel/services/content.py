from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from jsonschema import Draft202012Validator

from scoundrel.engine.state import GameConfig


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def _load_schema(path: Path) -> object:
    return _load_json(path)


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: list(e.path))
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


def _require_int(obj: Mapping[str, object], key: str) -> int:
    v = obj.get(key)
    if not isinstance(v, int) or isinstance(v, bool):
        raise ContentError(f"Expected int for {key}")
    return v


class ContentService:
    def __init__(self, data_dir: Path, schema_dir: Path) -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir

    def load_schema(self, name: str) -> object:
        return _load_schema(self._schema_dir / f"{name}.schema.json")

    def load_rules(self, path: Path | None = None) -> GameConfig:
        rules_path = path or self._data_dir / "rules.json"
        raw = _load_json(rules_path)
        validate_json(raw, self.load_schema("rules"), context=str(rules_path))

        if not isinstance(raw, dict):
            raise ContentError("rules.json must be an object")
        config = GameConfig(
            starting_health=_require_int(raw, "starting_health"),
            room_size=_require_int(raw, "room_size"),
            max_picks_per_turn=_require_int(raw, "max_picks_per_turn"),
        )
        try:
            config.validate()
        except ValueError as e:
            raise ContentError(f"Invalid rules in {rules_path}: {e}") from e
        return config

    def validate_snapshot(self, snap: Mapping[str, object]) -> None:
        validate_json(dict(snap), self.load_schema("snapshot"), context="snapshot")

    def validate_all(self) -> None:
        # Load is validation (schema + parse)
        _ = self.load_rules()
        _ = self.load_schema("snapshot")
