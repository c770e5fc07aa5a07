"""TelemetryLogger: JSONL game logging.

One logger per game. Writes one JSONL line per game event plus a game
summary as the final line. All entries include schema version and
game ID.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

import dicegame
from dicegame.core.events import GameEvent, event_to_record

if TYPE_CHECKING:
    from dicegame.game import GameResult

_SCHEMA_VERSION = "1.0.0"


class TelemetryLogger:
    """Event sink that writes JSONL telemetry for a single game."""

    def __init__(self, output_dir: Path, game_id: str, context: dict | None = None):
        self._output_dir = Path(output_dir)
        self._game_id = game_id
        self._output_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._output_dir / f"{game_id}.jsonl"
        self._context = context or {}
        self._sequence = 0

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def game_id(self) -> str:
        return self._game_id

    def emit(self, event: GameEvent) -> None:
        self._sequence += 1
        record = event_to_record(event)
        record["schema_version"] = _SCHEMA_VERSION
        record["game_id"] = self._game_id
        record["sequence"] = self._sequence
        record["timestamp"] = datetime.now(timezone.utc).isoformat()
        self._append(record)

    def finalize_game(self, result: "GameResult", extra: dict | None = None) -> None:
        """Append the game summary record."""
        record = {
            "schema_version": _SCHEMA_VERSION,
            "record_type": "game_summary",
            "game_id": self._game_id,
            "winner": result.winner_name,
            "winner_position": result.winner_position,
            "rounds_played": result.rounds_played,
            "final_wins": result.wins_by_name(),
            "engine_version": dicegame.__version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "game_name": self._context.get("game_name"),
            "session_name": self._context.get("session_name"),
            "seed": self._context.get("seed"),
        }
        if extra:
            record.update(extra)
        self._append(record)

    def _append(self, record: dict) -> None:
        with open(self._file_path, "a") as f:
            f.write(json.dumps(record, default=str) + "\n")
