"""Telemetry reader: loads JSONL game files back into structured data.

Usage:
    log = GameLog.from_file("output/telemetry/classic-1a2b3c4d.jsonl")
    print(log.player_names)     # ["Player0", "Player1"]
    print(len(log.rounds))      # 11
    print(log.round_wins())     # {"Player0": 7, "Player1": 4}
    print(log.summary)          # final game summary record or None
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class RoundRecord:
    """One round winner from telemetry."""

    round_number: int
    player_name: str
    round_total: int
    cumulative_wins: int

    @classmethod
    def from_record(cls, record: dict) -> RoundRecord:
        return cls(
            round_number=record.get("round_number", 0),
            player_name=record.get("player_name", ""),
            round_total=record.get("round_total", 0),
            cumulative_wins=record.get("cumulative_wins", 0),
        )


@dataclass
class GameLog:
    """Parsed game telemetry."""

    file_path: Path
    game_id: str
    player_names: list[str]
    num_dice: int
    rounds: list[RoundRecord]
    rolls: int  # individual dice thrown
    winner: str | None
    summary: dict | None
    schema_version: str

    @classmethod
    def from_file(cls, path: str | Path) -> GameLog:
        path = Path(path)
        rounds: list[RoundRecord] = []
        summary: dict | None = None
        player_names: list[str] = []
        num_dice = 0
        rolls = 0
        winner: str | None = None
        game_id = ""
        schema_version = ""

        with open(path) as f:
            for line_no, line in enumerate(f, 1):
                stripped = line.strip()
                if not stripped:
                    continue
                try:
                    record = json.loads(stripped)
                except json.JSONDecodeError:
                    logger.warning("Skipping malformed JSON in %s line %d", path.name, line_no)
                    continue
                if not isinstance(record, dict):
                    logger.warning("Skipping non-object record in %s line %d", path.name, line_no)
                    continue

                game_id = game_id or record.get("game_id", "")
                schema_version = schema_version or record.get("schema_version", "")
                kind = record.get("record_type")

                if kind == "game_started":
                    player_names = list(record.get("player_names", []))
                    num_dice = record.get("num_dice", 0)
                elif kind == "die_rolled":
                    rolls += 1
                elif kind == "round_won":
                    rounds.append(RoundRecord.from_record(record))
                elif kind == "game_won":
                    winner = record.get("player_name")
                elif kind == "game_summary":
                    summary = record

        return cls(
            file_path=path,
            game_id=game_id,
            player_names=player_names,
            num_dice=num_dice,
            rounds=rounds,
            rolls=rolls,
            winner=winner,
            summary=summary,
            schema_version=schema_version,
        )

    @property
    def finished(self) -> bool:
        return self.winner is not None

    def round_wins(self) -> dict[str, int]:
        """Round wins per player, including players who never won a round."""
        counts = Counter(r.player_name for r in self.rounds)
        names = self.player_names or list(counts)
        return {name: counts.get(name, 0) for name in names}
