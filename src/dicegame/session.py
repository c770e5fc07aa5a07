"""SessionRunner: plays every game in a session config.

Each game gets its own HMAC-derived seed and its own ``random.Random``,
so games are independent and a session is fully reproducible from its
seed.  Every game is logged to JSONL telemetry; a console reporter can
be attached for live play-by-play.
"""

from __future__ import annotations

import logging
import uuid
from collections import Counter
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from dicegame.config import GameConfig, SessionConfig, resolve_output_dir
from dicegame.core.events import FanoutSink
from dicegame.core.seed import SeedManager
from dicegame.core.telemetry import TelemetryLogger
from dicegame.game import DiceGame
from dicegame.reporting.console import ConsoleReporter

logger = logging.getLogger(__name__)


@dataclass
class GameSummary:
    """Result of a single game within a session."""

    game_id: str
    game_name: str
    seed: int
    winner: str
    rounds: int
    wins: dict[str, int]  # player name -> round wins


@dataclass
class SessionResult:
    """Aggregate result of the entire session."""

    telemetry_dir: Path
    games: list[GameSummary]
    standings: dict[str, int]  # player name -> games won


class SessionRunner:
    """Runs a session defined by a SessionConfig."""

    def __init__(
        self,
        config: SessionConfig,
        *,
        console: Console | None = None,
        quiet: bool = False,
    ) -> None:
        self.config = config
        self.seed_mgr = SeedManager(config.seed)
        self.telemetry_dir = self._resolve_telemetry_dir()
        self.console = console
        self.quiet = quiet

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self) -> SessionResult:
        """Execute every game in config order and return results."""
        summaries: list[GameSummary] = []
        for game_num, game_cfg in enumerate(self.config.games.values(), 1):
            summaries.append(self._run_game(game_cfg, game_num))

        standings = Counter(s.winner for s in summaries)
        return SessionResult(
            telemetry_dir=self.telemetry_dir,
            games=summaries,
            standings=dict(standings),
        )

    def build_game(self, game_cfg: GameConfig, game_num: int, sink=None) -> tuple[DiceGame, int]:
        """Build a game with its derived seed. Raises ConfigurationError on bad settings."""
        seed, dice = self.seed_mgr.dice_for(game_cfg.name, game_num)
        game = DiceGame(
            game_cfg.num_players,
            game_cfg.num_dice,
            game_cfg.player_names,
            dice=dice,
            sink=sink,
            name=game_cfg.name,
        )
        return game, seed

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _resolve_telemetry_dir(self) -> Path:
        """Create and return the telemetry output directory."""
        d = resolve_output_dir(self.config) / "telemetry"
        d.mkdir(parents=True, exist_ok=True)
        return d

    def _run_game(self, game_cfg: GameConfig, game_num: int) -> GameSummary:
        game_id = f"{game_cfg.name}-{uuid.uuid4().hex[:8]}"
        sink = FanoutSink()
        # Build before opening telemetry so a bad config leaves no file behind.
        game, seed = self.build_game(game_cfg, game_num, sink=sink)

        telemetry = TelemetryLogger(
            self.telemetry_dir,
            game_id,
            context={
                "game_name": game_cfg.name,
                "session_name": self.config.name,
                "seed": seed,
            },
        )
        sink.add(telemetry)
        if self.console is not None:
            sink.add(ConsoleReporter(self.console, quiet=self.quiet))

        logger.info("Game %d (%s): seed=%d", game_num, game_cfg.name, seed)
        result = game.run()
        telemetry.finalize_game(result, extra={"num_dice": game.num_dice})

        return GameSummary(
            game_id=game_id,
            game_name=game_cfg.name,
            seed=seed,
            winner=result.winner_name,
            rounds=result.rounds_played,
            wins=result.wins_by_name(),
        )
