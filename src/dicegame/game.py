"""DiceGame: first player to win seven rounds takes the game.

Each round every player throws ``num_dice`` dice; the highest total wins
the round and rolls first in the next one.  The game ends the moment a
player's round-win count reaches ``WIN_TARGET``.

Lifecycle::

    NOT_STARTED --run()/play_round()--> IN_PROGRESS --target reached--> FINISHED
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from dicegame.core.dice import DieSource, RandomDice
from dicegame.core.errors import check_count
from dicegame.core.events import EventSink, GameStarted, GameWon, NullSink, RoundWon
from dicegame.core.roster import MIN_PLAYERS, Roster
from dicegame.core.round import RoundOutcome, RoundResolver

__all__ = ["WIN_TARGET", "GameStatus", "GameResult", "DiceGame"]

logger = logging.getLogger(__name__)

WIN_TARGET = 7


class GameStatus(enum.Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass
class GameResult:
    """Final standing of a finished game."""

    winner_name: str
    winner_position: int
    winner_wins: int
    rounds_played: int
    player_names: list[str]
    final_wins: list[int]
    rounds: list[RoundOutcome] = field(default_factory=list)

    def wins_by_name(self) -> dict[str, int]:
        return dict(zip(self.player_names, self.final_wins))


class DiceGame:
    """One first-to-seven dice game.

    Parameters
    ----------
    num_players : int
        Seats at the table (>= 2, default 2).
    num_dice : int
        Dice thrown by each player per round (>= 1, default 1).
    player_names : list[str], optional
        Names for the first seats; the rest become ``Player<index>``.
    dice : DieSource, optional
        Source of face values. Defaults to an entropy-seeded ``RandomDice``.
    sink : EventSink, optional
        Receives every game event.
    name : str
        Label used in logs and telemetry.
    """

    def __init__(
        self,
        num_players: int = MIN_PLAYERS,
        num_dice: int = 1,
        player_names: Sequence[str] | None = None,
        *,
        dice: DieSource | None = None,
        sink: EventSink | None = None,
        name: str = "game",
    ) -> None:
        check_count(num_players, "Number of players", MIN_PLAYERS)
        check_count(num_dice, "Number of dice", 1)

        self.name = name
        self._num_dice = num_dice
        self._roster = Roster.create(player_names, num_players)
        self._sink = sink if sink is not None else NullSink()
        self._resolver = RoundResolver(
            dice if dice is not None else RandomDice(),
            num_dice=num_dice,
            sink=self._sink,
        )

        self._status = GameStatus.NOT_STARTED
        self._start_position = 0
        self._rounds: list[RoundOutcome] = []
        self._result: GameResult | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def roster(self) -> Roster:
        return self._roster

    @property
    def num_dice(self) -> int:
        return self._num_dice

    @property
    def win_target(self) -> int:
        return WIN_TARGET

    @property
    def start_position(self) -> int:
        """Seat that rolls first in the next round."""
        return self._start_position

    @property
    def rounds(self) -> list[RoundOutcome]:
        return list(self._rounds)

    @property
    def result(self) -> GameResult | None:
        return self._result

    def is_terminal(self) -> bool:
        return self._status is GameStatus.FINISHED

    def get_state_snapshot(self) -> dict:
        """Return a serializable snapshot of the current game state."""
        return {
            "name": self.name,
            "status": self._status.value,
            "num_dice": self._num_dice,
            "win_target": WIN_TARGET,
            "round": len(self._rounds),
            "start_position": self._start_position,
            "players": [
                {"name": p.name, "wins": p.wins} for p in self._roster
            ],
        }

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------

    def run(self) -> GameResult:
        """Play rounds until someone reaches the win target."""
        while self._result is None:
            self.play_round()
        return self._result

    def play_round(self) -> RoundOutcome | None:
        """Play a single round. Returns None once the game is finished."""
        if self._status is GameStatus.FINISHED:
            return None
        if self._status is GameStatus.NOT_STARTED:
            self._start()

        outcome = self._resolver.play_round(self._roster, self._start_position)
        self._rounds.append(outcome)
        self._start_position = outcome.winner_position

        winner = self._roster.player_at(outcome.winner_position)
        self._sink.emit(RoundWon(
            round_number=outcome.round_number,
            position=outcome.winner_position,
            player_name=winner.name,
            round_total=outcome.winning_total,
            cumulative_wins=winner.wins,
        ))

        if winner.wins >= WIN_TARGET:
            self._finish(outcome.winner_position)
        return outcome

    def _start(self) -> None:
        self._status = GameStatus.IN_PROGRESS
        self._start_position = 0
        logger.info(
            "%s: starting with %d players, %d dice each",
            self.name, self._roster.size(), self._num_dice,
        )
        self._sink.emit(GameStarted(
            player_names=tuple(self._roster.names),
            num_dice=self._num_dice,
        ))

    def _finish(self, winner_position: int) -> None:
        winner = self._roster.player_at(winner_position)
        self._status = GameStatus.FINISHED
        self._result = GameResult(
            winner_name=winner.name,
            winner_position=winner_position,
            winner_wins=winner.wins,
            rounds_played=len(self._rounds),
            player_names=self._roster.names,
            final_wins=self._roster.wins,
            rounds=list(self._rounds),
        )
        logger.info(
            "%s: %s wins after %d rounds",
            self.name, winner, len(self._rounds),
        )
        self._sink.emit(GameWon(
            position=winner_position,
            player_name=winner.name,
            cumulative_wins=winner.wins,
            rounds_played=len(self._rounds),
        ))
