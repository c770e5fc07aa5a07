"""Round resolution: one full circuit of rolls around the table.

Every player rolls exactly once per round, in turn order beginning at
the start position.  The highest total wins the round.  Ties go to the
player who reached that total first: a later roll has to be strictly
greater to take the lead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from dicegame.core.dice import MAX_VALUE_ON_DICE, DieSource, roll_dice
from dicegame.core.errors import check_count
from dicegame.core.events import DieRolled, EventSink, NullSink, PlayerRolled
from dicegame.core.roster import Roster

__all__ = ["RoundOutcome", "RoundResolver"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundOutcome:
    """Totals and winner of one round.

    ``totals`` is indexed by roster position, not by turn order.
    """

    round_number: int
    start_position: int
    totals: tuple[int, ...]
    winner_position: int

    @property
    def winning_total(self) -> int:
        return self.totals[self.winner_position]

    @property
    def turn_order(self) -> list[int]:
        size = len(self.totals)
        return [(self.start_position + i) % size for i in range(size)]


class RoundResolver:
    """Resolves rounds for one game.

    Parameters
    ----------
    dice : DieSource
        Where face values come from.
    num_dice : int
        Dice each player throws per round (>= 1).
    sink : EventSink, optional
        Receives a ``DieRolled`` per die and a ``PlayerRolled`` per player.
    """

    def __init__(
        self,
        dice: DieSource,
        num_dice: int = 1,
        sink: EventSink | None = None,
        faces: int = MAX_VALUE_ON_DICE,
    ) -> None:
        check_count(num_dice, "Number of dice", 1)
        self._dice = dice
        self._num_dice = num_dice
        self._faces = faces
        self._sink = sink if sink is not None else NullSink()
        self._rounds_resolved = 0

    @property
    def num_dice(self) -> int:
        return self._num_dice

    @property
    def rounds_resolved(self) -> int:
        return self._rounds_resolved

    def resolve_round(self, roster: Roster, start_position: int) -> int:
        """Play one round from ``start_position`` and return the winning position."""
        return self.play_round(roster, start_position).winner_position

    def play_round(self, roster: Roster, start_position: int) -> RoundOutcome:
        """Play one round and return its full outcome.

        The winner's win counter is incremented before returning.
        """
        round_number = self._rounds_resolved + 1
        start = roster.normalize(start_position)
        totals = [0] * roster.size()

        winner_position = start
        max_total = None
        for position in roster.positions_from(start):
            total = self._throw(roster, position, round_number)
            totals[position] = total
            if max_total is None or total > max_total:
                max_total = total
                winner_position = position

        roster.record_win(winner_position)
        self._rounds_resolved = round_number

        outcome = RoundOutcome(
            round_number=round_number,
            start_position=start,
            totals=tuple(totals),
            winner_position=winner_position,
        )
        logger.debug(
            "Round %d from seat %d: totals=%s, winner seat %d",
            round_number, start, list(outcome.totals), winner_position,
        )
        return outcome

    def _throw(self, roster: Roster, position: int, round_number: int) -> int:
        """Throw all dice for one player, emitting each face, and return the sum."""
        player = roster.player_at(position)
        faces = roll_dice(self._dice, self._num_dice, self._faces)
        for die_index, face in enumerate(faces, 1):
            self._sink.emit(DieRolled(
                round_number=round_number,
                player_name=player.name,
                player_wins=player.wins,
                die_index=die_index,
                face_value=face,
            ))
        total = sum(faces)
        self._sink.emit(PlayerRolled(
            round_number=round_number,
            position=position,
            player_name=player.name,
            total=total,
        ))
        return total
