"""Roster: ordered, circular seating of players.

Players are stored in a fixed-size list and addressed by position.
Every position lookup is taken modulo the roster size, so traversal
from any start position wraps from the last seat back to the first.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from dicegame.core.errors import ConfigurationError, check_count

__all__ = ["MIN_PLAYERS", "Player", "Roster", "default_name"]

MIN_PLAYERS = 2


def default_name(position: int) -> str:
    """Name given to a seat with no supplied name."""
    return f"Player{position}"


@dataclass
class Player:
    """One seat at the table and its running round-win count."""

    name: str
    wins: int = 0

    def __str__(self) -> str:
        return f"{self.name} with {self.wins}"


class Roster:
    """Fixed-size circular sequence of players."""

    def __init__(self, players: Sequence[Player]) -> None:
        if len(players) < MIN_PLAYERS:
            raise ConfigurationError(
                f"A game needs at least {MIN_PLAYERS} players, got {len(players)}."
            )
        self._players: list[Player] = list(players)

    @classmethod
    def create(cls, names: Sequence[str] | None, total_count: int) -> Roster:
        """Seat ``total_count`` players, naming the first ones from ``names``.

        Seats past ``len(names)`` get ``Player<index>`` names, with the
        index continuing from the number of supplied names.
        """
        check_count(total_count, "Number of players", MIN_PLAYERS)
        if names is None:
            names = []
        if isinstance(names, str) or not isinstance(names, Sequence):
            raise ConfigurationError(
                f"Player names must be a list of strings, got {type(names).__name__}."
            )
        for name in names:
            if not isinstance(name, str):
                raise ConfigurationError(
                    f"Player names must be strings, got {name!r}."
                )
        if len(names) > total_count:
            raise ConfigurationError(
                f"Got {len(names)} player names for {total_count} players."
            )

        players = [Player(name) for name in names]
        players.extend(
            Player(default_name(i)) for i in range(len(names), total_count)
        )
        return cls(players)

    # ------------------------------------------------------------------
    # Positional access
    # ------------------------------------------------------------------

    def size(self) -> int:
        return len(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def normalize(self, position: int) -> int:
        return position % len(self._players)

    def player_at(self, position: int) -> Player:
        """Return the player at ``position``, wrapping around the table."""
        return self._players[self.normalize(position)]

    def positions_from(self, start: int) -> list[int]:
        """Every position exactly once, in turn order beginning at ``start``."""
        size = len(self._players)
        return [(start + offset) % size for offset in range(size)]

    # ------------------------------------------------------------------
    # Win bookkeeping
    # ------------------------------------------------------------------

    def record_win(self, position: int) -> Player:
        player = self.player_at(position)
        player.wins += 1
        return player

    @property
    def names(self) -> list[str]:
        return [p.name for p in self._players]

    @property
    def wins(self) -> list[int]:
        return [p.wins for p in self._players]

    def __repr__(self) -> str:
        return f"Roster({', '.join(str(p) for p in self._players)})"
