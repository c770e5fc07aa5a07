"""ConsoleReporter: play-by-play rendering of game events with rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dicegame.core.events import (
    DieRolled,
    GameEvent,
    GameStarted,
    GameWon,
    PlayerRolled,
    RoundWon,
)

if TYPE_CHECKING:
    from dicegame.session import SessionResult

__all__ = ["ConsoleReporter", "render_standings", "render_wins"]


class ConsoleReporter:
    """Event sink that narrates a game on a rich ``Console``.

    Parameters
    ----------
    console : Console, optional
        Where to print. Defaults to a fresh stdout console.
    quiet : bool
        Skip per-die lines; only round and game winners are printed.
    """

    def __init__(self, console: Console | None = None, *, quiet: bool = False) -> None:
        self.console = console or Console()
        self.quiet = quiet

    def emit(self, event: GameEvent) -> None:
        if isinstance(event, GameStarted):
            self._line("")
            self._line("[+][+] Game starts", style="bold")
        elif isinstance(event, DieRolled):
            if self.quiet:
                return
            if event.die_index == 1:
                self._line(f"{event.player_name} with {event.player_wins} throws dice:")
            self._line(f"\t on {event.die_index} gets: {event.face_value}", style="dim")
        elif isinstance(event, PlayerRolled):
            return
        elif isinstance(event, RoundWon):
            self._line(
                f"[+] Winner in round: {event.player_name} with {event.cumulative_wins}",
                style="green",
            )
        elif isinstance(event, GameWon):
            self._line("")
            self._line(
                f"[+][+] Game winner: {event.player_name} with {event.cumulative_wins}",
                style="bold green",
            )

    def _line(self, text: str, style: str | None = None) -> None:
        self.console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)


def render_wins(console: Console, title: str, wins: dict[str, int]) -> None:
    """Print a two-column name/wins table, most wins first."""
    table = Table(title=title)
    table.add_column("Player")
    table.add_column("Wins", justify="right")
    for name, count in sorted(wins.items(), key=lambda x: x[1], reverse=True):
        table.add_row(escape(name), str(count))
    console.print(table)


def render_standings(console: Console, result: SessionResult) -> None:
    """Print one row per game and the games-won standings of a ``SessionResult``."""
    games = Table(title="Games")
    games.add_column("Game")
    games.add_column("Seed", justify="right")
    games.add_column("Winner")
    games.add_column("Rounds", justify="right")
    games.add_column("Final wins")
    for g in result.games:
        games.add_row(
            g.game_name,
            str(g.seed),
            escape(g.winner),
            str(g.rounds),
            escape(", ".join(f"{n}: {w}" for n, w in g.wins.items())),
        )
    console.print(games)
    render_wins(console, "Standings (games won)", result.standings)
