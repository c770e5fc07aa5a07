"""dicegame reporting module.

Usage:
    from dicegame.reporting import ConsoleReporter, GameLog

    game = DiceGame(3, 2, sink=ConsoleReporter())
    log = GameLog.from_file("output/telemetry/classic-1a2b3c4d.jsonl")
"""

from .console import ConsoleReporter, render_standings, render_wins
from .reader import GameLog, RoundRecord

__all__ = [
    "ConsoleReporter",
    "GameLog",
    "RoundRecord",
    "render_standings",
    "render_wins",
]
