"""Game events and the sinks that consume them.

The engine only ever calls ``sink.emit(event)``; rendering, logging
and recording are up to the sink.  Every event knows its own
``kind`` string, which is what telemetry writes as ``record_type``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import ClassVar, Protocol, Union, runtime_checkable

__all__ = [
    "GameStarted",
    "DieRolled",
    "PlayerRolled",
    "RoundWon",
    "GameWon",
    "GameEvent",
    "EventSink",
    "NullSink",
    "EventRecorder",
    "FanoutSink",
    "event_to_record",
]


@dataclass(frozen=True)
class GameStarted:
    kind: ClassVar[str] = "game_started"

    player_names: tuple[str, ...]
    num_dice: int


@dataclass(frozen=True)
class DieRolled:
    """One die thrown by one player. ``die_index`` is 1-based."""

    kind: ClassVar[str] = "die_rolled"

    round_number: int
    player_name: str
    player_wins: int
    die_index: int
    face_value: int


@dataclass(frozen=True)
class PlayerRolled:
    kind: ClassVar[str] = "player_rolled"

    round_number: int
    position: int
    player_name: str
    total: int


@dataclass(frozen=True)
class RoundWon:
    kind: ClassVar[str] = "round_won"

    round_number: int
    position: int
    player_name: str
    round_total: int
    cumulative_wins: int


@dataclass(frozen=True)
class GameWon:
    kind: ClassVar[str] = "game_won"

    position: int
    player_name: str
    cumulative_wins: int
    rounds_played: int


GameEvent = Union[GameStarted, DieRolled, PlayerRolled, RoundWon, GameWon]


def event_to_record(event: GameEvent) -> dict:
    """Flatten an event into a JSON-ready dict tagged with its kind."""
    record = {"record_type": event.kind}
    record.update(asdict(event))
    return record


@runtime_checkable
class EventSink(Protocol):
    def emit(self, event: GameEvent) -> None: ...


class NullSink:
    """Discards everything."""

    def emit(self, event: GameEvent) -> None:
        return None


class EventRecorder:
    """Keeps every event in memory, in emission order."""

    def __init__(self) -> None:
        self.events: list[GameEvent] = []

    def emit(self, event: GameEvent) -> None:
        self.events.append(event)

    def of_kind(self, event_type: type) -> list:
        return [e for e in self.events if isinstance(e, event_type)]


class FanoutSink:
    """Broadcasts each event to several sinks, in order."""

    def __init__(self, *sinks: EventSink) -> None:
        self._sinks = [s for s in sinks if s is not None]

    def add(self, sink: EventSink) -> None:
        self._sinks.append(sink)

    def emit(self, event: GameEvent) -> None:
        for sink in self._sinks:
            sink.emit(event)
