"""Session configuration loader."""

import os
import yaml
from dataclasses import dataclass, field
from pathlib import Path

from dicegame.core.errors import ConfigurationError

OUTPUT_DIR_ENV = "DICEGAME_OUTPUT_DIR"


@dataclass
class GameConfig:
    name: str
    num_players: int = 2
    num_dice: int = 1
    player_names: list[str] | None = None


@dataclass
class SessionConfig:
    name: str
    seed: int
    games: dict[str, GameConfig] = field(default_factory=dict)
    output_dir: Path | None = None


def demo_config(seed: int = 0) -> SessionConfig:
    """The three example games: default table, three players with two dice, named seats."""
    games = [
        GameConfig(name="classic"),
        GameConfig(name="three-two-dice", num_players=3, num_dice=2),
        GameConfig(name="named-seats", num_players=3, num_dice=1, player_names=["John", "Mike"]),
    ]
    return SessionConfig(name="demo", seed=seed, games={g.name: g for g in games})


def resolve_output_dir(config: SessionConfig) -> Path:
    """Config value first, then ``$DICEGAME_OUTPUT_DIR``, then ``output/``."""
    if config.output_dir:
        return Path(config.output_dir)
    env_dir = os.environ.get(OUTPUT_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return Path("output")


def _whole_number(path: Path, key: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"{path}: '{key}' must be a whole number, got {value!r}"
        )
    return value


def load_config(path: Path) -> SessionConfig:
    """Load session config from YAML file."""
    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"{path}: invalid YAML: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"{path}: expected a mapping at the top level")
    s = raw.get("session")
    if not isinstance(s, dict):
        raise ConfigurationError(f"{path}: missing 'session' section")
    for key in ("name", "seed"):
        if key not in s:
            raise ConfigurationError(f"{path}: missing 'session.{key}'")
    seed = _whole_number(path, "session.seed", s["seed"])

    games_raw = raw.get("games") or {}
    if not isinstance(games_raw, dict):
        raise ConfigurationError(f"{path}: 'games' must be a mapping of name -> settings")

    games = {}
    for name, g in games_raw.items():
        g = g or {}
        if not isinstance(g, dict):
            raise ConfigurationError(f"{path}: game '{name}' must be a mapping")
        names = g.get("names")
        games[str(name)] = GameConfig(
            name=str(name),
            num_players=_whole_number(path, f"games.{name}.players", g.get("players", 2)),
            num_dice=_whole_number(path, f"games.{name}.dice", g.get("dice", 1)),
            player_names=list(names) if isinstance(names, list) else names,
        )

    output_dir = raw.get("output_dir")
    return SessionConfig(
        name=str(s["name"]),
        seed=seed,
        games=games,
        output_dir=Path(output_dir) if output_dir else None,
    )
