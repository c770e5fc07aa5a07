"""Per-game seeding for a session.

A session seed plus a game's name and its position in the session fully
determine that game's dice.  Each game seed is an HMAC-SHA256 digest of
``"<name>:<position>"`` keyed by the session seed, so adding, removing
or reordering other games never changes it.
"""

import hashlib
import hmac
import random

from dicegame.core.dice import RandomDice
from dicegame.core.errors import ConfigurationError

SEED_MIN = -(2**63)
SEED_MAX = 2**63 - 1


def check_seed(value) -> int:
    """Return ``value`` if it fits the signed 64-bit key, else raise ConfigurationError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"Session seed must be an integer, got {value!r} ({type(value).__name__})."
        )
    if not SEED_MIN <= value <= SEED_MAX:
        raise ConfigurationError(f"Session seed {value} does not fit in 64 signed bits.")
    return value


class SeedManager:
    """Hands each game of a session its own seed and its own dice."""

    def __init__(self, session_seed: int):
        self._session_seed = check_seed(session_seed)
        self._key = session_seed.to_bytes(8, byteorder="big", signed=True)

    @property
    def session_seed(self) -> int:
        return self._session_seed

    def get_game_seed(self, game_name: str, game_num: int) -> int:
        """Unsigned 64-bit seed for game number ``game_num`` called ``game_name``."""
        msg = f"{game_name}:{game_num}".encode("utf-8")
        digest = hmac.new(self._key, msg, hashlib.sha256).digest()
        return int.from_bytes(digest[:8], byteorder="big")

    def get_rng(self, game_seed: int) -> random.Random:
        """Return an isolated Random instance. Never touches global state."""
        return random.Random(game_seed)

    def dice_for(self, game_name: str, game_num: int) -> tuple[int, RandomDice]:
        """Seed and die source for one game of the session."""
        seed = self.get_game_seed(game_name, game_num)
        return seed, RandomDice(self.get_rng(seed))
