"""Errors raised while building a game or loading a session config."""


class ConfigurationError(ValueError):
    """A game or session was configured with values it cannot run with."""


def check_count(value, what: str, minimum: int) -> int:
    """Return ``value`` if it is a whole number >= ``minimum``.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"{what} must be a whole number, got {value!r} ({type(value).__name__})."
        )
    if value < minimum:
        raise ConfigurationError(f"{what} must be at least {minimum}, got {value}.")
    return value
