"""dicegame: first-to-seven multi-player dice competition simulator."""

__version__ = "0.1.0"
