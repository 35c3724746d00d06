"""Terminal truth-table puzzle game with chasing ghosts, pickups and a score ranking."""

__version__ = "0.1.0"
__all__ = ["__version__"]