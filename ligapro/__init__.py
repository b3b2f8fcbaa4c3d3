"""Football league tracker: teams, match results, standings and goal scorers."""

__version__ = "1.0.0"
__all__ = ["cli", "models", "tournament"]