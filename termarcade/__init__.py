"""Terminal arcade games: Space Invaders and Frogger."""

__version__ = "0.1.0"
__all__ = ["__version__"]