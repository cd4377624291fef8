"""A grid-based snake arcade game with food, poison, walls and a saved high score."""

__version__ = "0.1.0"
__all__ = ["__version__"]