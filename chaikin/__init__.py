"""Chaikin's corner-cutting curve smoothing, with an interactive pygame viewer."""

__version__ = "0.1.0"
__all__ = ["curve", "animation", "app"]