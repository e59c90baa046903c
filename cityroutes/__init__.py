"""Shortest travel times between cities on a text map, by road or by flight."""

__version__ = "0.1.0"
__all__ = ["text", "grid", "roads", "flights", "cli"]