"""Dopameter: rate content with emoji reactions and rank what hits hardest."""

__version__ = "0.1.0"
