"""SQLAlchemy models for the Dopameter application."""

from .chart import ChartData
from .content import Content
from .favorite import Favorite
from .vote import Vote

__all__ = ["ChartData", "Content", "Favorite", "Vote"]
