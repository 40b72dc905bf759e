"""Business logic services for the Dopameter application."""

from .chart import ChartService
from .content_service import ContentService

__all__ = ["ChartService", "ContentService"]
