"""Core services."""

from .detail_service import DetailService

__all__ = ["DetailService"]
