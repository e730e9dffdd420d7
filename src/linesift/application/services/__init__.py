"""Application services."""

from .filter_service import ContentFilterService, FilterRequest, FilterResult

__all__ = ["ContentFilterService", "FilterRequest", "FilterResult"]
