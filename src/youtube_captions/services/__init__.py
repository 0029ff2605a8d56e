"""Service layer for caption operations."""

from .captions_service import CaptionsService

__all__ = ["CaptionsService"]
