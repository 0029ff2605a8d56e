"""Module-level shortcuts for caption retrieval with a default service."""

from typing import List, Optional

from .models import CaptionTrack, SubtitleEntry
from .services import CaptionsService

_default_service: Optional[CaptionsService] = None


def get_default_service() -> CaptionsService:
    """Get the shared service, creating it on first use."""
    global _default_service
    if _default_service is None:
        _default_service = CaptionsService()
    return _default_service


def get_info(reference: str) -> str:
    """
    Show all available caption tracks.

    Args:
        reference: Video ID such as "CLkkj3aka4g" or a full watch URL

    Returns:
        Indented JSON array of the caption tracks
    """
    return get_default_service().get_info(reference)


def get_caption_tracks(reference: str) -> List[CaptionTrack]:
    return get_default_service().get_caption_tracks(reference)


def get_transcript(reference: str, language_code: str = "") -> List[SubtitleEntry]:
    """Get subtitle entries ready to use from Python code."""
    return get_default_service().get_transcript(reference, language_code)


def get_transcript_json(reference: str, language_code: str = "") -> str:
    return get_default_service().get_transcript_json(reference, language_code)


def get_transcript_json_pretty(reference: str, language_code: str = "") -> str:
    """Get subtitles as JSON with 4 spaces of indentation for human reading."""
    return get_default_service().get_transcript_json_pretty(reference, language_code)
