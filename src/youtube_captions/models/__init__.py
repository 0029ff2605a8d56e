"""Data models for caption retrieval."""

from .caption_data import CaptionTrack, CaptionTrackList, SubtitleEntry, Transcript

__all__ = [
    "CaptionTrack",
    "CaptionTrackList",
    "SubtitleEntry",
    "Transcript"
]
