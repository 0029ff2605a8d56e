"""
YouTube Captions Package

Fetch the caption tracks of a YouTube video from its watch page and decode
the chosen track into timed subtitle entries or JSON.
"""

__version__ = "0.1.0"

from .utils.logging import get_logger
from .exceptions import (
    CaptionsError,
    InvalidReference,
    NetworkError,
    HTTPStatusError,
    TracksNotFound,
    MalformedTrackData,
    LanguageNotFound,
    EmptyTrackList,
    MalformedSubtitleData,
    ConfigurationError
)
from .models import CaptionTrack, SubtitleEntry
from .core import YouTubeClient
from .services import CaptionsService
from .transcript import (
    get_info,
    get_caption_tracks,
    get_transcript,
    get_transcript_json,
    get_transcript_json_pretty
)

__all__ = [
    # Logging
    'get_logger',

    # Errors
    'CaptionsError',
    'InvalidReference',
    'NetworkError',
    'HTTPStatusError',
    'TracksNotFound',
    'MalformedTrackData',
    'LanguageNotFound',
    'EmptyTrackList',
    'MalformedSubtitleData',
    'ConfigurationError',

    # Models
    'CaptionTrack',
    'SubtitleEntry',

    # Clients and services
    'YouTubeClient',
    'CaptionsService',

    # Operations
    'get_info',
    'get_caption_tracks',
    'get_transcript',
    'get_transcript_json',
    'get_transcript_json_pretty'
]
