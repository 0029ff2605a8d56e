"""Core modules for caption retrieval."""

from .config import config, Config, NetworkConfig, LoggingConfig, validate_config
from .youtube_client import YouTubeClient
from .track_extractor import extract_caption_tracks, find_caption_tracks_fragment
from .track_selector import select_track
from .subtitle_decoder import decode_subtitles

__all__ = [
    'config',
    'Config',
    'NetworkConfig',
    'LoggingConfig',
    'validate_config',
    'YouTubeClient',
    'extract_caption_tracks',
    'find_caption_tracks_fragment',
    'select_track',
    'decode_subtitles'
]
