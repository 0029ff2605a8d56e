"""
Utility modules for caption retrieval.
"""

from .logging import setup_logger, get_logger
from .youtube_utils import extract_video_id, find_video_id

__all__ = [
    'setup_logger',
    'get_logger',
    'extract_video_id',
    'find_video_id'
]
