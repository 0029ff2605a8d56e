"""YouTube reference utility functions."""

import re
from typing import Optional

from ..exceptions import InvalidReference

# An ID is any run of 11 characters from the URL-safe alphabet.
VIDEO_ID_PATTERN = re.compile(r'([a-zA-Z0-9_-]{11})')


def find_video_id(reference: Optional[str]) -> Optional[str]:
    """
    Find the video ID inside a bare ID or a URL.

    Args:
        reference: Video ID or any string containing one

    Returns:
        The first 11-character ID run, None if there is none
    """
    if not reference or not isinstance(reference, str):
        return None

    match = VIDEO_ID_PATTERN.search(reference)
    return match.group(1) if match else None


def extract_video_id(reference: Optional[str]) -> str:
    """
    Extract the video ID from a bare ID or a URL.

    Raises:
        InvalidReference: If the reference contains no video ID
    """
    video_id = find_video_id(reference)
    if video_id is None:
        raise InvalidReference(reference)
    return video_id
