"""
Extraction of the caption track list embedded in a watch page.

The watch page ships a large player configuration blob. Only the
``captionTracks`` array is sliced out of it by pattern and decoded; the rest
of the page is never parsed.
"""

import json
import re
from typing import List, Optional

from ..exceptions import MalformedTrackData, TracksNotFound
from ..models import CaptionTrack
from ..utils.logging import get_logger

logger = get_logger("track_extractor")

# Greedy through the last `isTranslatable":<bool>}]` on the same line.
CAPTION_TRACKS_PATTERN = re.compile(rb'("captionTracks":.*isTranslatable":(true|false)}])')


def find_caption_tracks_fragment(page: bytes) -> Optional[bytes]:
    """
    Locate the ``"captionTracks":[...]`` fragment in a watch page.

    Returns:
        The matched fragment, None if the page has no caption tracks
    """
    match = CAPTION_TRACKS_PATTERN.search(page)
    return match.group(1) if match else None


def extract_caption_tracks(page: bytes, video_id: str = "") -> List[CaptionTrack]:
    """
    Decode the caption track list embedded in a watch page.

    Args:
        page: Raw watch page bytes
        video_id: Video ID, used in error messages

    Returns:
        Tracks in the order the page lists them

    Raises:
        TracksNotFound: If the page carries no caption track list
        MalformedTrackData: If the track list cannot be decoded
    """
    fragment = find_caption_tracks_fragment(page)
    if fragment is None:
        raise TracksNotFound(video_id)

    try:
        document = json.loads(b"{" + fragment + b"}")
    except ValueError as e:
        raise MalformedTrackData(video_id, str(e)) from e

    raw_tracks = document.get("captionTracks")
    if raw_tracks is None:
        raw_tracks = []
    if not isinstance(raw_tracks, list):
        raise MalformedTrackData(video_id, "captionTracks is not an array")

    tracks = []
    for index, raw_track in enumerate(raw_tracks):
        if not isinstance(raw_track, dict):
            raise MalformedTrackData(video_id, f"track {index} is not an object")
        try:
            tracks.append(CaptionTrack.from_dict(raw_track))
        except TypeError as e:
            raise MalformedTrackData(video_id, f"track {index}: {e}") from e

    logger.debug(f"Found {len(tracks)} caption tracks for {video_id or 'page'}")
    return tracks
