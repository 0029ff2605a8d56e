"""Selection of one caption track by language code."""

from typing import Optional, Sequence

from ..exceptions import EmptyTrackList, LanguageNotFound
from ..models import CaptionTrack
from ..utils.logging import get_logger

logger = get_logger("track_selector")


def select_track(tracks: Sequence[CaptionTrack], language_code: str = "", video_id: str = "") -> CaptionTrack:
    """
    Pick the caption track to download.

    With a language code, every track is scanned and the last exact match
    wins. Without one, the first track is used.

    Args:
        tracks: Tracks in source order
        language_code: Requested language code, empty for the first track
        video_id: Video ID, used in error messages

    Returns:
        The selected track

    Raises:
        LanguageNotFound: If no track matches, or the matching track has no URL
        EmptyTrackList: If no language is given and there are no tracks
    """
    selected: Optional[CaptionTrack] = None

    if language_code:
        for track in tracks:
            if track.language_code == language_code:
                selected = track
        if selected is None:
            raise LanguageNotFound(video_id, language_code)
    else:
        if not tracks:
            raise EmptyTrackList(video_id)
        selected = tracks[0]

    if not selected.base_url:
        raise LanguageNotFound(video_id, language_code)

    logger.debug(f"Selected track {selected.vss_id or selected.language_code} for {video_id or 'video'}")
    return selected
