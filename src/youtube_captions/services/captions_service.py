"""Service for caption track and transcript operations."""

from typing import Optional

from ..core import YouTubeClient, decode_subtitles, extract_caption_tracks, select_track
from ..models import CaptionTrackList, Transcript
from ..serialization import subtitles_to_json, tracks_to_json
from ..utils.logging import get_logger
from ..utils.youtube_utils import extract_video_id

logger = get_logger("captions_service")


class CaptionsService:
    """
    Runs the caption pipeline: watch page, track list, track choice,
    timed-text document, entries.

    Every operation is synchronous and makes at most two requests. Errors are
    raised as CaptionsError subclasses and never retried.
    """

    def __init__(self, youtube_client: Optional[YouTubeClient] = None):
        self.youtube_client = youtube_client or YouTubeClient()

    def get_caption_tracks(self, reference: str) -> CaptionTrackList:
        """List the caption tracks available for a video, in page order."""
        video_id = extract_video_id(reference)
        page = self.youtube_client.fetch_watch_page(video_id)
        return extract_caption_tracks(page, video_id)

    def get_info(self, reference: str) -> str:
        """Get the available caption tracks as indented JSON."""
        return tracks_to_json(self.get_caption_tracks(reference))

    def get_transcript(self, reference: str, language_code: str = "") -> Transcript:
        """
        Get the transcript of a video.

        Args:
            reference: Video ID or URL containing one
            language_code: Exact language code, empty for the first track

        Returns:
            Subtitle entries in document order
        """
        video_id = extract_video_id(reference)
        tracks = self.get_caption_tracks(video_id)
        track = select_track(tracks, language_code, video_id)

        data = self.youtube_client.fetch_subtitles(track.base_url)
        entries = decode_subtitles(data, source=f'video "{video_id}" track "{track.language_code}"')

        logger.info(f"Retrieved {len(entries)} subtitle entries for {video_id} ({track.language_code})")
        return entries

    def get_transcript_json(self, reference: str, language_code: str = "") -> str:
        """Get the transcript as compact JSON."""
        return subtitles_to_json(self.get_transcript(reference, language_code))

    def get_transcript_json_pretty(self, reference: str, language_code: str = "") -> str:
        """Get the transcript as JSON indented with 4 spaces."""
        return subtitles_to_json(self.get_transcript(reference, language_code), indent=4)
