"""Pytest configuration and fixtures for caption retrieval tests."""

import os
import sys
import pytest
from typing import Dict
from unittest.mock import MagicMock

# Add the src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from youtube_captions.core.config import Config, NetworkConfig
from youtube_captions.core.youtube_client import YouTubeClient
from youtube_captions.models import CaptionTrack


VIDEO_ID = "CLkkj3aka4g"
WATCH_URL = f"https://youtube.com/watch?v={VIDEO_ID}"
EN_TRACK_URL = f"https://www.youtube.com/api/timedtext?v={VIDEO_ID}&lang=en"
ES_TRACK_URL = f"https://www.youtube.com/api/timedtext?v={VIDEO_ID}&lang=es"

WATCH_PAGE = (
    b'<!DOCTYPE html><html><head><title>Test Video</title></head><body>'
    b'<script>var ytInitialPlayerResponse = {"responseContext":{"serviceTrackingParams":[]},'
    b'"captions":{"playerCaptionsTracklistRenderer":{"captionTracks":['
    b'{"baseUrl":"' + EN_TRACK_URL.encode() + b'","name":{"simpleText":"English"},'
    b'"vssId":".en","languageCode":"en","isTranslatable":true},'
    b'{"baseUrl":"' + ES_TRACK_URL.encode() + b'","name":{"simpleText":"Spanish (auto-generated)"},'
    b'"vssId":"a.es","languageCode":"es","kind":"asr","isTranslatable":false}'
    b'],"audioTracks":[{"captionTrackIndices":[0,1]}],"defaultAudioTrackIndex":0}},'
    b'"videoDetails":{"videoId":"CLkkj3aka4g","title":"Test Video"}};</script>'
    b'</body></html>'
)

WATCH_PAGE_WITHOUT_CAPTIONS = (
    b'<!DOCTYPE html><html><body><script>var ytInitialPlayerResponse = '
    b'{"playabilityStatus":{"status":"OK"},"videoDetails":{"videoId":"CLkkj3aka4g"}};'
    b'</script></body></html>'
)

SUBTITLES_XML = (
    b'<?xml version="1.0" encoding="utf-8" ?><transcript>'
    b'<text start="0.5" dur="2.04">Hello and welcome</text>'
    b'<text start="2.54" dur="3.1">Tom &amp; Jerry &lt;laughs&gt;</text>'
    b'<text start="5.64" dur="1.000">it&#39;s over</text>'
    b'</transcript>'
)


def make_response(status_code: int = 200, content: bytes = b"") -> MagicMock:
    """Build a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.content = content
    return response


@pytest.fixture
def test_config() -> Config:
    """Configuration independent of the environment."""
    return Config(network=NetworkConfig(
        watch_url_template="https://youtube.com/watch?v={video_id}",
        http_timeout=None,
        user_agent=None,
        accept_language=None
    ))


@pytest.fixture
def routes() -> Dict[str, MagicMock]:
    """URL to mock response mapping served by mock_session."""
    return {
        WATCH_URL: make_response(content=WATCH_PAGE),
        EN_TRACK_URL: make_response(content=SUBTITLES_XML),
        ES_TRACK_URL: make_response(content=b'<transcript><text start="1" dur="2">Hola</text></transcript>'),
    }


@pytest.fixture
def mock_session(routes) -> MagicMock:
    """Mock requests.Session answering from the routes fixture."""
    session = MagicMock()

    def get(url, **kwargs):
        if url not in routes:
            return make_response(status_code=404)
        return routes[url]

    session.get.side_effect = get
    return session


@pytest.fixture
def youtube_client(mock_session, test_config) -> YouTubeClient:
    """YouTubeClient wired to the mock session."""
    return YouTubeClient(session=mock_session, config=test_config)


@pytest.fixture
def english_track() -> CaptionTrack:
    return CaptionTrack(
        base_url=EN_TRACK_URL,
        name="English",
        vss_id=".en",
        language_code="en",
        is_translatable=True
    )


@pytest.fixture
def watch_page() -> bytes:
    return WATCH_PAGE


@pytest.fixture
def watch_page_without_captions() -> bytes:
    return WATCH_PAGE_WITHOUT_CAPTIONS


@pytest.fixture
def subtitles_xml() -> bytes:
    return SUBTITLES_XML


@pytest.fixture
def urls() -> Dict[str, str]:
    """Video ID and URLs used by the fixtures."""
    return {
        "video_id": VIDEO_ID,
        "watch": WATCH_URL,
        "en": EN_TRACK_URL,
        "es": ES_TRACK_URL,
    }


@pytest.fixture
def response_factory():
    """Factory for mock responses, for tests that rewire the routes."""
    return make_response
