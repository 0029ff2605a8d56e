"""HTTP client for the YouTube watch page and timed-text documents."""

from typing import Optional

import requests

from .config import Config, config as default_config, validate_config
from ..exceptions import ConfigurationError, HTTPStatusError, NetworkError
from ..utils.logging import get_logger
from ..utils.youtube_utils import extract_video_id

logger = get_logger("youtube_client")


class YouTubeClient:
    """
    Issues the two GET requests of a caption lookup.

    Each call performs exactly one request with no retries. The session can be
    injected so tests (or callers with their own adapters) control the
    transport.
    """

    def __init__(self, session: Optional[requests.Session] = None, config: Optional[Config] = None):
        self.config = config or default_config

        is_valid, problems = validate_config(self.config)
        if not is_valid:
            raise ConfigurationError(problems)

        self.session = session or self._new_session()

    def _new_session(self) -> requests.Session:
        session = requests.Session()
        if self.config.network.user_agent:
            session.headers.update({"User-Agent": self.config.network.user_agent})
        if self.config.network.accept_language:
            session.headers.update({"Accept-Language": self.config.network.accept_language})
        return session

    def fetch_watch_page(self, reference: str) -> bytes:
        """
        Fetch the raw watch page for a video.

        Args:
            reference: Video ID or URL containing one

        Returns:
            The response body

        Raises:
            InvalidReference: If the reference contains no video ID
            NetworkError: On transport failure
            HTTPStatusError: If the status is not 200
        """
        video_id = extract_video_id(reference)
        url = self.config.network.watch_url(video_id)
        logger.info(f"Fetching watch page for {video_id}")
        return self._get(url)

    def fetch_subtitles(self, url: str) -> bytes:
        """Fetch a timed-text document from a caption track URL."""
        logger.info("Fetching timed-text document")
        logger.debug(f"Timed-text URL: {url}")
        return self._get(url)

    def _get(self, url: str) -> bytes:
        try:
            response = self.session.get(url, timeout=self.config.network.http_timeout, stream=True)
        except requests.RequestException as e:
            raise NetworkError(url, e) from e

        try:
            if response.status_code != 200:
                raise HTTPStatusError(url, response.status_code)
            try:
                body = response.content
            except requests.RequestException as e:
                raise NetworkError(url, e) from e
            logger.debug(f"Read {len(body)} bytes from {url}")
            return body
        finally:
            self._close(response, url)

    @staticmethod
    def _close(response: requests.Response, url: str) -> None:
        """Release the response; a close failure is logged and never raised."""
        try:
            response.close()
        except Exception as e:
            logger.warning(f"Failed to close response from {url}: {e}")

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "YouTubeClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
