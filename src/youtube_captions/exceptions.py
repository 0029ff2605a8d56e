"""Custom exceptions for caption track and transcript retrieval."""

from typing import List, Optional


class CaptionsError(Exception):
    """Base exception class for every caption retrieval failure."""

    def __init__(self, detail: str, error_code: str = "CAPTIONS_ERROR"):
        self.detail = detail
        self.error_code = error_code
        super().__init__(detail)


class InvalidReference(CaptionsError):
    """The reference does not contain an 11-character video ID."""

    def __init__(self, reference: Optional[str]):
        self.reference = reference
        super().__init__(
            detail=f'cannot find a video ID in reference: "{reference}"',
            error_code="INVALID_REFERENCE"
        )


class NetworkError(CaptionsError):
    """The HTTP transport failed before a complete response was read."""

    def __init__(self, url: str, cause: Optional[BaseException] = None):
        self.url = url
        self.cause = cause
        detail = f"request to {url} failed"
        if cause is not None:
            detail = f"{detail}: {cause}"
        super().__init__(detail=detail, error_code="NETWORK_ERROR")


class HTTPStatusError(CaptionsError):
    """The server answered with a status other than 200."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(
            detail=f"http StatusCode is {status_code} for {url}",
            error_code="HTTP_STATUS_ERROR"
        )


class TracksNotFound(CaptionsError):
    """The watch page carries no caption track list (captions disabled)."""

    def __init__(self, video_id: str):
        self.video_id = video_id
        super().__init__(
            detail=f'captions not found on video: "{video_id}"',
            error_code="TRACKS_NOT_FOUND"
        )


class MalformedTrackData(CaptionsError):
    """The embedded caption track list could not be decoded."""

    def __init__(self, video_id: str, reason: str):
        self.video_id = video_id
        self.reason = reason
        super().__init__(
            detail=f'malformed caption track data on video "{video_id}": {reason}',
            error_code="MALFORMED_TRACK_DATA"
        )


class LanguageNotFound(CaptionsError):
    """No usable caption track exists for the requested language."""

    def __init__(self, video_id: str, language_code: str, detail: Optional[str] = None):
        self.video_id = video_id
        self.language_code = language_code
        super().__init__(
            detail=detail or f'subtitles for video "{video_id}" with language code "{language_code}" not found',
            error_code="LANGUAGE_NOT_FOUND"
        )


class EmptyTrackList(LanguageNotFound):
    """A default track was requested but the track list is empty."""

    def __init__(self, video_id: str):
        super().__init__(
            video_id,
            "",
            detail=f'video "{video_id}" has an empty caption track list'
        )
        self.error_code = "EMPTY_TRACK_LIST"


class MalformedSubtitleData(CaptionsError):
    """The timed-text document is not well-formed markup."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(
            detail=f"malformed subtitle data from {source or 'response'}: {reason}",
            error_code="MALFORMED_SUBTITLE_DATA"
        )


class ConfigurationError(CaptionsError):
    """The configuration holds values the client cannot use."""

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__(
            detail="invalid configuration: " + "; ".join(self.problems),
            error_code="CONFIGURATION_ERROR"
        )
