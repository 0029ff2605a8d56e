"""Data models for caption tracks and timed subtitle entries."""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping


def _string_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f'field "{key}" must be a string, got {type(value).__name__}')
    return value


def _bool_field(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f'field "{key}" must be a boolean, got {type(value).__name__}')
    return value


@dataclass(frozen=True)
class CaptionTrack:
    """One selectable subtitle stream of a video."""
    base_url: str = ""
    name: str = ""
    vss_id: str = ""
    language_code: str = ""
    kind: str = ""
    is_translatable: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CaptionTrack":
        """
        Build a track from one decoded ``captionTracks`` element.

        Unknown keys are ignored and absent or null keys fall back to empty
        defaults. A known key holding the wrong JSON type raises TypeError.
        """
        name = data.get("name")
        if name is None:
            name = {}
        if not isinstance(name, Mapping):
            raise TypeError(f'field "name" must be an object, got {type(name).__name__}')

        return cls(
            base_url=_string_field(data, "baseUrl"),
            name=_string_field(name, "simpleText"),
            vss_id=_string_field(data, "vssId"),
            language_code=_string_field(data, "languageCode"),
            kind=_string_field(data, "kind"),
            is_translatable=_bool_field(data, "isTranslatable"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire shape used by the watch page."""
        return {
            "baseUrl": self.base_url,
            "name": {"simpleText": self.name},
            "vssId": self.vss_id,
            "languageCode": self.language_code,
            "kind": self.kind,
            "isTranslatable": self.is_translatable,
        }


@dataclass(frozen=True)
class SubtitleEntry:
    """A single timed caption line. Times stay in their literal decimal form."""
    text: str
    start: str
    dur: str

    def to_dict(self) -> Dict[str, str]:
        return {"Text": self.text, "Start": self.start, "Dur": self.dur}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SubtitleEntry":
        return cls(
            text=_string_field(data, "Text"),
            start=_string_field(data, "Start"),
            dur=_string_field(data, "Dur"),
        )


CaptionTrackList = List[CaptionTrack]
Transcript = List[SubtitleEntry]
