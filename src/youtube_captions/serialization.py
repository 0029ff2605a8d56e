"""JSON rendering of caption tracks and transcripts."""

import json
import re
from typing import Any, Iterable, List, Optional

from .models import CaptionTrack, SubtitleEntry

# A JSON escape for <, > or & whose backslash is not itself escaped.
_HTML_ESCAPE_PATTERN = re.compile(r'(?<!\\)((?:\\\\)*)\\u00(3[cCeE]|26)')

_HTML_CHARACTERS = {"3c": "<", "3e": ">", "26": "&"}

DEFAULT_INDENT = 4


def unescape_html_sequences(text: str) -> str:
    """
    Turn JSON escapes of <, > and & back into the literal characters.

    Encoders that escape these for HTML safety would otherwise mangle caption
    text such as song lyrics.
    """
    return _HTML_ESCAPE_PATTERN.sub(
        lambda m: m.group(1) + _HTML_CHARACTERS[m.group(2).lower()],
        text
    )


def to_json(items: Iterable[Any], indent: Optional[int] = None) -> str:
    """
    Serialize models exposing ``to_dict`` as a JSON array.

    Args:
        items: Models to serialize, in order
        indent: Spaces per level, None for compact output
    """
    payload = [item.to_dict() for item in items]
    if indent is None:
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    else:
        text = json.dumps(payload, ensure_ascii=False, indent=indent)
    return unescape_html_sequences(text)


def tracks_to_json(tracks: Iterable[CaptionTrack], indent: Optional[int] = DEFAULT_INDENT) -> str:
    return to_json(tracks, indent)


def subtitles_to_json(entries: Iterable[SubtitleEntry], indent: Optional[int] = None) -> str:
    return to_json(entries, indent)


def subtitles_from_json(text: str) -> List[SubtitleEntry]:
    """Decode a compact or indented transcript JSON array."""
    return [SubtitleEntry.from_dict(item) for item in json.loads(text)]
