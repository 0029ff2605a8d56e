"""Decoding of timed-text XML into subtitle entries."""

import xml.etree.ElementTree as ET
from typing import List

from ..exceptions import MalformedSubtitleData
from ..models import SubtitleEntry
from ..utils.logging import get_logger

logger = get_logger("subtitle_decoder")


def _character_data(element: ET.Element) -> str:
    """Character data directly inside an element, skipping nested element text."""
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


def decode_subtitles(data: bytes, source: str = "") -> List[SubtitleEntry]:
    """
    Decode a timed-text document.

    Every ``<text start="..." dur="...">`` child of the root becomes one
    entry, in document order. Attribute values are kept verbatim.

    Args:
        data: Raw timed-text document
        source: Where the document came from, used in error messages

    Returns:
        Subtitle entries in document order

    Raises:
        MalformedSubtitleData: If the document is not well-formed XML
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise MalformedSubtitleData(source, str(e)) from e

    entries = [
        SubtitleEntry(
            text=_character_data(element),
            start=element.get("start", ""),
            dur=element.get("dur", ""),
        )
        for element in root.findall("text")
    ]

    logger.debug(f"Decoded {len(entries)} subtitle entries")
    return entries
