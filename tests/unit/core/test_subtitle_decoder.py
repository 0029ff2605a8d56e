"""Unit tests for timed-text decoding."""

import pytest

from youtube_captions.core.subtitle_decoder import decode_subtitles
from youtube_captions.exceptions import MalformedSubtitleData
from youtube_captions.models import SubtitleEntry


class TestDecodeSubtitles:
    """Tests for turning timed-text XML into entries."""

    def test_three_entries_in_document_order(self, subtitles_xml):
        # Act
        entries = decode_subtitles(subtitles_xml)

        # Assert
        assert entries == [
            SubtitleEntry(text="Hello and welcome", start="0.5", dur="2.04"),
            SubtitleEntry(text="Tom & Jerry <laughs>", start="2.54", dur="3.1"),
            SubtitleEntry(text="it's over", start="5.64", dur="1.000"),
        ]

    def test_times_are_not_reformatted(self):
        data = b'<transcript><text start="00012.340" dur="1e1">x</text></transcript>'

        entry = decode_subtitles(data)[0]

        assert entry.start == "00012.340"
        assert entry.dur == "1e1"

    def test_document_order_is_not_sorted(self):
        data = (
            b'<transcript><text start="9" dur="1">late</text>'
            b'<text start="1" dur="1">early</text></transcript>'
        )

        assert [e.text for e in decode_subtitles(data)] == ["late", "early"]

    def test_missing_attributes_and_empty_text(self):
        data = b'<transcript><text start="1"></text><text/></transcript>'

        entries = decode_subtitles(data)

        assert entries == [
            SubtitleEntry(text="", start="1", dur=""),
            SubtitleEntry(text="", start="", dur=""),
        ]

    def test_only_direct_text_children(self):
        data = (
            b'<transcript><head><text start="0" dur="0">meta</text></head>'
            b'<p>ignored</p><text start="1" dur="2">kept</text></transcript>'
        )

        assert [e.text for e in decode_subtitles(data)] == ["kept"]

    def test_nested_markup_keeps_own_character_data(self):
        data = b'<transcript><text start="1" dur="2">Hello <font color="red">big</font> world</text></transcript>'

        assert decode_subtitles(data)[0].text == "Hello  world"

    def test_entities_decoded_once(self):
        data = b'<transcript><text start="1" dur="2">I&amp;#39;m here</text></transcript>'

        assert decode_subtitles(data)[0].text == "I&#39;m here"

    def test_no_text_elements(self):
        assert decode_subtitles(b"<transcript></transcript>") == []

    @pytest.mark.parametrize("data", [
        b"",
        b"not xml at all",
        b"<transcript><text start='1'>open",
        b"<transcript>&nbsp;</transcript>",
    ])
    def test_malformed(self, data):
        with pytest.raises(MalformedSubtitleData) as exc_info:
            decode_subtitles(data, source="track en")

        assert exc_info.value.source == "track en"
        assert exc_info.value.error_code == "MALFORMED_SUBTITLE_DATA"
