"""
Unit tests for transcript export.
"""
import pytest

from models.transcript_models import DisplaySegment
from services.processing.exporter import (
    HighlightedSegment,
    TranscriptDocument,
    export_filename,
    export_transcript,
)


@pytest.fixture
def document():
    return TranscriptDocument(
        video_id="dQw4w9WgXcQ",
        title="Never Gonna Give You Up",
        channel_name="Rick Astley",
        duration="3:32",
        transcript=[
            DisplaySegment(timestamp="0:00", text="We're no strangers to love", start=0.0),
            DisplaySegment(timestamp="0:18", text="You know the rules", start=18.4),
        ],
        highlights=[
            HighlightedSegment(segment_index=1, reason="Chorus"),
            HighlightedSegment(segment_index=9, reason="Out of range"),
        ],
    )


class TestTextExport:

    def test_header_and_transcript(self, document):
        content = export_transcript(document, "txt")
        lines = content.splitlines()

        assert lines[0] == "Never Gonna Give You Up"
        assert lines[1] == "=" * len("Never Gonna Give You Up")
        assert "Channel: Rick Astley" in lines
        assert "Duration: 3:32" in lines
        assert "[0:00] We're no strangers to love" in lines
        assert "[0:18] You know the rules" in lines

    def test_highlights_section(self, document):
        content = export_transcript(document, "txt")
        assert "HIGHLIGHTED SEGMENTS" in content
        assert "Reason: Chorus" in content
        assert "Out of range" not in content
        assert content.index("HIGHLIGHTED SEGMENTS") < content.index("FULL TRANSCRIPT")

    def test_without_optional_fields(self):
        doc = TranscriptDocument(
            video_id="dQw4w9WgXcQ",
            transcript=[DisplaySegment(timestamp="0:00", text="hi", start=0)],
        )
        content = export_transcript(doc, "txt")

        assert content.startswith("YouTube video dQw4w9WgXcQ\n")
        assert "Channel:" not in content
        assert "HIGHLIGHTED SEGMENTS" not in content


class TestMarkdownExport:

    def test_structure(self, document):
        content = export_transcript(document, "md")

        assert content.startswith("# Never Gonna Give You Up\n")
        assert "## Highlighted Segments" in content
        assert "- **[0:18]** You know the rules _(Chorus)_" in content
        assert "## Full Transcript" in content
        assert "**[0:00]** We're no strangers to love" in content


class TestExportHelpers:

    def test_unknown_format(self, document):
        with pytest.raises(ValueError):
            export_transcript(document, "pdf")

    def test_filename_from_title(self, document):
        assert export_filename(document, "md") == "never-gonna-give-you-up-transcript.md"

    def test_filename_falls_back_to_video_id(self):
        doc = TranscriptDocument(video_id="dQw4w9WgXcQ", transcript=[], title="???")
        assert export_filename(doc, "txt") == "dQw4w9WgXcQ-transcript.txt"

    def test_watch_url_from_config(self, document, monkeypatch):
        monkeypatch.setattr(
            "services.processing.exporter.YOUTUBE_WATCH_URL", "https://yt.example/w/{video_id}"
        )

        assert "Video: https://yt.example/w/dQw4w9WgXcQ" in export_transcript(document, "txt")
        assert "**Video:** https://yt.example/w/dQw4w9WgXcQ" in export_transcript(document, "md")
