"""
Unit tests for YouTube video ID extraction.
"""
import pytest

from services.ingestion.video_reference import extract_video_id, is_valid_video_id

VIDEO_ID = "dQw4w9WgXcQ"


class TestRecognizedShapes:
    """Every supported URL shape yields the same ID."""

    @pytest.mark.parametrize("url", [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=30s",
        "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        "http://youtube.com/watch?v=dQw4w9WgXcQ",
        "youtube.com/watch?v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ?si=abc123",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://www.youtube.com/shorts/dQw4w9WgXcQ",
        "https://m.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://gaming.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://music.youtube.com/watch?v=dQw4w9WgXcQ&list=RDdQw4w9WgXcQ",
        "dQw4w9WgXcQ",
        "  https://youtu.be/dQw4w9WgXcQ  ",
    ])
    def test_extracts_same_id(self, url):
        assert extract_video_id(url) == VIDEO_ID

    def test_watch_url_with_timestamp(self):
        """Scenario A: watch URL with a t= parameter."""
        assert extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=30s") == "dQw4w9WgXcQ"

    def test_short_link_matches_watch_url(self):
        """Scenario B: short link resolves to the same ID as the watch URL."""
        watch = extract_video_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=30s")
        short = extract_video_id("https://youtu.be/dQw4w9WgXcQ")
        assert short == watch == VIDEO_ID

    def test_ids_with_dash_and_underscore(self):
        assert extract_video_id("https://youtu.be/a-b_c-d_e-f") == "a-b_c-d_e-f"


class TestUnrecognizedInput:
    """Anything else returns None without raising."""

    @pytest.mark.parametrize("value", [
        None,
        "",
        "   ",
        12345678901,
        ["dQw4w9WgXcQ"],
        "not a url",
        "https://vimeo.com/123456789",
        "https://www.youtube.com/watch?v=short",
        "https://www.youtube.com/channel/UCuAXFkgsw1L7xaCfnd5JJOw",
        "dQw4w9WgXc",  # 10 chars
        "dQw4w9WgXcQQ",  # 12 chars, not a URL
        "dQw4w9WgX!Q",
    ])
    def test_returns_none(self, value):
        assert extract_video_id(value) is None


class TestIsValidVideoId:

    def test_valid(self):
        assert is_valid_video_id(VIDEO_ID) is True

    @pytest.mark.parametrize("value", [None, "", "dQw4w9WgXc", "dQw4w9WgXcQ\n", "dQw4w9WgX cQ", 42])
    def test_invalid(self, value):
        assert is_valid_video_id(value) is False
