"""
YouTube transcript fetcher.

Scrapes the public watch page for its caption-track listing, picks a
track, and downloads and parses its timed-text payload.
"""
import json
import logging
import re
from typing import Any, Dict, List, Optional

import requests
from bs4 import BeautifulSoup

from core.config import (
    HTTP_TIMEOUT_SEC,
    PREFERRED_CAPTION_LANGUAGE,
    YOUTUBE_THUMBNAIL_URL,
    YOUTUBE_USER_AGENT,
    YOUTUBE_WATCH_URL,
)
from core.exceptions import (
    InvalidReferenceError,
    NoCaptionsAvailableError,
    NoUsableCaptionTrackError,
    TranscriptFetchFailedError,
    UpstreamPageUnavailableError,
)
from models.transcript_models import CaptionTrack, TranscriptResult, VideoMetadata
from services.ingestion.video_reference import extract_video_id
from services.processing.timed_text import parse_timed_text
from services.processing.utils import format_timestamp

logger = logging.getLogger(__name__)

CAPTION_TRACKS_RE = re.compile(r'"captionTracks":\s*\[')
CHANNEL_NAME_RE = re.compile(r'"ownerChannelName":"((?:[^"\\]|\\.)*)"')
LENGTH_SECONDS_RE = re.compile(r'"lengthSeconds":"(\d+)"')
TITLE_SUFFIX = " - YouTube"


class YouTubeFetcher:
    """Fetches transcripts and metadata from YouTube watch pages."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = HTTP_TIMEOUT_SEC,
        user_agent: str = YOUTUBE_USER_AGENT,
        preferred_language: str = PREFERRED_CAPTION_LANGUAGE,
    ):
        self.session = session or requests.Session()
        self.timeout = timeout
        self.headers = {'User-Agent': user_agent}
        self.preferred_language = preferred_language

    def fetch_watch_page(self, video_id: str) -> str:
        """
        Download the public watch page HTML.

        Raises:
            UpstreamPageUnavailableError: network failure or non-2xx status
        """
        url = YOUTUBE_WATCH_URL.format(video_id=video_id)
        try:
            response = self.session.get(url, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise UpstreamPageUnavailableError(f"Failed to fetch video page: {e}") from e

        if not response.ok:
            raise UpstreamPageUnavailableError(
                f"Failed to fetch video page: {response.status_code}"
            )
        return response.text

    @staticmethod
    def find_caption_tracks(page_html: str) -> List[CaptionTrack]:
        """
        Pull the captionTracks JSON array out of the watch page.

        Raises:
            NoCaptionsAvailableError: no listing on the page, or it is not valid JSON
        """
        match = CAPTION_TRACKS_RE.search(page_html)
        if not match:
            raise NoCaptionsAvailableError("No captions available for this video")

        try:
            # Decode from the opening bracket; track names may nest their own arrays
            listing, _ = json.JSONDecoder().raw_decode(page_html, match.end() - 1)
        except json.JSONDecodeError as e:
            raise NoCaptionsAvailableError(f"Unreadable caption listing: {e}") from e
        if not isinstance(listing, list):
            raise NoCaptionsAvailableError("Caption listing is not an array")

        return [
            CaptionTrack.from_listing(entry)
            for entry in listing
            if isinstance(entry, dict)
        ]

    def select_caption_track(self, tracks: List[CaptionTrack]) -> CaptionTrack:
        """
        Pick a track: preferred-language auto-generated, then preferred-language
        manual, then the first track. Only tracks with a fetch URL are considered.

        Raises:
            NoUsableCaptionTrackError: no track has a fetch URL
        """
        usable = [track for track in tracks if track.base_url]
        if not usable:
            raise NoUsableCaptionTrackError("No caption tracks found")

        lang = self.preferred_language
        return (
            next((t for t in usable if t.language_code == lang and t.is_auto_generated), None)
            or next((t for t in usable if t.language_code == lang), None)
            or usable[0]
        )

    def fetch_timed_text(self, track: CaptionTrack) -> str:
        """
        Download the timed-text payload for a track.

        Raises:
            TranscriptFetchFailedError: network failure or non-2xx status
        """
        try:
            response = self.session.get(track.base_url, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise TranscriptFetchFailedError(f"Failed to fetch transcript: {e}") from e

        if not response.ok:
            raise TranscriptFetchFailedError(
                f"Failed to fetch transcript: {response.status_code}"
            )
        return response.text

    @staticmethod
    def _extract_title(page_html: str) -> Optional[str]:
        soup = BeautifulSoup(page_html, 'html.parser')
        title = ""
        if soup.find('title'):
            title = soup.find('title').get_text().strip()
        if not title and soup.find('meta', property='og:title'):
            title = soup.find('meta', property='og:title').get('content', '').strip()

        if title.endswith(TITLE_SUFFIX):
            title = title[:-len(TITLE_SUFFIX)].strip()
        return title or None

    @staticmethod
    def _extract_channel_name(page_html: str) -> Optional[str]:
        match = CHANNEL_NAME_RE.search(page_html)
        if not match:
            return None
        # The value is a JSON string literal body; let json undo its escapes
        return json.loads(f'"{match.group(1)}"') or None

    @staticmethod
    def _extract_duration(page_html: str) -> Optional[str]:
        match = LENGTH_SECONDS_RE.search(page_html)
        if not match:
            return None
        return format_timestamp(int(match.group(1)))

    @classmethod
    def extract_metadata(cls, page_html: str, video_id: str) -> VideoMetadata:
        """
        Best-effort title, channel and duration from the watch page.

        Each field is extracted independently; a failure leaves that field
        as None and does not affect the others.
        """
        extractors = {
            "title": cls._extract_title,
            "channel_name": cls._extract_channel_name,
            "duration": cls._extract_duration,
        }

        fields: Dict[str, Any] = {}
        for name, extractor in extractors.items():
            try:
                fields[name] = extractor(page_html)
            except Exception as e:
                logger.debug("Could not extract %s for %s: %s", name, video_id, e)
                fields[name] = None

        return VideoMetadata(
            thumbnail=YOUTUBE_THUMBNAIL_URL.format(video_id=video_id),
            **fields,
        )

    def fetch_transcript(self, video_id: str) -> TranscriptResult:
        """
        Fetch the transcript for a video ID.

        Two sequential requests: the watch page, then the selected
        track's payload. Nothing is retried or cached.
        """
        logger.info("Fetching transcript for video ID: %s", video_id)

        page_html = self.fetch_watch_page(video_id)
        metadata = self.extract_metadata(page_html, video_id)

        tracks = self.find_caption_tracks(page_html)
        track = self.select_caption_track(tracks)
        logger.info(
            "Selected caption track for %s: lang=%s kind=%s (%d available)",
            video_id, track.language_code, track.kind or "manual", len(tracks),
        )

        payload = self.fetch_timed_text(track)
        segments, skipped = parse_timed_text(payload)

        if skipped:
            logger.warning(
                "Skipped %d malformed timed-text element(s) for %s", skipped, video_id
            )
        result = TranscriptResult(
            video_id=video_id,
            segments=segments,
            language=track.language_code or self.preferred_language,
            metadata=metadata,
            skipped_segments=skipped,
        )
        logger.info(
            "Parsed %d transcript segments (%d words) for %s",
            len(segments), result.word_count, video_id,
        )
        return result

    def fetch_youtube_transcript(self, url: str) -> TranscriptResult:
        """
        Fetch transcript and metadata from a YouTube URL or bare video ID.

        Raises:
            InvalidReferenceError: the input holds no recognizable video ID
        """
        video_id = extract_video_id(url)
        if not video_id:
            raise InvalidReferenceError(f"Could not extract video ID from URL: {url!r}")
        return self.fetch_transcript(video_id)


# Global YouTube fetcher instance
youtube_fetcher = YouTubeFetcher()
