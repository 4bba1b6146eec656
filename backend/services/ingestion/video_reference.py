"""
YouTube video ID extraction from the URL shapes users paste.
"""
import re
from typing import Optional

VIDEO_ID_RE = re.compile(r'[a-zA-Z0-9_-]{11}')

# Tried in order; the first match wins.
URL_PATTERNS = [
    # https://www.youtube.com/watch?v=VIDEO_ID (v anywhere in the query)
    re.compile(r'(?:https?://)?(?:www\.)?youtube\.com/watch\?(?:.*&)?v=([a-zA-Z0-9_-]{11})'),
    # https://youtu.be/VIDEO_ID
    re.compile(r'(?:https?://)?youtu\.be/([a-zA-Z0-9_-]{11})'),
    # https://www.youtube.com/embed/VIDEO_ID
    re.compile(r'(?:https?://)?(?:www\.)?youtube\.com/embed/([a-zA-Z0-9_-]{11})'),
    # https://www.youtube.com/shorts/VIDEO_ID
    re.compile(r'(?:https?://)?(?:www\.)?youtube\.com/shorts/([a-zA-Z0-9_-]{11})'),
    # https://m.youtube.com/watch?v=VIDEO_ID
    re.compile(r'(?:https?://)?m\.youtube\.com/watch\?(?:.*&)?v=([a-zA-Z0-9_-]{11})'),
    # https://gaming.youtube.com/watch?v=VIDEO_ID
    re.compile(r'(?:https?://)?gaming\.youtube\.com/watch\?(?:.*&)?v=([a-zA-Z0-9_-]{11})'),
    # https://music.youtube.com/watch?v=VIDEO_ID
    re.compile(r'(?:https?://)?music\.youtube\.com/watch\?(?:.*&)?v=([a-zA-Z0-9_-]{11})'),
    # Bare video ID
    re.compile(r'^([a-zA-Z0-9_-]{11})$'),
]


def is_valid_video_id(value: Optional[str]) -> bool:
    """True for exactly 11 characters from [A-Za-z0-9_-]."""
    return isinstance(value, str) and bool(VIDEO_ID_RE.fullmatch(value))


def extract_video_id(url: Optional[str]) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL or bare ID.

    Returns None when the input is not a recognizable YouTube reference.
    Never raises.
    """
    if not url or not isinstance(url, str):
        return None

    clean_url = url.strip()

    for pattern in URL_PATTERNS:
        match = pattern.search(clean_url)
        if match and is_valid_video_id(match.group(1)):
            return match.group(1)

    return None
