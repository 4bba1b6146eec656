"""
Shared utilities for transcript processing.
"""
import math
import re


def format_timestamp(seconds: float) -> str:
    """
    Convert a start offset in seconds to m:ss, or h:mm:ss from one hour up.

    The offset is floored to whole seconds; nothing is rounded up.
    """
    total_seconds = max(0, int(math.floor(seconds)))
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    secs = total_seconds % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def slugify(text: str, max_length: int = 80) -> str:
    """Filesystem-safe slug for download filenames."""
    slug = re.sub(r'[^a-z0-9\s_-]', '', text.lower())
    slug = re.sub(r'[\s_-]+', '-', slug).strip('-')
    return slug[:max_length].rstrip('-')
