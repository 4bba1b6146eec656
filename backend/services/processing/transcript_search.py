"""
Case-insensitive search over a displayed transcript.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from core.config import SEARCH_CONTEXT_CHARS
from models.transcript_models import DisplaySegment


@dataclass
class SearchMatch:
    """One segment containing the query"""
    index: int  # position in the transcript
    segment: DisplaySegment
    match_text: str  # hit plus surrounding context

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "timestamp": self.segment.timestamp,
            "start": self.segment.start,
            "text": self.segment.text,
            "matchText": self.match_text,
        }


def search_transcript(
    segments: Sequence[DisplaySegment],
    query: str,
    context_chars: int = SEARCH_CONTEXT_CHARS,
) -> List[SearchMatch]:
    """
    Find segments whose text contains the query, ignoring case.

    Only the first occurrence within a segment is used for match_text.
    A blank query matches nothing.
    """
    if not query or not query.strip():
        return []

    needle = query.lower()
    matches = []
    for index, segment in enumerate(segments):
        position = segment.text.lower().find(needle)
        if position < 0:
            continue
        start = max(0, position - context_chars)
        end = min(len(segment.text), position + len(query) + context_chars)
        matches.append(SearchMatch(index=index, segment=segment, match_text=segment.text[start:end]))

    return matches


def next_match_index(current: int, total: int, direction: str = "next") -> int:
    """Step through matches with wrap-around in either direction."""
    if total <= 0:
        return 0
    if direction == "next":
        return (current + 1) % total
    if direction == "prev":
        return (min(current, total) - 1) % total
    raise ValueError(f"direction must be 'next' or 'prev', got {direction!r}")
