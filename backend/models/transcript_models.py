"""
Data models for caption tracks and transcripts.
"""
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any

from services.processing.utils import format_timestamp


@dataclass
class CaptionTrack:
    """Caption track descriptor scraped from the watch page"""
    language_code: str
    base_url: Optional[str] = None
    kind: Optional[str] = None  # 'asr' for auto-generated, None for manual
    name: Optional[str] = None

    @property
    def is_auto_generated(self) -> bool:
        return self.kind == "asr"

    @classmethod
    def from_listing(cls, entry: Dict[str, Any]) -> "CaptionTrack":
        """Build a track from one entry of the page's captionTracks array."""
        name = entry.get("name")
        if isinstance(name, dict):
            name = name.get("simpleText") or "".join(
                run.get("text", "") for run in name.get("runs", [])
            ) or None
        return cls(
            language_code=entry.get("languageCode") or "",
            base_url=entry.get("baseUrl") or None,
            kind=entry.get("kind") or None,
            name=name,
        )


@dataclass
class TranscriptSegment:
    """Individual timed segment, offsets in seconds"""
    start: float
    duration: float
    text: str


@dataclass
class DisplaySegment:
    """Segment as served to clients"""
    timestamp: str
    text: str
    start: float

    def to_dict(self) -> Dict[str, Any]:
        return {"timestamp": self.timestamp, "text": self.text, "start": self.start}


@dataclass
class VideoMetadata:
    """Best-effort enrichment scraped from the watch page"""
    title: Optional[str] = None
    channel_name: Optional[str] = None
    duration: Optional[str] = None  # m:ss or h:mm:ss
    thumbnail: Optional[str] = None


@dataclass
class TranscriptResult:
    """Complete transcript for one video"""
    video_id: str
    segments: List[TranscriptSegment] = field(default_factory=list)
    language: str = "en"
    metadata: VideoMetadata = field(default_factory=VideoMetadata)
    skipped_segments: int = 0  # timed-text elements dropped while parsing

    @property
    def full_text(self) -> str:
        """Concatenated text from all segments"""
        return " ".join(seg.text for seg in self.segments)

    @property
    def word_count(self) -> int:
        return len(self.full_text.split())

    @property
    def display_segments(self) -> List[DisplaySegment]:
        return [
            DisplaySegment(
                timestamp=format_timestamp(seg.start),
                text=seg.text,
                start=seg.start,
            )
            for seg in self.segments
        ]
