"""
Plain-text and Markdown export of a fetched transcript.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from core.config import YOUTUBE_WATCH_URL
from models.transcript_models import DisplaySegment
from services.processing.utils import slugify

EXPORT_FORMATS = {
    "txt": "text/plain",
    "md": "text/markdown",
}


@dataclass
class HighlightedSegment:
    """Transcript segment the user marked"""
    segment_index: int
    reason: str = ""
    type: str = "important"  # 'important' | 'key_moment'


@dataclass
class TranscriptDocument:
    """Everything that goes into an export"""
    video_id: str
    transcript: List[DisplaySegment]
    title: Optional[str] = None
    channel_name: Optional[str] = None
    duration: Optional[str] = None
    highlights: List[HighlightedSegment] = field(default_factory=list)

    @property
    def display_title(self) -> str:
        return self.title or f"YouTube video {self.video_id}"

    @property
    def watch_url(self) -> str:
        return YOUTUBE_WATCH_URL.format(video_id=self.video_id)

    def highlighted(self) -> List[tuple]:
        """(highlight, segment) pairs; highlights pointing outside the transcript are dropped."""
        return [
            (h, self.transcript[h.segment_index])
            for h in self.highlights
            if 0 <= h.segment_index < len(self.transcript)
        ]


def _to_txt(doc: TranscriptDocument) -> str:
    title = doc.display_title
    lines = [title, "=" * len(title), ""]
    if doc.channel_name:
        lines.append(f"Channel: {doc.channel_name}")
    if doc.duration:
        lines.append(f"Duration: {doc.duration}")
    lines.append(f"Video: {doc.watch_url}")
    lines.append("")

    highlighted = doc.highlighted()
    if highlighted:
        lines += ["HIGHLIGHTED SEGMENTS", "-" * len("HIGHLIGHTED SEGMENTS")]
        for highlight, segment in highlighted:
            lines.append(f"[{segment.timestamp}] {segment.text}")
            if highlight.reason:
                lines.append(f"Reason: {highlight.reason}")
            lines.append("")

    lines += ["FULL TRANSCRIPT", "-" * len("FULL TRANSCRIPT")]
    for segment in doc.transcript:
        lines.append(f"[{segment.timestamp}] {segment.text}")
        lines.append("")

    return "\n".join(lines)


def _to_markdown(doc: TranscriptDocument) -> str:
    lines = [f"# {doc.display_title}", ""]
    if doc.channel_name:
        lines.append(f"**Channel:** {doc.channel_name}  ")
    if doc.duration:
        lines.append(f"**Duration:** {doc.duration}  ")
    lines.append(f"**Video:** {doc.watch_url}")
    lines.append("")

    highlighted = doc.highlighted()
    if highlighted:
        lines += ["## Highlighted Segments", ""]
        for highlight, segment in highlighted:
            entry = f"- **[{segment.timestamp}]** {segment.text}"
            if highlight.reason:
                entry += f" _({highlight.reason})_"
            lines.append(entry)
        lines.append("")

    lines += ["## Full Transcript", ""]
    for segment in doc.transcript:
        lines.append(f"**[{segment.timestamp}]** {segment.text}")
        lines.append("")

    return "\n".join(lines)


def export_transcript(doc: TranscriptDocument, fmt: str) -> str:
    """Render a transcript document as 'txt' or 'md'."""
    if fmt == "txt":
        return _to_txt(doc)
    if fmt == "md":
        return _to_markdown(doc)
    raise ValueError(f"Unsupported export format: {fmt!r}")


def export_filename(doc: TranscriptDocument, fmt: str) -> str:
    base = slugify(doc.title or "") or doc.video_id
    return f"{base}-transcript.{fmt}"
