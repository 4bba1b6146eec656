"""
Pydantic request models for API endpoints.

Field names follow the camelCase wire format used by the web client.
"""
from pydantic import BaseModel, Field
from typing import List, Literal, Optional


class TranscriptRequest(BaseModel):
    """Request model for transcript fetching."""
    url: Optional[str] = Field(default=None, description="YouTube URL or bare video ID")


class DisplaySegmentIn(BaseModel):
    """Transcript segment as previously returned by fetch-transcript."""
    timestamp: str
    text: str
    start: float = Field(ge=0)


class TranscriptSearchRequest(BaseModel):
    """Request model for transcript search."""
    transcript: List[DisplaySegmentIn] = Field(..., description="Transcript to search")
    query: str = Field(..., description="Case-insensitive search text")
    current: Optional[int] = Field(default=None, ge=0, description="Index of the active match, if any")
    direction: Literal["next", "prev"] = Field(default="next", description="Step from the active match")


class HighlightIn(BaseModel):
    """Segment marked by the user."""
    segmentIndex: int = Field(..., ge=0)
    type: Literal["important", "key_moment"] = "important"
    reason: str = ""


class TranscriptExportRequest(BaseModel):
    """Request model for transcript export."""
    format: Literal["txt", "md"] = Field(default="txt", description="Export format")
    videoId: str = Field(..., pattern=r"^[a-zA-Z0-9_-]{11}$", description="11-character video ID")
    title: Optional[str] = None
    channelName: Optional[str] = None
    duration: Optional[str] = None
    transcript: List[DisplaySegmentIn] = Field(..., description="Transcript to export")
    highlights: List[HighlightIn] = Field(default_factory=list)
