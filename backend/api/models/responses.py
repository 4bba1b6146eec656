"""
Pydantic response models for API endpoints.
"""
from pydantic import BaseModel, Field
from typing import List, Optional


class DisplaySegmentOut(BaseModel):
    """Transcript segment with a human-readable timestamp."""
    timestamp: str
    text: str
    start: float


class TranscriptData(BaseModel):
    """Transcript and optional video metadata."""
    videoId: str
    transcript: List[DisplaySegmentOut]
    language: str
    title: Optional[str] = None
    duration: Optional[str] = None
    channelName: Optional[str] = None
    thumbnail: Optional[str] = None


class TranscriptResponse(BaseModel):
    """Successful transcript fetch."""
    success: bool = True
    data: TranscriptData


class ErrorResponse(BaseModel):
    """Failure envelope shared by all endpoints."""
    success: bool = False
    error: str = Field(..., description="Human-readable message")


class SearchMatchOut(BaseModel):
    """One matching segment."""
    index: int
    timestamp: str
    start: float
    text: str
    matchText: str


class SearchData(BaseModel):
    query: str
    totalMatches: int
    matches: List[SearchMatchOut] = []
    currentMatch: Optional[int] = Field(default=None, description="Position in matches of the active hit")


class TranscriptSearchResponse(BaseModel):
    """Transcript search results."""
    success: bool = True
    data: SearchData
