"""
Error taxonomy for transcript acquisition.

Every error carries the HTTP status and the message shown to the caller.
The underlying cause is kept for logging only.
"""


class TranscriptError(Exception):
    """Base class for expected, caller-recoverable transcript failures."""

    status_code = 500
    user_message = "Failed to fetch transcript"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.user_message)
        self.detail = detail


class MissingUrlError(TranscriptError):
    """The request did not include a URL."""

    status_code = 400
    user_message = "Missing required field: url"


class InvalidReferenceError(TranscriptError):
    """The input does not contain a recognizable video identifier."""

    status_code = 400
    user_message = "Invalid YouTube URL. Please provide a valid YouTube video URL."


class UpstreamPageUnavailableError(TranscriptError):
    """The watch page could not be retrieved (private, deleted, region-locked, network)."""

    user_message = "Video not found or is private/unavailable"


class NoCaptionsAvailableError(TranscriptError):
    """The watch page has no caption-track listing."""

    user_message = "This video does not have captions available"


class NoUsableCaptionTrackError(TranscriptError):
    """A caption-track listing exists but no entry can be used."""

    user_message = "No transcript available for this video"


class TranscriptFetchFailedError(TranscriptError):
    """The selected track's timed-text payload could not be retrieved."""

    user_message = "Failed to fetch the transcript for this video"


class MalformedSegmentError(TranscriptError):
    """A single timed-text element could not be parsed. Never surfaced to callers."""
