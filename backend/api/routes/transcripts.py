"""
Transcript API routes.
"""
import logging

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from api.models.requests import (
    TranscriptExportRequest,
    TranscriptRequest,
    TranscriptSearchRequest,
)
from api.models.responses import (
    DisplaySegmentOut,
    ErrorResponse,
    SearchData,
    SearchMatchOut,
    TranscriptData,
    TranscriptResponse,
    TranscriptSearchResponse,
)
from core.exceptions import MissingUrlError, TranscriptError
from models.transcript_models import DisplaySegment
from services.ingestion.youtube_fetcher import youtube_fetcher
from services.processing.exporter import (
    EXPORT_FORMATS,
    HighlightedSegment,
    TranscriptDocument,
    export_filename,
    export_transcript,
)
from services.processing.transcript_search import next_match_index, search_transcript

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/fetch-transcript",
    response_model=TranscriptResponse,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def fetch_transcript(request: TranscriptRequest):
    """
    Fetch the transcript and basic metadata for a YouTube video.

    Blocking network calls, so this runs in FastAPI's threadpool.
    """
    try:
        if not request.url:
            raise MissingUrlError()
        result = youtube_fetcher.fetch_youtube_transcript(request.url)
    except TranscriptError as e:
        logger.warning("Transcript request failed (%s): %s", type(e).__name__, e)
        return error_response(e.status_code, e.user_message)
    except Exception:
        logger.exception("Unexpected error fetching transcript for %r", request.url)
        return error_response(500, TranscriptError.user_message)

    metadata = result.metadata
    return TranscriptResponse(
        data=TranscriptData(
            videoId=result.video_id,
            transcript=[
                DisplaySegmentOut(**segment.to_dict())
                for segment in result.display_segments
            ],
            language=result.language,
            title=metadata.title,
            duration=metadata.duration,
            channelName=metadata.channel_name,
            thumbnail=metadata.thumbnail,
        )
    )


@router.options("/fetch-transcript", include_in_schema=False)
async def fetch_transcript_options():
    """Bare OPTIONS requests (CORS preflights are answered by the middleware)."""
    return Response(status_code=200)


@router.api_route(
    "/fetch-transcript",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def fetch_transcript_method_not_allowed():
    return error_response(405, "Method not allowed. Use POST.")


@router.post("/transcripts/search", response_model=TranscriptSearchResponse)
async def search(request: TranscriptSearchRequest):
    """
    Case-insensitive search within a transcript.

    With no `current`, the first hit is active; otherwise the active hit
    steps from `current` in `direction`, wrapping at either end.
    """
    segments = [
        DisplaySegment(timestamp=s.timestamp, text=s.text, start=s.start)
        for s in request.transcript
    ]
    matches = search_transcript(segments, request.query)

    current_match = None
    if matches:
        if request.current is None:
            current_match = 0
        else:
            current_match = next_match_index(request.current, len(matches), request.direction)

    return TranscriptSearchResponse(
        data=SearchData(
            query=request.query,
            totalMatches=len(matches),
            matches=[SearchMatchOut(**match.to_dict()) for match in matches],
            currentMatch=current_match,
        )
    )


@router.post(
    "/transcripts/export",
    response_class=Response,
    responses={200: {"content": {media: {} for media in EXPORT_FORMATS.values()}}},
)
async def export(request: TranscriptExportRequest):
    """Download a transcript as plain text or Markdown."""
    doc = TranscriptDocument(
        video_id=request.videoId,
        title=request.title,
        channel_name=request.channelName,
        duration=request.duration,
        transcript=[
            DisplaySegment(timestamp=s.timestamp, text=s.text, start=s.start)
            for s in request.transcript
        ],
        highlights=[
            HighlightedSegment(segment_index=h.segmentIndex, reason=h.reason, type=h.type)
            for h in request.highlights
        ],
    )

    content = export_transcript(doc, request.format)
    filename = export_filename(doc, request.format)
    logger.info("Exported %d segments for %s as %s", len(doc.transcript), doc.video_id, request.format)

    return Response(
        content=content,
        media_type=EXPORT_FORMATS[request.format],
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
