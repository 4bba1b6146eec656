"""
Parser for YouTube timed-text caption payloads.

A payload is a sequence of elements of the form

    <text start="12.34" dur="4.5">Hello &amp;amp; welcome</text>

Each element becomes one TranscriptSegment, in order of appearance.
Malformed elements are skipped individually; the rest of the payload
is still returned.
"""
import logging
import math
import re
from typing import List, Tuple

from core.exceptions import MalformedSegmentError
from models.transcript_models import TranscriptSegment

logger = logging.getLogger(__name__)

# Self-closing <text .../> elements have no body. A body never spans into the
# next <text> element, so an unclosed element cannot swallow its neighbour.
TEXT_ELEMENT_RE = re.compile(
    r'<text\b([^>]*?)(?:/>|>((?:(?!<text\b).)*?)</text>)', re.DOTALL
)
ATTRIBUTE_RE = re.compile(r'([\w:-]+)\s*=\s*"([^"]*)"')
INLINE_TAG_RE = re.compile(r'<[^>]+>')

# &amp; goes first: YouTube double-encodes, e.g. "&amp;#39;" for an apostrophe.
ENTITIES = [
    ('&amp;', '&'),
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&quot;', '"'),
    ('&#39;', "'"),
    ('&nbsp;', ' '),
]


def decode_entities(text: str) -> str:
    """Decode the HTML entities that appear in caption text."""
    for entity, replacement in ENTITIES:
        text = text.replace(entity, replacement)
    return text


def _parse_offset(value: str, name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise MalformedSegmentError(f"{name}={value!r} is not numeric")
    if math.isnan(number) or math.isinf(number) or number < 0:
        raise MalformedSegmentError(f"{name}={value!r} is out of range")
    return round(number, 3)


def parse_text_element(attributes: str, body: str) -> TranscriptSegment:
    """
    Parse one <text> element.

    Args:
        attributes: raw attribute string of the opening tag
        body: raw inner content

    Raises:
        MalformedSegmentError: start is missing or not numeric, dur is
            not numeric, or the decoded text is empty
    """
    attrs = dict(ATTRIBUTE_RE.findall(attributes))

    if "start" not in attrs:
        raise MalformedSegmentError("missing start attribute")
    start = _parse_offset(attrs["start"], "start")
    # Some payloads omit dur on the final cue
    duration = _parse_offset(attrs["dur"], "dur") if "dur" in attrs else 0.0

    text = decode_entities(INLINE_TAG_RE.sub('', body)).strip()
    if not text:
        raise MalformedSegmentError("empty text")

    return TranscriptSegment(start=start, duration=duration, text=text)


def parse_timed_text(payload: str) -> Tuple[List[TranscriptSegment], int]:
    """
    Parse a timed-text payload.

    Returns:
        (segments in payload order, number of elements skipped)
    """
    segments: List[TranscriptSegment] = []
    skipped = 0

    for match in TEXT_ELEMENT_RE.finditer(payload):
        try:
            segments.append(parse_text_element(match.group(1), match.group(2) or ""))
        except MalformedSegmentError as e:
            skipped += 1
            logger.debug("Skipping timed-text element at offset %d: %s", match.start(), e)

    return segments, skipped
