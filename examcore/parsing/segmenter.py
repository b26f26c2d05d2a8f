"""Split raw exam text into per-question blocks."""

from __future__ import annotations

import logging
from typing import List

from .errors import EmptyDocumentError
from .patterns import QUESTION_MARKER_RE

logger = logging.getLogger(__name__)


def segment_document(text: str) -> List[str]:
    """Split extracted text at every "Question #N" marker.

    Each block starts at its marker and runs up to the next marker or the end
    of the text. Anything before the first marker (cover pages, headers) is
    dropped.

    Args:
        text: Raw text produced by the document-to-text extractor

    Returns:
        Ordered list of trimmed, non-empty blocks

    Raises:
        EmptyDocumentError: If no question marker is found
    """
    starts = [m.start() for m in QUESTION_MARKER_RE.finditer(text or "")]
    if not starts:
        raise EmptyDocumentError()

    if starts[0] > 0:
        logger.debug("Discarding %d chars of preamble", starts[0])

    ends = starts[1:] + [len(text)]
    blocks = [text[s:e].strip() for s, e in zip(starts, ends)]
    return [b for b in blocks if b]
