"""
Cheap keyword gate deciding whether a document goes through order extraction.

Runs before the extractors on the raw document lines. No model call, no
layout analysis: the lower-cased document text just has to mention one of
the order cues.
"""

import logging
from collections.abc import Sequence

from order_intake.order_extractor.keywords import ORDER_DOCUMENT_KEYWORDS

logger = logging.getLogger("intake.classifier")


def matched_keywords(
    lines: Sequence[str], keywords: Sequence[str] = ORDER_DOCUMENT_KEYWORDS
) -> list[str]:
    """Keywords found in the document, in table order."""
    content = " ".join(line or "" for line in lines).lower()
    return [kw for kw in keywords if kw.lower() in content]


def should_handle(
    lines: Sequence[str], keywords: Sequence[str] = ORDER_DOCUMENT_KEYWORDS
) -> bool:
    """True if the document looks like a transport order."""
    hits = matched_keywords(lines, keywords)
    if not hits:
        logger.debug("No order keywords in %d lines", len(lines))
    return bool(hits)
