"""
Order endpoints: classification gate and line-to-order extraction.

Flow for /extract:
1. Check the lines pass the classification gate (unless forced)
2. Assemble the order from the lines
3. Hand it to the submission sink and return the sink output
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from order_intake.dependencies import get_order_assembler
from order_intake.order_extractor.classifier import matched_keywords
from order_intake.order_extractor.pipeline import OrderAssembler
from order_intake.schemas.order import (
    OrderClassificationResponse,
    OrderExtractionRequest,
    OrderLinesRequest,
    OrderSubmission,
)
from order_intake.services.order_sink import OrderSubmissionError

logger = logging.getLogger("intake.api.orders")

router = APIRouter()


@router.post("/classify", response_model=OrderClassificationResponse)
async def classify_lines(
    request: OrderLinesRequest,
    assembler: OrderAssembler = Depends(get_order_assembler),
) -> OrderClassificationResponse:
    """Report whether the lines look like a transport order."""
    hits = matched_keywords(request.lines, assembler.keywords.order_document)
    return OrderClassificationResponse(handled=bool(hits), matched_keywords=hits)


@router.post("/extract", response_model=OrderSubmission)
async def extract_order(
    request: OrderExtractionRequest,
    assembler: OrderAssembler = Depends(get_order_assembler),
) -> OrderSubmission:
    """Extract an order from document lines and submit it."""
    if not request.force and not matched_keywords(
        request.lines, assembler.keywords.order_document
    ):
        raise HTTPException(status_code=422, detail="Document format not recognized")

    try:
        return assembler.run(request.lines, request.attachment_filename)
    except OrderSubmissionError as e:
        logger.error("Order submission failed: %s", e)
        raise HTTPException(status_code=502, detail=str(e)) from e
