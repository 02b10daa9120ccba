"""Summaries API endpoint.

Routes:
- GET /summaries - Purpose and status summary of the two documents

Dependencies: docs_chat.application.services.summary_service
System role: Summaries HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from docs_chat.api.deps import get_summary_service
from docs_chat.application.services.summary_service import SummaryService
from docs_chat.models.common import ErrorResponse
from docs_chat.models.summary import SummaryResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/summaries", tags=["summaries"])


@router.get(
    "",
    response_model=SummaryResponse,
    responses={500: {"model": ErrorResponse}},
)
async def summaries(
    summary_service: SummaryService = Depends(get_summary_service),
):
    """Summarize what the files are for and the progress they imply."""
    try:
        return await summary_service.summarize()
    except Exception as e:
        logger.exception(f"{__name__}:summaries - Summary generation failed: {type(e).__name__}: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Summary generation failed", detail=str(e)).model_dump(),
        )
