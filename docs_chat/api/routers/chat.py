"""Chat API endpoint.

Routes:
- POST /chat - Answer a question using retrieved document context

Dependencies: docs_chat.application.services.chat_service
System role: Query HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from docs_chat.api.deps import get_chat_service
from docs_chat.application.services.chat_service import ChatService
from docs_chat.core.exceptions import ValidationError
from docs_chat.models.chat import ChatRequest, ChatResponse
from docs_chat.models.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post(
    "",
    response_model=ChatResponse,
    responses={500: {"model": ErrorResponse}},
)
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
):
    """Answer a question about the sales data and project document.

    Args:
        request: ChatRequest with prompt and optional extra context
        chat_service: Injected ChatService

    Returns:
        ChatResponse: Model answer

    Raises:
        HTTPException(400): Prompt missing or blank
    """
    try:
        answer = await chat_service.answer(request.prompt, request.context)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except Exception as e:
        logger.exception(f"{__name__}:chat - Bedrock call failed: {type(e).__name__}: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Bedrock call failed", detail=str(e)).model_dump(),
        )

    return ChatResponse(answer=answer)
