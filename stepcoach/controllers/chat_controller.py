"""Controllers for chat endpoints."""

from fastapi import APIRouter, Depends
from loguru import logger

from ..models.chat_request import ChatRequest
from ..models.chat_response import ChatResponse
from ..services.chat_service import ChatService, get_chat_service
from ..utils.error_handler import ChatError, ProviderFailure

router = APIRouter(prefix="", tags=["Chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat_endpoint(
    request: ChatRequest,
    service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Relay the conversation to the model and return its reply.

    Validation failures never reach this function; FastAPI rejects the
    body first and the error handler answers with 400.
    """
    try:
        response = await service.chat(request)
        logger.info("Answer generated successfully")
        return response
    except ChatError:
        raise
    except Exception as exc:
        logger.exception("Unhandled exception during chat processing")
        raise ProviderFailure("Internal server error") from exc
