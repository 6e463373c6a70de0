"""Orchestration of a single chat exchange.

The ChatService turns a validated request into the message sequence
sent to the model: it composes the progress-aware system prompt,
prepends it to the client's conversation and relays the reply.
"""

from __future__ import annotations

from functools import lru_cache

from loguru import logger

from ..models.chat_message import ChatMessage
from ..models.chat_request import ChatRequest
from ..models.chat_response import ChatResponse
from ..models.enums import MessageRole
from .llm_service import LLMService
from .prompt_service import compose_system_prompt


class ChatService:
    """Coordinates prompt composition and LLM generation.

    Holds no per-request state, so one instance serves every request.
    """

    def __init__(self, llm_service: LLMService | None = None) -> None:
        self.llm_service = llm_service or LLMService()

    def build_messages(self, chat_request: ChatRequest) -> list[ChatMessage]:
        """Return the system prompt followed by the client's messages."""
        system_prompt = compose_system_prompt(
            chat_request.step_count,
            chat_request.goal,
            chat_request.avatar_state,
        )
        return [ChatMessage(role=MessageRole.SYSTEM, content=system_prompt), *chat_request.messages]

    async def chat(self, chat_request: ChatRequest) -> ChatResponse:
        """Generate the assistant's reply to ``chat_request``.

        Raises
        ------
        ProviderFailure
            If the model call fails; nothing is retried.
        """
        logger.info(
            "Processing chat with {} message(s), progress={}",
            len(chat_request.messages),
            chat_request.step_count is not None and chat_request.goal is not None,
        )
        messages = self.build_messages(chat_request)
        answer = await self.llm_service.generate(messages)
        return ChatResponse(message=answer)


@lru_cache()
def get_chat_service() -> ChatService:
    """Dependency injector for ChatService instances.

    FastAPI will call this function to obtain a singleton
    ChatService.  The lru_cache decorator ensures only one
    instance exists.
    """
    return ChatService()
