"""Service encapsulating interactions with the language model.

Uses LangChain's ChatOpenAI integration to send an ordered message
sequence to an OpenAI-compatible chat-completion endpoint and return
the single text completion.
"""

from __future__ import annotations

from typing import Any, Sequence

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI
from loguru import logger

from ..config.llm_config import LlmConfig, get_llm_config
from ..models.chat_message import ChatMessage
from ..models.enums import MessageRole
from ..utils.error_handler import ProviderFailure


class LLMService:
    """Thin wrapper over :class:`~langchain_openai.ChatOpenAI`.

    The client is built once from :class:`LlmConfig`.  Retries are
    disabled so a provider failure surfaces to the caller immediately.
    """

    def __init__(self, llm_config: LlmConfig | None = None, llm: Any = None) -> None:
        self.llm_config = llm_config or get_llm_config()

        llm_kwargs: dict[str, object] = {
            "api_key": self.llm_config.api_key,
            "model": self.llm_config.model,
            "temperature": self.llm_config.temperature,
            "max_retries": 0,
        }
        if self.llm_config.base_url:
            llm_kwargs["base_url"] = self.llm_config.base_url
        if self.llm_config.max_tokens:
            llm_kwargs["max_tokens"] = self.llm_config.max_tokens
        if self.llm_config.timeout:
            llm_kwargs["timeout"] = self.llm_config.timeout

        self.llm = llm if llm is not None else ChatOpenAI(**llm_kwargs)

    @staticmethod
    def to_langchain_messages(messages: Sequence[ChatMessage]) -> list[BaseMessage]:
        """Map chat messages onto LangChain message types, keeping order."""
        lc_messages: list[BaseMessage] = []
        for message in messages:
            if message.role == MessageRole.SYSTEM:
                lc_messages.append(SystemMessage(content=message.content))
            elif message.role == MessageRole.ASSISTANT:
                lc_messages.append(AIMessage(content=message.content))
            else:
                lc_messages.append(HumanMessage(content=message.content))
        return lc_messages

    async def generate(self, messages: Sequence[ChatMessage]) -> str:
        """Return the model's reply to ``messages``.

        Raises
        ------
        ProviderFailure
            If the call raises or the reply carries no text.
        """
        logger.debug(
            "Calling model {} with {} message(s) at temperature {}",
            self.llm_config.model,
            len(messages),
            self.llm_config.temperature,
        )
        try:
            reply = await self.llm.ainvoke(self.to_langchain_messages(messages))
        except Exception as exc:
            logger.exception("LLM generation failed")
            raise ProviderFailure() from exc

        content = getattr(reply, "content", None)
        if not isinstance(content, str) or not content.strip():
            logger.error("LLM returned no usable content: {!r}", content)
            raise ProviderFailure("The language model returned an empty response")

        logger.debug("Model replied with {} characters", len(content))
        return content
