"""Request model for the chat API."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from ..utils.error_handler import InvalidRequest
from .chat_message import ChatMessage
from .enums import AvatarState


class ChatRequest(BaseModel):
    """Represents a request payload for the chat endpoint.

    ``messages`` carries the conversation so far and may be empty.  The
    progress fields are optional; when both ``stepCount`` and ``goal``
    are supplied the system prompt describes the user's progress.
    An optional field may be omitted but not sent as ``null``.
    Integers are validated strictly so ``true`` or ``"5000"`` are
    rejected rather than coerced; a whole float such as ``5000.0`` is
    accepted as the integer it represents.
    """

    messages: List[ChatMessage] = Field(
        ...,
        description="Conversation history in chronological order.",
    )
    step_count: Optional[StrictInt] = Field(
        default=None,
        ge=0,
        alias="stepCount",
        description="Steps taken so far today.",
    )
    goal: Optional[StrictInt] = Field(
        default=None,
        ge=1,
        description="Daily step goal.",
    )
    avatar_state: Optional[AvatarState] = Field(
        default=None,
        alias="avatarState",
        description="Current tier of the user's avatar.",
    )

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("step_count", "goal", "avatar_state", mode="before")
    def reject_null(cls, value: Any) -> Any:
        # Defaults are not validated, so this only sees values that were sent
        if value is None:
            raise ValueError("Field may be omitted but must not be null")
        return value

    @field_validator("step_count", "goal", mode="before")
    def accept_whole_floats(cls, value: Any) -> Any:
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


def parse_chat_request(payload: Any) -> ChatRequest:
    """Validate a decoded JSON value into a :class:`ChatRequest`.

    Raises
    ------
    InvalidRequest
        Listing every violation found in ``payload``.
    """
    try:
        return ChatRequest.model_validate(payload)
    except ValidationError as exc:
        raise InvalidRequest.from_errors(exc.errors()) from exc
