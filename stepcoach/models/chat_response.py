"""Response model for the chat API."""

from typing import Literal

from pydantic import BaseModel, Field


class ChatResponse(BaseModel):
    """The assistant's reply relayed back to the client."""

    message: str = Field(..., description="Text generated by the model.")
    role: Literal["assistant"] = "assistant"
