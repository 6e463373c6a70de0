from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class LlmConfig(BaseSettings):
    """Configuration for the chat-completion provider.

    Only the API key is mandatory.  The model identifier and sampling
    temperature are fixed per deployment and sent with every request.
    """

    api_key: str = Field(..., alias="OPENAI_API_KEY")
    base_url: Optional[str] = Field(default=None, alias="OPENAI_BASE_URL")
    model: str = Field("gpt-4o-mini", alias="LLM_MODEL")
    temperature: float = Field(0.7, alias="LLM_TEMPERATURE")
    max_tokens: Optional[int] = Field(None, alias="LLM_MAX_TOKENS")
    timeout: Optional[float] = Field(None, alias="LLM_TIMEOUT")

    @field_validator("api_key")
    def validate_api_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("OPENAI_API_KEY must not be empty")
        return value

    @field_validator("temperature")
    def validate_temperature(cls, value: float) -> float:
        if not 0.0 <= value <= 2.0:
            raise ValueError("LLM_TEMPERATURE must be between 0.0 and 2.0")
        return value

    @field_validator("timeout")
    def validate_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("LLM_TIMEOUT must be positive")
        return value

    @field_validator("max_tokens")
    def validate_max_tokens(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError("LLM_MAX_TOKENS must be positive")
        return value

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)


@lru_cache()
def get_llm_config() -> LlmConfig:
    """Return a cached language model configuration."""

    return LlmConfig()
