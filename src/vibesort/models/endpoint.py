"""Endpoint configuration — where and as whom a sort request is sent."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EndpointConfig(BaseModel):
    """Credential, model identifier and base URL of a chat-completion endpoint.

    Values are stored exactly as supplied. Empty strings are accepted; a bad
    value only surfaces when a request actually uses it.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(description="Bearer credential sent in the Authorization header")
    model: str = Field(description="Model identifier, e.g. 'gpt-4o-mini'")
    base_url: str = Field(description="API root; '/chat/completions' is appended verbatim")

    @property
    def chat_completions_url(self) -> str:
        return f"{self.base_url}/chat/completions"

    @property
    def masked_api_key(self) -> str:
        if len(self.api_key) > 12:
            return self.api_key[:8] + "..." + self.api_key[-4:]
        return "***"
