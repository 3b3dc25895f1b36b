"""Chat-completion wire models (OpenAI-compatible subset).

Only the fields the sort round trip needs are modelled. Response models
ignore anything else a provider sends back (``id``, ``usage``,
``finish_reason``, ...).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """A single role-tagged prompt message."""

    role: Literal["system", "user"] = Field(description="Message role")
    content: str = Field(description="Message text")


class ChatRequest(BaseModel):
    """Body of ``POST {base_url}/chat/completions``."""

    model: str = Field(description="Model identifier")
    messages: list[ChatMessage] = Field(description="System instruction followed by the user payload")
    temperature: float = Field(default=0.0, description="Sampling temperature")


class ChoiceMessage(BaseModel):
    content: str


class Choice(BaseModel):
    """One candidate completion."""

    message: ChoiceMessage


class ChatResponse(BaseModel):
    """Response envelope; only ``choices[0].message.content`` is consumed."""

    choices: list[Choice]
