"""Prompt for the sort round trip.

The system instruction is part of the protocol with the model: rewording it
changes what the model returns.
"""

from __future__ import annotations

from vibesort.models.chat import ChatMessage

SORT_SYSTEM_PROMPT = (
    "You are a helpful assistant that sorts arrays. Sort the following JSON array "
    "with ascending order and return ONLY the sorted JSON array, nothing else."
)


def build_sort_messages(json_array: str) -> list[ChatMessage]:
    """Return the system instruction followed by the serialized input array."""
    return [
        ChatMessage(role="system", content=SORT_SYSTEM_PROMPT),
        ChatMessage(role="user", content=json_array),
    ]
