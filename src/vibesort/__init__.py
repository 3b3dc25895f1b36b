"""Vibesort — sort sequences by asking an OpenAI-compatible chat model."""

from vibesort.client import AsyncVibesort, Vibesort
from vibesort.core.exceptions import (
    ApiError,
    EncodingError,
    InvalidResponseError,
    ParseError,
    TransportError,
    VibesortError,
)
from vibesort.models.endpoint import EndpointConfig

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "AsyncVibesort",
    "EncodingError",
    "EndpointConfig",
    "InvalidResponseError",
    "ParseError",
    "TransportError",
    "Vibesort",
    "VibesortError",
    "__version__",
]
