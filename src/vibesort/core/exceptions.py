"""Sort client exceptions.

Every failure of a sort round trip is raised as a subclass of
:class:`VibesortError`. There is no partial success: a call either returns
the fully decoded list or raises one of these.
"""

from __future__ import annotations


class VibesortError(Exception):
    """Base exception for sort client errors."""


class TransportError(VibesortError):
    """Raised when the endpoint cannot be reached (connect, DNS, TLS, timeout).

    The underlying ``httpx`` error is available as ``__cause__``.
    """


class EncodingError(VibesortError):
    """Raised when JSON encoding of the input or decoding of the response envelope fails."""


class ApiError(VibesortError):
    """Raised when the endpoint answers with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"LLM API returned status {status_code}\nServer response: {body}")


class InvalidResponseError(VibesortError):
    """Raised when a successful response carries no candidate completion."""

    def __init__(self, message: str = "Invalid response format from LLM: no choices returned") -> None:
        super().__init__(message)


class ParseError(VibesortError):
    """Raised when the model's reply is not a JSON array of the expected element type.

    Both the decoder diagnostic (``detail``) and the full reply text
    (``content``) are kept, so callers can tell prose apart from
    wrong-shaped JSON.
    """

    def __init__(self, detail: str, content: str) -> None:
        self.detail = detail
        self.content = content
        super().__init__(
            f"Failed to parse LLM response as sorted array: {detail}\nLLM returned: {content}"
        )
