"""Vibesort clients — sort a sequence by asking a chat-completion model.

Usage::

    # Async
    sorter = AsyncVibesort("sk-...", "gpt-4o-mini", "https://api.openai.com/v1")
    numbers = await sorter.sort([3, 1, 4, 1, 5, 9, 2, 6])

    # Sync (wraps the async client internally)
    sorter = Vibesort("sk-...", "gpt-4o-mini", "https://api.openai.com/v1")
    words = sorter.sort_text(["banana", "apple", "cherry"])

The model's reply is trusted once it decodes: the result is neither
re-sorted nor checked against the input.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine, Iterable, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import ValidationError

from vibesort.core.codec import decode_array, encode_array, resolve_item_type
from vibesort.core.exceptions import ApiError, EncodingError, InvalidResponseError, TransportError
from vibesort.core.prompts import build_sort_messages
from vibesort.models.chat import ChatRequest, ChatResponse
from vibesort.models.endpoint import EndpointConfig

if TYPE_CHECKING:
    from vibesort.config.settings import SortSettings

_T = TypeVar("_T")

logger = logging.getLogger(__name__)


def _diagnose_api_error(status_code: int, config: EndpointConfig) -> str:
    """Produce a human-readable hint for common API status errors."""
    if status_code == 401:
        return (
            f"Authentication failed (HTTP 401): API key is invalid or missing.\n"
            f"  → Endpoint: {config.base_url}"
        )
    if status_code == 403:
        return (
            f"Permission denied (HTTP 403): API key is not allowed to use this model.\n"
            f"  → Endpoint: {config.chat_completions_url}\n"
            f"  → Model: {config.model}"
        )
    if status_code == 404:
        return (
            f"Not found (HTTP 404): The model or endpoint does not exist.\n"
            f"  → Endpoint: {config.chat_completions_url}\n"
            f"  → Model: {config.model}"
        )
    if status_code == 429:
        return f"Rate limited (HTTP 429): Too many requests.\n  → Endpoint: {config.base_url}"
    return f"API error (HTTP {status_code})\n  → Endpoint: {config.chat_completions_url}\n  → Model: {config.model}"


# ═══════════════════════════════════════════════════════════════════════════════
# Async client
# ═══════════════════════════════════════════════════════════════════════════════


class AsyncVibesort:
    """Async client that sorts sequences through an OpenAI-compatible endpoint.

    The client holds only immutable endpoint configuration. Each call opens
    its own ``httpx.AsyncClient`` for a single POST, so concurrent calls on
    one instance are independent.

    Args:
        api_key: Bearer credential for the endpoint.
        model: Model identifier, e.g. ``"gpt-4o-mini"``.
        base_url: API root, e.g. ``"https://api.openai.com/v1"``. Used verbatim.
        timeout: Request timeout in seconds; ``None`` disables it.
        **httpx_kwargs: Additional keyword arguments passed to ``httpx.AsyncClient``.

    Example::

        sorter = AsyncVibesort("sk-...", "gpt-4o-mini", "https://api.openai.com/v1")
        try:
            result = await sorter.sort([3, 1, 2])
        except ParseError as e:
            print("model ignored the instruction:", e.content)
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        *,
        timeout: float | None = None,
        **httpx_kwargs: Any,
    ) -> None:
        self._config = EndpointConfig(api_key=api_key, model=model, base_url=base_url)
        self._timeout = timeout
        self._httpx_kwargs = httpx_kwargs
        logger.debug(
            "Vibesort client created: base_url=%s, model=%s, api_key=%s",
            base_url,
            model,
            self._config.masked_api_key,
        )

    @classmethod
    def from_settings(cls, settings: SortSettings, **httpx_kwargs: Any) -> AsyncVibesort:
        """Build a client from the ``ai`` section of :class:`~vibesort.config.settings.Settings`."""
        return cls(
            settings.api_key,
            settings.model,
            settings.base_url,
            timeout=settings.timeout,
            **httpx_kwargs,
        )

    @property
    def config(self) -> EndpointConfig:
        return self._config

    @property
    def api_key(self) -> str:
        return self._config.api_key

    @property
    def model(self) -> str:
        return self._config.model

    @property
    def base_url(self) -> str:
        return self._config.base_url

    async def sort(self, items: Sequence[_T], *, item_type: Any = None) -> list[_T]:
        """Sort *items* by asking the model, returning exactly what it sends back.

        Args:
            items: Elements to sort. Each must be JSON-serializable.
            item_type: Element type used to encode the input and validate the
                reply. Inferred from *items* when omitted (see
                :func:`~vibesort.core.codec.resolve_item_type`).

        Returns:
            The model's array decoded as a list of *item_type*.

        Raises:
            EncodingError: Input could not be encoded, or the response
                envelope was not a valid chat completion.
            TransportError: The endpoint could not be reached.
            ApiError: The endpoint returned a non-success status.
            InvalidResponseError: The response had no choices.
            ParseError: The reply was not a JSON array of *item_type*.
        """
        resolved_type = resolve_item_type(items, item_type)
        json_array = encode_array(items, resolved_type)

        request = ChatRequest(
            model=self._config.model,
            messages=build_sort_messages(json_array),
            temperature=0.0,
        )
        url = self._config.chat_completions_url
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }

        logger.info(
            "Vibesort request: url=%s, model=%s, items=%d, payload_len=%d",
            url,
            self._config.model,
            len(items),
            len(json_array),
        )
        logger.debug("Vibesort payload: %s", json_array[:500])

        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self._timeout), **self._httpx_kwargs) as client:
                resp = await client.post(url, json=request.model_dump(mode="json"), headers=headers)
        except (httpx.RequestError, UnicodeEncodeError) as e:
            logger.error(
                "Vibesort request FAILED: url=%s, model=%s, error_type=%s, error=%s",
                url,
                self._config.model,
                type(e).__name__,
                e,
            )
            raise TransportError(f"HTTP request failed: {e}") from e

        if not resp.is_success:
            body = _read_body(resp)
            logger.error("LLM API error:\n%s", _diagnose_api_error(resp.status_code, self._config))
            raise ApiError(resp.status_code, body)

        try:
            chat_response = ChatResponse.model_validate_json(resp.content)
        except ValidationError as e:
            logger.error("Vibesort response is not a chat completion: status=%d", resp.status_code)
            raise EncodingError(f"JSON parsing failed: {e}") from e

        if not chat_response.choices:
            raise InvalidResponseError()

        content = chat_response.choices[0].message.content.strip()
        logger.info("Vibesort response OK: choices=%d, content_len=%d", len(chat_response.choices), len(content))

        sorted_items = decode_array(content, resolved_type)
        logger.debug("Vibesort result: %d items", len(sorted_items))
        return sorted_items

    async def sort_text(self, items: Iterable[str]) -> list[str]:
        """Sort strings. Each element is copied with ``str()`` and passed to :meth:`sort`."""
        return await self.sort([str(s) for s in items], item_type=str)


def _read_body(resp: httpx.Response) -> str:
    """Return the response text, or ``""`` when it cannot be decoded."""
    try:
        return resp.text
    except (UnicodeDecodeError, LookupError) as e:
        logger.warning("Could not read error response body: %s", e)
        return ""


# ═══════════════════════════════════════════════════════════════════════════════
# Sync client (wraps AsyncVibesort)
# ═══════════════════════════════════════════════════════════════════════════════


class Vibesort:
    """Synchronous sort client.

    Wraps :class:`AsyncVibesort` using ``asyncio.run``.

    Args:
        api_key: Bearer credential for the endpoint.
        model: Model identifier.
        base_url: API root, used verbatim.
        timeout: Request timeout in seconds; ``None`` disables it.
        **httpx_kwargs: Additional keyword arguments passed to ``httpx.AsyncClient``.

    Example::

        sorter = Vibesort("sk-...", "gpt-4o-mini", "https://api.openai.com/v1")
        print(sorter.sort([3, 1, 4, 1, 5, 9, 2, 6]))
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        *,
        timeout: float | None = None,
        **httpx_kwargs: Any,
    ) -> None:
        self._async = AsyncVibesort(api_key, model, base_url, timeout=timeout, **httpx_kwargs)

    @classmethod
    def from_settings(cls, settings: SortSettings, **httpx_kwargs: Any) -> Vibesort:
        return cls(
            settings.api_key,
            settings.model,
            settings.base_url,
            timeout=settings.timeout,
            **httpx_kwargs,
        )

    @property
    def config(self) -> EndpointConfig:
        return self._async.config

    @property
    def api_key(self) -> str:
        return self._async.api_key

    @property
    def model(self) -> str:
        return self._async.model

    @property
    def base_url(self) -> str:
        return self._async.base_url

    def _run(self, coro: Coroutine[Any, Any, _T]) -> _T:
        """Run an async coroutine synchronously."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop and loop.is_running():
            # Already inside an event loop (e.g. Jupyter), run on a worker thread
            import concurrent.futures

            with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
                return pool.submit(asyncio.run, coro).result()
        return asyncio.run(coro)

    def sort(self, items: Sequence[_T], *, item_type: Any = None) -> list[_T]:
        """Sort *items* (blocking). See :meth:`AsyncVibesort.sort`."""
        return self._run(self._async.sort(items, item_type=item_type))

    def sort_text(self, items: Iterable[str]) -> list[str]:
        """Sort strings (blocking). See :meth:`AsyncVibesort.sort_text`."""
        return self._run(self._async.sort_text(items))
