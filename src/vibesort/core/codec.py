"""Structured-array codec — JSON text to and from typed Python lists.

Built on pydantic ``TypeAdapter`` so any element type pydantic understands
(scalars, ``str``, ``datetime``, enums, dataclasses, ``BaseModel`` subclasses,
...) can be sorted.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from typing import Any

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from vibesort.core.exceptions import EncodingError, ParseError


def resolve_item_type(items: Sequence[Any], item_type: Any = None) -> Any:
    """Pick the element type used to encode and decode *items*.

    An explicit *item_type* wins. Otherwise, when every element has the same
    exact type, that type is used; mixed or empty input falls back to ``Any``.
    """
    if item_type is not None:
        return item_type
    kinds = {type(item) for item in items}
    if len(kinds) == 1:
        return kinds.pop()
    return Any


@lru_cache(maxsize=128)
def _array_adapter(item_type: Any) -> TypeAdapter[list[Any]]:
    return TypeAdapter(list[item_type])  # type: ignore[valid-type]


def encode_array(items: Sequence[Any], item_type: Any = Any) -> str:
    """Serialize *items* as a compact JSON array.

    Raises:
        EncodingError: If the elements cannot be represented as JSON.
    """
    try:
        adapter = _array_adapter(item_type)
        return adapter.dump_json(list(items), warnings="error").decode()
    except (PydanticSchemaGenerationError, PydanticSerializationError) as e:
        raise EncodingError(f"JSON encoding failed: {e}") from e


def decode_array(text: str, item_type: Any = Any) -> list[Any]:
    """Strictly decode *text* as a JSON array of *item_type*.

    No repair is attempted: prose, code fences or a wrong shape all fail.

    Raises:
        ParseError: Carrying the validator diagnostic and *text* itself.
        EncodingError: If no validator can be built for *item_type*.
    """
    try:
        adapter = _array_adapter(item_type)
    except PydanticSchemaGenerationError as e:
        raise EncodingError(f"JSON decoding failed: {e}") from e
    try:
        return adapter.validate_json(text, strict=True)
    except ValidationError as e:
        raise ParseError(str(e), text) from e
