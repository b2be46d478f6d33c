"""JSON Codec — decodes response bodies into declared shapes, encodes models back.

Invariants:
    - Null/absent collection fields arrive as [] / {} (TwitterModel normalization)
    - Malformed JSON, or JSON that does not fit the declared shape -> DecodeError
      (never swallowed, never retried)
    - response_type None -> body ignored, None returned
    - Stateless after construction: safe for concurrent decode/encode

Design Decisions:
    - pydantic TypeAdapter per response type, cached process-wide (lru_cache):
      adapters are immutable, so sharing them across clients and threads is safe
"""

import logging
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from twitter_core.core.errors import DecodeError, ErrorContext

logger = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def type_adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def _describe(response_type: Any) -> str:
    return getattr(response_type, "__name__", None) or repr(response_type)


class JsonCodec:
    """Resilient JSON <-> typed payload conversion."""

    def decode(
        self, content: bytes | str, response_type: Any,
        context: ErrorContext | None = None,
    ) -> Any:
        if response_type is None:
            return None
        if not content or not content.strip():
            raise DecodeError(
                f"empty body for {_describe(response_type)}", response_type, context,
            )
        try:
            return type_adapter(response_type).validate_json(content)
        except ValidationError as e:
            logger.warning(
                f"Decode failed for {_describe(response_type)}: {e.error_count()} error(s)",
                extra={"error_code": "DECODE_ERROR"},
            )
            raise DecodeError(
                _first_error(e), response_type, context,
            ) from e

    def decode_value(self, data: Any, response_type: Any) -> Any:
        """Validate an already-parsed JSON value (dict/list) into response_type."""
        try:
            return type_adapter(response_type).validate_python(data)
        except ValidationError as e:
            raise DecodeError(_first_error(e), response_type) from e

    def encode(self, value: Any, value_type: Any = None) -> bytes:
        """Serialize a model (or list/dict of models) to JSON bytes, wire names."""
        adapter = type_adapter(value_type if value_type is not None else type(value))
        return adapter.dump_json(value, by_alias=True)


def _first_error(error: ValidationError) -> str:
    first = error.errors(include_url=False)[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{location}: {first['msg']}"
