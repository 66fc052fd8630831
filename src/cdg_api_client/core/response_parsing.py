"""Response classification and deserialization."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import CdgDataTypeError, CdgHttpError, is_success_status
from .models import RawResponse

T = TypeVar("T")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


def parse_json_payload(response: RawResponse) -> Any:
    """Parse the body as generic JSON.

    A body that does not parse is reported as an HTTP error carrying the
    received status, whatever that status was.
    """

    try:
        return json.loads(response.content, parse_constant=_reject_constant)
    except ValueError as exc:
        raise CdgHttpError(response.status_code) from exc


def ensure_success_status(response: RawResponse) -> None:
    if not is_success_status(response.status_code):
        raise CdgHttpError(response.status_code)


@lru_cache(maxsize=256)
def _adapter_for(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def _get_adapter(result_type: Any) -> TypeAdapter[Any]:
    try:
        return _adapter_for(result_type)
    except TypeError:
        # Unhashable type expressions (e.g. some Annotated metadata) skip the cache.
        return TypeAdapter(result_type)


def deserialize_payload(payload: Any, result_type: type[T], *, http_status: int | None = None) -> T:
    adapter = _get_adapter(result_type)
    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        raise CdgDataTypeError(str(exc), http_status=http_status, source=exc) from exc


def decode_response(response: RawResponse, result_type: type[T]) -> T:
    """Classify ``response`` and convert its body into ``result_type``."""

    payload = parse_json_payload(response)
    ensure_success_status(response)
    return deserialize_payload(payload, result_type, http_status=response.status_code)


__all__ = [
    "parse_json_payload",
    "ensure_success_status",
    "deserialize_payload",
    "decode_response",
]
