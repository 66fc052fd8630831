"""Declarative endpoint descriptors.

A descriptor is a frozen dataclass deriving from :class:`Endpoint`. Its fields
are declared with :func:`path_param`, :func:`format_param` and
:func:`query_param`; the path is rendered from ``template`` and the query
parameters follow field declaration order::

    @dataclass(frozen=True, kw_only=True)
    class BillDetail(Endpoint):
        template = "bill/{congress}/{bill_type}/{bill_number}"

        congress: int = path_param()
        bill_type: BillType = path_param(BillType)
        bill_number: int = path_param()
        format: Format = format_param()

Construction fails with :class:`CdgMissingFieldError` when a path field is
absent, before any request is attempted.
"""

from __future__ import annotations

from dataclasses import field, fields
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar
from urllib.parse import quote

import httpx

from ..common import Format
from .errors import CdgMissingFieldError, CdgValidationError
from .models import UrlResolver
from .params import QueryParams, encode_param_value

GET = "GET"

_ROLE = "cdg_role"
_KIND = "cdg_kind"
_NAME = "cdg_name"
_REQUIRED = "cdg_required"


class UrlBase(Enum):
    """API root an endpoint targets. Only v3 exists today."""

    API_V3 = "v3"

    def endpoint_for(self, client: UrlResolver, endpoint: str) -> httpx.URL:
        if self is UrlBase.API_V3:
            return client.rest_endpoint(endpoint)
        raise ValueError(f"unsupported url base: {self!r}")


def path_param(kind: type[Enum] | None = None) -> Any:
    """Required path segment, optionally coerced to ``kind``."""

    return field(default=None, metadata={_ROLE: "path", _KIND: kind})


def query_param(name: str | None = None, *, kind: type[Enum] | None = None) -> Any:
    """Optional query parameter; emitted only when set."""

    return field(default=None, metadata={_ROLE: "query", _NAME: name, _KIND: kind})


def format_param() -> Any:
    """The ``format`` parameter, always emitted."""

    return field(
        default=Format.JSON,
        metadata={_ROLE: "query", _NAME: "format", _KIND: Format, _REQUIRED: True},
    )


def _coerce(kind: type[Enum], value: object, name: str) -> Enum:
    try:
        return kind(value)
    except ValueError as exc:
        allowed = ", ".join(str(member.value) for member in kind)
        raise CdgValidationError(f"{name} must be one of: {allowed}; got {value!r}") from exc


_SCALARS: dict[str, type] = {"int": int, "str": str, "bool": bool, "datetime": datetime}
_UNSAFE_SEGMENTS = ("", ".", "..")


def _encode_segment(value: Any) -> str:
    return quote(encode_param_value(value), safe="")


def _check_scalar(annotation: object, value: object, name: str) -> None:
    expected = _SCALARS.get(str(annotation).replace("| None", "").strip())
    if expected is None:
        return
    # bool is an int subclass; only bool fields accept it.
    if not isinstance(value, expected) or (expected is not bool and isinstance(value, bool)):
        raise CdgValidationError(
            f"{name} must be {expected.__name__}; got {type(value).__name__} {value!r}"
        )


class Endpoint:
    """Base for all endpoint descriptors."""

    template: ClassVar[str]

    def __post_init__(self) -> None:
        for item in fields(self):  # type: ignore[arg-type]
            value = getattr(self, item.name)
            if value is None:
                if item.metadata.get(_ROLE) == "path" or item.metadata.get(_REQUIRED):
                    raise CdgMissingFieldError(item.name, endpoint=type(self).__name__)
                continue
            kind = item.metadata.get(_KIND)
            if kind is not None:
                if not isinstance(value, kind):
                    value = _coerce(kind, value, item.name)
                    object.__setattr__(self, item.name, value)
            else:
                _check_scalar(item.type, value, item.name)
            if item.metadata.get(_ROLE) == "path" and _encode_segment(value) in _UNSAFE_SEGMENTS:
                raise CdgValidationError(f"{item.name} must be a non-empty path segment; got {value!r}")

    def method(self) -> str:
        return GET

    def url_base(self) -> UrlBase:
        return UrlBase.API_V3

    def path(self) -> str:
        segments = {
            item.name: _encode_segment(getattr(self, item.name))
            for item in fields(self)  # type: ignore[arg-type]
            if item.metadata.get(_ROLE) == "path"
        }
        return self.template.format(**segments)

    def parameters(self) -> QueryParams:
        params = QueryParams()
        for item in fields(self):  # type: ignore[arg-type]
            if item.metadata.get(_ROLE) != "query":
                continue
            key = item.metadata.get(_NAME) or item.name
            value = getattr(self, item.name)
            if item.metadata.get(_REQUIRED):
                params.push(key, value)
            else:
                params.push_opt(key, value)
        return params


__all__ = [
    "GET",
    "UrlBase",
    "Endpoint",
    "path_param",
    "query_param",
    "format_param",
]
