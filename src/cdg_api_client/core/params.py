"""Query parameter encoding."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, datetime, timezone
from enum import Enum

import httpx

ParamValue = bool | int | str | datetime | date | Enum


def encode_param_value(value: ParamValue) -> str:
    """Render a typed value as its canonical query-string form."""

    # bool before int: bool is an int subclass.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    raise TypeError(f"unsupported query parameter type: {type(value).__name__}")


class QueryParams:
    """Ordered key/value pairs; duplicate keys are kept."""

    __slots__ = ("_params",)

    def __init__(self) -> None:
        self._params: list[tuple[str, str]] = []

    def push(self, key: str, value: ParamValue) -> "QueryParams":
        self._params.append((key, encode_param_value(value)))
        return self

    def push_opt(self, key: str, value: ParamValue | None) -> "QueryParams":
        if value is not None:
            self._params.append((key, encode_param_value(value)))
        return self

    def items(self) -> list[tuple[str, str]]:
        return list(self._params)

    def add_to_url(self, url: httpx.URL) -> httpx.URL:
        """Append pairs after any query already present on ``url``."""

        if not self._params:
            return url
        existing = list(url.params.multi_items())
        return url.copy_with(params=httpx.QueryParams(existing + self._params))

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParams):
            return NotImplemented
        return self._params == other._params

    def __repr__(self) -> str:
        return f"QueryParams({self._params!r})"


__all__ = [
    "ParamValue",
    "encode_param_value",
    "QueryParams",
]
