"""Congress endpoints (``/congress``)."""

from __future__ import annotations

from dataclasses import dataclass

from ..common import Format
from ..core.endpoint import Endpoint, format_param, path_param, query_param


@dataclass(frozen=True, kw_only=True)
class CongressList(Endpoint):
    template = "congress"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class CurrentCongress(Endpoint):
    template = "congress/current"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class CongressDetail(Endpoint):
    template = "congress/{congress}"

    congress: int = path_param()
    format: Format = format_param()


__all__ = [
    "CongressList",
    "CurrentCongress",
    "CongressDetail",
]
