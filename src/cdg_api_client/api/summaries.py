"""Bill summary endpoints (``/summaries``)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common import BillType, Format, Sort
from ..core.endpoint import Endpoint, format_param, path_param, query_param


@dataclass(frozen=True, kw_only=True)
class SummaryList(Endpoint):
    template = "summaries"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")
    sort: Sort | None = query_param(kind=Sort)


@dataclass(frozen=True, kw_only=True)
class SummariesByCongress(Endpoint):
    template = "summaries/{congress}"

    congress: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")
    sort: Sort | None = query_param(kind=Sort)


@dataclass(frozen=True, kw_only=True)
class SummariesByType(Endpoint):
    template = "summaries/{congress}/{bill_type}"

    congress: int = path_param()
    bill_type: BillType = path_param(BillType)
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")
    sort: Sort | None = query_param(kind=Sort)


__all__ = [
    "SummaryList",
    "SummariesByCongress",
    "SummariesByType",
]
