"""Committee print endpoints (``/committee-print``)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common import CommitteeChamber, Format
from ..core.endpoint import Endpoint, format_param, path_param, query_param


@dataclass(frozen=True, kw_only=True)
class CommitteePrintList(Endpoint):
    template = "committee-print"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class CommitteePrintsByCongress(Endpoint):
    template = "committee-print/{congress}"

    congress: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class CommitteePrintsByChamber(Endpoint):
    template = "committee-print/{congress}/{chamber}"

    congress: int = path_param()
    chamber: CommitteeChamber = path_param(CommitteeChamber)
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class CommitteePrintDetail(Endpoint):
    template = "committee-print/{congress}/{chamber}/{jacket_number}"

    congress: int = path_param()
    chamber: CommitteeChamber = path_param(CommitteeChamber)
    jacket_number: int = path_param()
    format: Format = format_param()


@dataclass(frozen=True, kw_only=True)
class CommitteePrintText(Endpoint):
    template = "committee-print/{congress}/{chamber}/{jacket_number}/text"

    congress: int = path_param()
    chamber: CommitteeChamber = path_param(CommitteeChamber)
    jacket_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


__all__ = [
    "CommitteePrintList",
    "CommitteePrintsByCongress",
    "CommitteePrintsByChamber",
    "CommitteePrintDetail",
    "CommitteePrintText",
]
