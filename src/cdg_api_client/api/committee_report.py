"""Committee report endpoints (``/committee-report``)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common import CommitteeReportType, Format
from ..core.endpoint import Endpoint, format_param, path_param, query_param


@dataclass(frozen=True, kw_only=True)
class CommitteeReportList(Endpoint):
    template = "committee-report"

    format: Format = format_param()
    conference: bool | None = query_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class CommitteeReportsByCongress(Endpoint):
    template = "committee-report/{congress}"

    congress: int = path_param()
    format: Format = format_param()
    conference: bool | None = query_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class CommitteeReportsByType(Endpoint):
    template = "committee-report/{congress}/{report_type}"

    congress: int = path_param()
    report_type: CommitteeReportType = path_param(CommitteeReportType)
    format: Format = format_param()
    conference: bool | None = query_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class CommitteeReportDetail(Endpoint):
    template = "committee-report/{congress}/{report_type}/{report_number}"

    congress: int = path_param()
    report_type: CommitteeReportType = path_param(CommitteeReportType)
    report_number: int = path_param()
    format: Format = format_param()


@dataclass(frozen=True, kw_only=True)
class CommitteeReportText(Endpoint):
    template = "committee-report/{congress}/{report_type}/{report_number}/text"

    congress: int = path_param()
    report_type: CommitteeReportType = path_param(CommitteeReportType)
    report_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


__all__ = [
    "CommitteeReportList",
    "CommitteeReportsByCongress",
    "CommitteeReportsByType",
    "CommitteeReportDetail",
    "CommitteeReportText",
]
