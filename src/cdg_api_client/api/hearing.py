"""Hearing and CRS report endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from ..common import CommitteeChamber, Format
from ..core.endpoint import Endpoint, format_param, path_param, query_param


@dataclass(frozen=True, kw_only=True)
class HearingList(Endpoint):
    template = "hearing"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class HearingsByCongress(Endpoint):
    template = "hearing/{congress}"

    congress: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class HearingsByChamber(Endpoint):
    template = "hearing/{congress}/{chamber}"

    congress: int = path_param()
    chamber: CommitteeChamber = path_param(CommitteeChamber)
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class HearingDetail(Endpoint):
    template = "hearing/{congress}/{chamber}/{jacket_number}"

    congress: int = path_param()
    chamber: CommitteeChamber = path_param(CommitteeChamber)
    jacket_number: int = path_param()
    format: Format = format_param()


@dataclass(frozen=True, kw_only=True)
class CrsReportList(Endpoint):
    """Congressional Research Service reports."""

    template = "crsreport"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class CrsReportDetail(Endpoint):
    """A CRS report by product number, e.g. ``R47175``."""

    template = "crsreport/{report_number}"

    report_number: str = path_param()
    format: Format = format_param()


__all__ = [
    "HearingList",
    "HearingsByCongress",
    "HearingsByChamber",
    "HearingDetail",
    "CrsReportList",
    "CrsReportDetail",
]
