"""Amendment endpoints (``/amendment``)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common import AmendmentType, Format
from ..core.endpoint import Endpoint, format_param, path_param, query_param


@dataclass(frozen=True, kw_only=True)
class AmendmentList(Endpoint):
    template = "amendment"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class AmendmentsByCongress(Endpoint):
    template = "amendment/{congress}"

    congress: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class AmendmentsByType(Endpoint):
    template = "amendment/{congress}/{amendment_type}"

    congress: int = path_param()
    amendment_type: AmendmentType = path_param(AmendmentType)
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class AmendmentDetail(Endpoint):
    template = "amendment/{congress}/{amendment_type}/{amendment_number}"

    congress: int = path_param()
    amendment_type: AmendmentType = path_param(AmendmentType)
    amendment_number: int = path_param()
    format: Format = format_param()


@dataclass(frozen=True, kw_only=True)
class AmendmentActions(Endpoint):
    template = "amendment/{congress}/{amendment_type}/{amendment_number}/actions"

    congress: int = path_param()
    amendment_type: AmendmentType = path_param(AmendmentType)
    amendment_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class AmendmentCosponsors(Endpoint):
    template = "amendment/{congress}/{amendment_type}/{amendment_number}/cosponsors"

    congress: int = path_param()
    amendment_type: AmendmentType = path_param(AmendmentType)
    amendment_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class AmendmentAmendments(Endpoint):
    """Amendments to an amendment."""

    template = "amendment/{congress}/{amendment_type}/{amendment_number}/amendments"

    congress: int = path_param()
    amendment_type: AmendmentType = path_param(AmendmentType)
    amendment_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class AmendmentText(Endpoint):
    """Text versions; only available from the 117th Congress onwards."""

    template = "amendment/{congress}/{amendment_type}/{amendment_number}/text"

    congress: int = path_param()
    amendment_type: AmendmentType = path_param(AmendmentType)
    amendment_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


__all__ = [
    "AmendmentList",
    "AmendmentsByCongress",
    "AmendmentsByType",
    "AmendmentDetail",
    "AmendmentActions",
    "AmendmentCosponsors",
    "AmendmentAmendments",
    "AmendmentText",
]
