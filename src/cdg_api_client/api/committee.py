"""Committee endpoints (``/committee``)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common import CommitteeChamber, Format
from ..core.endpoint import Endpoint, format_param, path_param, query_param


@dataclass(frozen=True, kw_only=True)
class CommitteeList(Endpoint):
    template = "committee"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class CommitteesByChamber(Endpoint):
    template = "committee/{chamber}"

    chamber: CommitteeChamber = path_param(CommitteeChamber)
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class CommitteesByCongress(Endpoint):
    template = "committee/{congress}"

    congress: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class CommitteesByCongressChamber(Endpoint):
    template = "committee/{congress}/{chamber}"

    congress: int = path_param()
    chamber: CommitteeChamber = path_param(CommitteeChamber)
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class CommitteeDetail(Endpoint):
    """A committee by system code, e.g. ``hspw00``."""

    template = "committee/{chamber}/{committee_code}"

    chamber: CommitteeChamber = path_param(CommitteeChamber)
    committee_code: str = path_param()
    format: Format = format_param()


@dataclass(frozen=True, kw_only=True)
class CommitteeBills(Endpoint):
    template = "committee/{chamber}/{committee_code}/bills"

    chamber: CommitteeChamber = path_param(CommitteeChamber)
    committee_code: str = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class CommitteeReports(Endpoint):
    template = "committee/{chamber}/{committee_code}/reports"

    chamber: CommitteeChamber = path_param(CommitteeChamber)
    committee_code: str = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class CommitteeNominations(Endpoint):
    template = "committee/{chamber}/{committee_code}/nominations"

    chamber: CommitteeChamber = path_param(CommitteeChamber)
    committee_code: str = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class CommitteeHouseCommunications(Endpoint):
    template = "committee/{chamber}/{committee_code}/house-communication"

    chamber: CommitteeChamber = path_param(CommitteeChamber)
    committee_code: str = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class CommitteeSenateCommunications(Endpoint):
    template = "committee/{chamber}/{committee_code}/senate-communication"

    chamber: CommitteeChamber = path_param(CommitteeChamber)
    committee_code: str = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


__all__ = [
    "CommitteeList",
    "CommitteesByChamber",
    "CommitteesByCongress",
    "CommitteesByCongressChamber",
    "CommitteeDetail",
    "CommitteeBills",
    "CommitteeReports",
    "CommitteeNominations",
    "CommitteeHouseCommunications",
    "CommitteeSenateCommunications",
]
