"""Member endpoints (``/member``)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common import Format, StateCode
from ..core.endpoint import Endpoint, format_param, path_param, query_param


@dataclass(frozen=True, kw_only=True)
class MemberList(Endpoint):
    template = "member"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")
    current_member: bool | None = query_param("currentMember")


@dataclass(frozen=True, kw_only=True)
class MemberDetail(Endpoint):
    """A member by Bioguide ID, e.g. ``L000174``."""

    template = "member/{bioguide_id}"

    bioguide_id: str = path_param()
    format: Format = format_param()


@dataclass(frozen=True, kw_only=True)
class MemberSponsoredLegislation(Endpoint):
    template = "member/{bioguide_id}/sponsored-legislation"

    bioguide_id: str = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class MemberCosponsoredLegislation(Endpoint):
    template = "member/{bioguide_id}/cosponsored-legislation"

    bioguide_id: str = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class MembersByState(Endpoint):
    template = "member/{state_code}"

    state_code: StateCode = path_param(StateCode)
    format: Format = format_param()
    current_member: bool | None = query_param("currentMember")


@dataclass(frozen=True, kw_only=True)
class MembersByDistrict(Endpoint):
    template = "member/{state_code}/{district}"

    state_code: StateCode = path_param(StateCode)
    district: int = path_param()
    format: Format = format_param()
    current_member: bool | None = query_param("currentMember")


@dataclass(frozen=True, kw_only=True)
class MembersByCongress(Endpoint):
    template = "member/congress/{congress}"

    congress: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    current_member: bool | None = query_param("currentMember")


@dataclass(frozen=True, kw_only=True)
class MembersByCongressDistrict(Endpoint):
    template = "member/congress/{congress}/{state_code}/{district}"

    congress: int = path_param()
    state_code: StateCode = path_param(StateCode)
    district: int = path_param()
    format: Format = format_param()
    current_member: bool | None = query_param("currentMember")


__all__ = [
    "MemberList",
    "MemberDetail",
    "MemberSponsoredLegislation",
    "MemberCosponsoredLegislation",
    "MembersByState",
    "MembersByDistrict",
    "MembersByCongress",
    "MembersByCongressDistrict",
]
