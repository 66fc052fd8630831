"""House/Senate communication and House requirement endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from ..common import Format, HouseCommunicationType, SenateCommunicationType
from ..core.endpoint import Endpoint, format_param, path_param, query_param


@dataclass(frozen=True, kw_only=True)
class HouseCommunicationList(Endpoint):
    template = "house-communication"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class HouseCommunicationsByCongress(Endpoint):
    template = "house-communication/{congress}"

    congress: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class HouseCommunicationsByType(Endpoint):
    template = "house-communication/{congress}/{communication_type}"

    congress: int = path_param()
    communication_type: HouseCommunicationType = path_param(HouseCommunicationType)
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class HouseCommunicationDetail(Endpoint):
    template = "house-communication/{congress}/{communication_type}/{communication_number}"

    congress: int = path_param()
    communication_type: HouseCommunicationType = path_param(HouseCommunicationType)
    communication_number: int = path_param()
    format: Format = format_param()


@dataclass(frozen=True, kw_only=True)
class HouseRequirementList(Endpoint):
    template = "house-requirement"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class HouseRequirementDetail(Endpoint):
    template = "house-requirement/{requirement_number}"

    requirement_number: int = path_param()
    format: Format = format_param()


@dataclass(frozen=True, kw_only=True)
class HouseRequirementMatchingCommunications(Endpoint):
    template = "house-requirement/{requirement_number}/matching-communications"

    requirement_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class SenateCommunicationList(Endpoint):
    template = "senate-communication"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class SenateCommunicationsByCongress(Endpoint):
    template = "senate-communication/{congress}"

    congress: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class SenateCommunicationsByType(Endpoint):
    template = "senate-communication/{congress}/{communication_type}"

    congress: int = path_param()
    communication_type: SenateCommunicationType = path_param(SenateCommunicationType)
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class SenateCommunicationDetail(Endpoint):
    template = "senate-communication/{congress}/{communication_type}/{communication_number}"

    congress: int = path_param()
    communication_type: SenateCommunicationType = path_param(SenateCommunicationType)
    communication_number: int = path_param()
    format: Format = format_param()


__all__ = [
    "HouseCommunicationList",
    "HouseCommunicationsByCongress",
    "HouseCommunicationsByType",
    "HouseCommunicationDetail",
    "HouseRequirementList",
    "HouseRequirementDetail",
    "HouseRequirementMatchingCommunications",
    "SenateCommunicationList",
    "SenateCommunicationsByCongress",
    "SenateCommunicationsByType",
    "SenateCommunicationDetail",
]
