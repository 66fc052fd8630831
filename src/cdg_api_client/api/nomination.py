"""Nomination endpoints (``/nomination``)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common import Format
from ..core.endpoint import Endpoint, format_param, path_param, query_param


@dataclass(frozen=True, kw_only=True)
class NominationList(Endpoint):
    template = "nomination"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class NominationsByCongress(Endpoint):
    template = "nomination/{congress}"

    congress: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class NominationDetail(Endpoint):
    template = "nomination/{congress}/{nomination_number}"

    congress: int = path_param()
    nomination_number: int = path_param()
    format: Format = format_param()


@dataclass(frozen=True, kw_only=True)
class Nominees(Endpoint):
    """Nominees within one position (``ordinal``) of a nomination."""

    template = "nomination/{congress}/{nomination_number}/{ordinal}"

    congress: int = path_param()
    nomination_number: int = path_param()
    ordinal: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class NominationActions(Endpoint):
    template = "nomination/{congress}/{nomination_number}/actions"

    congress: int = path_param()
    nomination_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class NominationCommittees(Endpoint):
    template = "nomination/{congress}/{nomination_number}/committees"

    congress: int = path_param()
    nomination_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class NominationHearings(Endpoint):
    template = "nomination/{congress}/{nomination_number}/hearings"

    congress: int = path_param()
    nomination_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


__all__ = [
    "NominationList",
    "NominationsByCongress",
    "NominationDetail",
    "Nominees",
    "NominationActions",
    "NominationCommittees",
    "NominationHearings",
]
