"""Committee meeting endpoints (``/committee-meeting``)."""

from __future__ import annotations

from dataclasses import dataclass

from ..common import CommitteeChamber, Format
from ..core.endpoint import Endpoint, format_param, path_param, query_param


@dataclass(frozen=True, kw_only=True)
class CommitteeMeetingList(Endpoint):
    template = "committee-meeting"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class CommitteeMeetingsByCongress(Endpoint):
    template = "committee-meeting/{congress}"

    congress: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class CommitteeMeetingsByChamber(Endpoint):
    template = "committee-meeting/{congress}/{chamber}"

    congress: int = path_param()
    chamber: CommitteeChamber = path_param(CommitteeChamber)
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class CommitteeMeetingDetail(Endpoint):
    """A single meeting, addressed by its event ID."""

    template = "committee-meeting/{congress}/{chamber}/{event_id}"

    congress: int = path_param()
    chamber: CommitteeChamber = path_param(CommitteeChamber)
    event_id: int = path_param()
    format: Format = format_param()


__all__ = [
    "CommitteeMeetingList",
    "CommitteeMeetingsByCongress",
    "CommitteeMeetingsByChamber",
    "CommitteeMeetingDetail",
]
