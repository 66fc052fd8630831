"""Treaty endpoints (``/treaty``)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common import Format
from ..core.endpoint import Endpoint, format_param, path_param, query_param


@dataclass(frozen=True, kw_only=True)
class TreatyList(Endpoint):
    template = "treaty"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class TreatiesByCongress(Endpoint):
    template = "treaty/{congress}"

    congress: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class TreatyDetail(Endpoint):
    template = "treaty/{congress}/{treaty_number}"

    congress: int = path_param()
    treaty_number: int = path_param()
    format: Format = format_param()


@dataclass(frozen=True, kw_only=True)
class PartitionedTreatyDetail(Endpoint):
    """A partitioned treaty, addressed by letter suffix (``A``, ``B``...)."""

    template = "treaty/{congress}/{treaty_number}/{treaty_suffix}"

    congress: int = path_param()
    treaty_number: int = path_param()
    treaty_suffix: str = path_param()
    format: Format = format_param()


@dataclass(frozen=True, kw_only=True)
class TreatyActions(Endpoint):
    template = "treaty/{congress}/{treaty_number}/actions"

    congress: int = path_param()
    treaty_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class PartitionedTreatyActions(Endpoint):
    template = "treaty/{congress}/{treaty_number}/{treaty_suffix}/actions"

    congress: int = path_param()
    treaty_number: int = path_param()
    treaty_suffix: str = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class TreatyCommittees(Endpoint):
    template = "treaty/{congress}/{treaty_number}/committees"

    congress: int = path_param()
    treaty_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


__all__ = [
    "TreatyList",
    "TreatiesByCongress",
    "TreatyDetail",
    "PartitionedTreatyDetail",
    "TreatyActions",
    "PartitionedTreatyActions",
    "TreatyCommittees",
]
