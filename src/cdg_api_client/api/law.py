"""Public and private law endpoints (``/law``)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common import Format, LawType
from ..core.endpoint import Endpoint, format_param, path_param, query_param


@dataclass(frozen=True, kw_only=True)
class LawsByCongress(Endpoint):
    template = "law/{congress}"

    congress: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class LawsByType(Endpoint):
    template = "law/{congress}/{law_type}"

    congress: int = path_param()
    law_type: LawType = path_param(LawType)
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class LawDetail(Endpoint):
    template = "law/{congress}/{law_type}/{law_number}"

    congress: int = path_param()
    law_type: LawType = path_param(LawType)
    law_number: int = path_param()
    format: Format = format_param()


__all__ = [
    "LawsByCongress",
    "LawsByType",
    "LawDetail",
]
