"""Bill endpoints (``/bill``)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common import BillType, Format, Sort
from ..core.endpoint import Endpoint, format_param, path_param, query_param


@dataclass(frozen=True, kw_only=True)
class BillList(Endpoint):
    """Most recently updated bills across all congresses."""

    template = "bill"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")
    sort: Sort | None = query_param(kind=Sort)


@dataclass(frozen=True, kw_only=True)
class BillsByCongress(Endpoint):
    template = "bill/{congress}"

    congress: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")
    sort: Sort | None = query_param(kind=Sort)


@dataclass(frozen=True, kw_only=True)
class BillsByType(Endpoint):
    template = "bill/{congress}/{bill_type}"

    congress: int = path_param()
    bill_type: BillType = path_param(BillType)
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")
    sort: Sort | None = query_param(kind=Sort)


@dataclass(frozen=True, kw_only=True)
class BillDetail(Endpoint):
    """A single bill, e.g. H.R. 3076 of the 117th Congress."""

    template = "bill/{congress}/{bill_type}/{bill_number}"

    congress: int = path_param()
    bill_type: BillType = path_param(BillType)
    bill_number: int = path_param()
    format: Format = format_param()


@dataclass(frozen=True, kw_only=True)
class BillActions(Endpoint):
    template = "bill/{congress}/{bill_type}/{bill_number}/actions"

    congress: int = path_param()
    bill_type: BillType = path_param(BillType)
    bill_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class BillAmendments(Endpoint):
    template = "bill/{congress}/{bill_type}/{bill_number}/amendments"

    congress: int = path_param()
    bill_type: BillType = path_param(BillType)
    bill_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class BillCommittees(Endpoint):
    template = "bill/{congress}/{bill_type}/{bill_number}/committees"

    congress: int = path_param()
    bill_type: BillType = path_param(BillType)
    bill_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class BillCosponsors(Endpoint):
    template = "bill/{congress}/{bill_type}/{bill_number}/cosponsors"

    congress: int = path_param()
    bill_type: BillType = path_param(BillType)
    bill_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")
    sort: Sort | None = query_param(kind=Sort)


@dataclass(frozen=True, kw_only=True)
class BillRelatedBills(Endpoint):
    template = "bill/{congress}/{bill_type}/{bill_number}/relatedbills"

    congress: int = path_param()
    bill_type: BillType = path_param(BillType)
    bill_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class BillSubjects(Endpoint):
    template = "bill/{congress}/{bill_type}/{bill_number}/subjects"

    congress: int = path_param()
    bill_type: BillType = path_param(BillType)
    bill_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


@dataclass(frozen=True, kw_only=True)
class BillSummaries(Endpoint):
    template = "bill/{congress}/{bill_type}/{bill_number}/summaries"

    congress: int = path_param()
    bill_type: BillType = path_param(BillType)
    bill_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class BillText(Endpoint):
    template = "bill/{congress}/{bill_type}/{bill_number}/text"

    congress: int = path_param()
    bill_type: BillType = path_param(BillType)
    bill_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class BillTitles(Endpoint):
    template = "bill/{congress}/{bill_type}/{bill_number}/titles"

    congress: int = path_param()
    bill_type: BillType = path_param(BillType)
    bill_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()
    from_date_time: datetime | None = query_param("fromDateTime")
    to_date_time: datetime | None = query_param("toDateTime")


__all__ = [
    "BillList",
    "BillsByCongress",
    "BillsByType",
    "BillDetail",
    "BillActions",
    "BillAmendments",
    "BillCommittees",
    "BillCosponsors",
    "BillRelatedBills",
    "BillSubjects",
    "BillSummaries",
    "BillText",
    "BillTitles",
]
