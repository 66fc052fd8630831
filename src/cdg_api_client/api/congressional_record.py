"""Congressional Record endpoints."""

from __future__ import annotations

from dataclasses import dataclass

from ..common import Format
from ..core.endpoint import Endpoint, format_param, path_param, query_param


@dataclass(frozen=True, kw_only=True)
class CongressionalRecordList(Endpoint):
    """Daily Congressional Record issues, filtered by ``y``/``m``/``d``."""

    template = "congressional-record"

    format: Format = format_param()
    year: int | None = query_param("y")
    month: int | None = query_param("m")
    day: int | None = query_param("d")
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class DailyCongressionalRecordList(Endpoint):
    template = "daily-congressional-record"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class DailyCongressionalRecordVolume(Endpoint):
    template = "daily-congressional-record/{volume_number}"

    volume_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class DailyCongressionalRecordIssue(Endpoint):
    template = "daily-congressional-record/{volume_number}/{issue_number}"

    volume_number: int = path_param()
    issue_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class DailyCongressionalRecordArticles(Endpoint):
    template = "daily-congressional-record/{volume_number}/{issue_number}/articles"

    volume_number: int = path_param()
    issue_number: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class BoundCongressionalRecordList(Endpoint):
    template = "bound-congressional-record"

    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class BoundCongressionalRecordYear(Endpoint):
    template = "bound-congressional-record/{year}"

    year: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class BoundCongressionalRecordMonth(Endpoint):
    template = "bound-congressional-record/{year}/{month}"

    year: int = path_param()
    month: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


@dataclass(frozen=True, kw_only=True)
class BoundCongressionalRecordDay(Endpoint):
    template = "bound-congressional-record/{year}/{month}/{day}"

    year: int = path_param()
    month: int = path_param()
    day: int = path_param()
    format: Format = format_param()
    offset: int | None = query_param()
    limit: int | None = query_param()


__all__ = [
    "CongressionalRecordList",
    "DailyCongressionalRecordList",
    "DailyCongressionalRecordVolume",
    "DailyCongressionalRecordIssue",
    "DailyCongressionalRecordArticles",
    "BoundCongressionalRecordList",
    "BoundCongressionalRecordYear",
    "BoundCongressionalRecordMonth",
    "BoundCongressionalRecordDay",
]
