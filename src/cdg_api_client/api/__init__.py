"""Endpoint descriptors, one module per API resource family."""

from . import (
    amendment,
    bill,
    committee,
    committee_meeting,
    committee_print,
    committee_report,
    communication,
    congress,
    congressional_record,
    hearing,
    law,
    member,
    nomination,
    summaries,
    treaty,
)

__all__ = [
    "amendment",
    "bill",
    "committee",
    "committee_meeting",
    "committee_print",
    "committee_report",
    "communication",
    "congress",
    "congressional_record",
    "hearing",
    "law",
    "member",
    "nomination",
    "summaries",
    "treaty",
]
