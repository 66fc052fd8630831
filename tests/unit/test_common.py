from __future__ import annotations

import pytest

from cdg_api_client.common import (
    AmendmentType,
    BillType,
    Chamber,
    CommitteeChamber,
    CommitteeReportType,
    Format,
    HouseCommunicationType,
    LawType,
    SenateCommunicationType,
    Sort,
    StateCode,
)


@pytest.mark.parametrize(
    ("enum_cls", "expected"),
    [
        (Format, {"json", "xml"}),
        (Sort, {"asc", "desc"}),
        (BillType, {"hr", "s", "hjres", "sjres", "hconres", "sconres", "hres", "sres"}),
        (AmendmentType, {"hamdt", "samdt", "suamdt"}),
        (Chamber, {"house", "senate"}),
        (CommitteeChamber, {"house", "senate", "joint", "nochamber"}),
        (CommitteeReportType, {"hrpt", "srpt", "erpt"}),
        (LawType, {"pub", "priv"}),
        (HouseCommunicationType, {"ec", "ml", "pm", "pt"}),
        (SenateCommunicationType, {"ec", "pm", "pom"}),
    ],
)
def test_wire_values(enum_cls, expected):
    assert {member.as_str() for member in enum_cls} == expected


def test_state_codes_are_upper_case_and_complete():
    values = [member.value for member in StateCode]
    assert all(value == value.upper() for value in values)
    assert {"CA", "DC", "PR", "GU", "VI", "AS", "MP"}.issubset(values)
    assert len(values) == 56


def test_str_returns_wire_value():
    assert str(BillType.HJRES) == "hjres"
    assert f"{LawType.PUBLIC}" == "pub"


def test_lookup_is_case_insensitive():
    assert BillType("HR") is BillType.HR
    assert StateCode("ny") is StateCode.NY
    assert CommitteeChamber(" Joint ") is CommitteeChamber.JOINT


def test_unknown_value_raises_value_error():
    with pytest.raises(ValueError):
        BillType("bogus")
