"""Enumerated vocabularies shared by endpoint descriptors."""

from __future__ import annotations

from enum import Enum


class WireEnum(str, Enum):
    """Closed tag set whose value is the wire representation."""

    def as_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value: object) -> "WireEnum | None":
        # Responses spell some tags upper-case ("HR"); accept either case.
        if isinstance(value, str):
            folded = value.strip().lower()
            for member in cls:
                if member.value.lower() == folded:
                    return member
        return None


class Format(WireEnum):
    """Response encoding. JSON is the default."""

    JSON = "json"
    XML = "xml"


class Sort(WireEnum):
    ASC = "asc"
    DESC = "desc"


class BillType(WireEnum):
    """Bill and resolution types for both chambers."""

    HR = "hr"
    S = "s"
    HJRES = "hjres"
    SJRES = "sjres"
    HCONRES = "hconres"
    SCONRES = "sconres"
    HRES = "hres"
    SRES = "sres"


class AmendmentType(WireEnum):
    HAMDT = "hamdt"
    SAMDT = "samdt"
    SUAMDT = "suamdt"


class Chamber(WireEnum):
    HOUSE = "house"
    SENATE = "senate"


class CommitteeChamber(WireEnum):
    """Chamber segment for committee resources, including joint committees."""

    HOUSE = "house"
    SENATE = "senate"
    JOINT = "joint"
    NOCHAMBER = "nochamber"


class CommitteeReportType(WireEnum):
    HRPT = "hrpt"
    SRPT = "srpt"
    ERPT = "erpt"


class LawType(WireEnum):
    PUBLIC = "pub"
    PRIVATE = "priv"


class HouseCommunicationType(WireEnum):
    EC = "ec"
    ML = "ml"
    PM = "pm"
    PT = "pt"


class SenateCommunicationType(WireEnum):
    EC = "ec"
    PM = "pm"
    POM = "pom"


class StateCode(WireEnum):
    """Two-letter USPS codes. The API expects these upper-case."""

    AL = "AL"
    AK = "AK"
    AZ = "AZ"
    AR = "AR"
    CA = "CA"
    CO = "CO"
    CT = "CT"
    DE = "DE"
    DC = "DC"
    FL = "FL"
    GA = "GA"
    HI = "HI"
    ID = "ID"
    IL = "IL"
    IN = "IN"
    IA = "IA"
    KS = "KS"
    KY = "KY"
    LA = "LA"
    ME = "ME"
    MD = "MD"
    MA = "MA"
    MI = "MI"
    MN = "MN"
    MS = "MS"
    MO = "MO"
    MT = "MT"
    NE = "NE"
    NV = "NV"
    NH = "NH"
    NJ = "NJ"
    NM = "NM"
    NY = "NY"
    NC = "NC"
    ND = "ND"
    OH = "OH"
    OK = "OK"
    OR = "OR"
    PA = "PA"
    RI = "RI"
    SC = "SC"
    SD = "SD"
    TN = "TN"
    TX = "TX"
    UT = "UT"
    VT = "VT"
    VA = "VA"
    WA = "WA"
    WV = "WV"
    WI = "WI"
    WY = "WY"
    AS = "AS"
    GU = "GU"
    MP = "MP"
    PR = "PR"
    VI = "VI"


__all__ = [
    "WireEnum",
    "Format",
    "Sort",
    "BillType",
    "AmendmentType",
    "Chamber",
    "CommitteeChamber",
    "CommitteeReportType",
    "LawType",
    "HouseCommunicationType",
    "SenateCommunicationType",
    "StateCode",
]
