"""Public package exports for the congress.gov API client."""

from .async_client import AsyncCdgClient
from .auth import ApiKeyAuth
from .client import CdgClient
from .common import (
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
from .config import CdgClientConfig, TransportConfig, api_key_from_env
from .core.errors import (
    CdgApiError,
    CdgClientClosedError,
    CdgDataTypeError,
    CdgHttpError,
    CdgMissingFieldError,
    CdgRequestBuildError,
    CdgTransportError,
    CdgUrlError,
    CdgValidationError,
)

__all__ = [
    "CdgClient",
    "AsyncCdgClient",
    "CdgClientConfig",
    "TransportConfig",
    "ApiKeyAuth",
    "api_key_from_env",
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
    "CdgApiError",
    "CdgValidationError",
    "CdgMissingFieldError",
    "CdgClientClosedError",
    "CdgUrlError",
    "CdgRequestBuildError",
    "CdgTransportError",
    "CdgHttpError",
    "CdgDataTypeError",
]
