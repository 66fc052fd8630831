"""Error types raised by the request pipeline."""

from __future__ import annotations


class CdgApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class CdgValidationError(CdgApiError):
    """Invalid local input (configuration, descriptor values)."""


class CdgMissingFieldError(CdgValidationError):
    """A required endpoint field was not supplied."""

    def __init__(self, field_name: str, *, endpoint: str | None = None) -> None:
        where = f" for {endpoint}" if endpoint else ""
        super().__init__(f"missing required field `{field_name}`{where}", cause="missing_field")
        self.field_name = field_name
        self.endpoint = endpoint


class CdgClientClosedError(CdgApiError):
    """Raised when client is used after close."""


class CdgUrlError(CdgApiError):
    """Base URL and endpoint path do not join into a valid URL."""


class CdgRequestBuildError(CdgApiError):
    """Resolved URL cannot be turned into an HTTP request."""


class CdgTransportError(CdgApiError):
    """Network/transport-level failure."""

    def __init__(self, message: str, *, source: BaseException | None = None) -> None:
        super().__init__(message, cause="network")
        self.source = source


class CdgHttpError(CdgApiError):
    """Response body did not parse, or status was not successful."""

    def __init__(self, http_status: int) -> None:
        super().__init__(f"HTTP error: {http_status}", http_status=http_status, cause="http")


class CdgDataTypeError(CdgApiError):
    """Response parsed but does not match the requested result shape."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        source: BaseException | None = None,
    ) -> None:
        super().__init__(
            f"could not parse data from JSON: {message}",
            http_status=http_status,
            cause="data_type",
        )
        self.source = source


def is_success_status(http_status: int) -> bool:
    return 200 <= http_status < 300


__all__ = [
    "CdgApiError",
    "CdgValidationError",
    "CdgMissingFieldError",
    "CdgClientClosedError",
    "CdgUrlError",
    "CdgRequestBuildError",
    "CdgTransportError",
    "CdgHttpError",
    "CdgDataTypeError",
    "is_success_status",
]
