"""Provider call outcome entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ProviderError(str, Enum):
    """Why an upstream call produced no usable data."""

    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    MALFORMED_BODY = "malformed_body"
    PROVIDER_ERROR = "provider_error"
    NO_RESULTS = "no_results"
    INCOMPLETE_DATA = "incomplete_data"


@dataclass(frozen=True)
class ProviderResult:
    """Outcome of a single upstream provider call.

    Exactly one of ``payload`` and ``error`` is set.

    Attributes:
        payload: The decoded JSON object on success
        error: The failure category on failure
        detail: Human-readable failure description
        status_code: HTTP status code, when a response was received
    """

    payload: dict[str, Any] | None = None
    error: ProviderError | None = None
    detail: str = ""
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        """Whether the call succeeded."""
        return self.error is None

    @classmethod
    def success(cls, payload: dict[str, Any], status_code: int | None = 200) -> "ProviderResult":
        return cls(payload=payload, status_code=status_code)

    @classmethod
    def failure(
        cls,
        error: ProviderError,
        detail: str,
        status_code: int | None = None,
    ) -> "ProviderResult":
        return cls(error=error, detail=detail, status_code=status_code)
