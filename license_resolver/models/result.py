"""Resolution outcome models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from license_resolver.models.license import License


class ResolutionStatus(Enum):
    """Outcome of resolving a single license URL."""

    FOUND = "found"
    NOT_APPLICABLE = "not_applicable"
    INVALID_CREDENTIALS = "invalid_credentials"
    RATE_LIMITED = "rate_limited"


class ResolutionResult(BaseModel):
    """Result of resolving a single license URL.

    ``license`` is only populated when ``status`` is FOUND. NOT_APPLICABLE
    means the resolver has no answer for the URL, which is not an error.
    """

    model_config = {"extra": "forbid"}

    url: Optional[str] = Field(description="License URL that was resolved")
    status: ResolutionStatus = Field(description="Resolution outcome")
    license: Optional[License] = Field(
        default=None, description="Resolved license (FOUND only)"
    )
    error: Optional[str] = Field(
        default=None, description="Error message for failed resolutions"
    )

    @property
    def found(self) -> bool:
        """Check if a license was resolved."""
        return self.status == ResolutionStatus.FOUND

    @property
    def is_error(self) -> bool:
        """Check if the GitHub API rejected the request."""
        return self.status in (
            ResolutionStatus.INVALID_CREDENTIALS,
            ResolutionStatus.RATE_LIMITED,
        )
