"""License-related Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class License(BaseModel):
    """License identity resolved for a license file URL."""

    model_config = {"extra": "forbid"}

    id: Optional[str] = Field(
        default=None, description="SPDX license identifier"
    )
    name: Optional[str] = Field(
        default=None, description="Human-readable license name"
    )
    url: str = Field(description="License URL exactly as supplied by the caller")


class ResolvedReference(BaseModel):
    """Repository and ref extracted from a recognized license URL."""

    model_config = {"extra": "forbid", "frozen": True}

    repository_id: str = Field(description="Repository as 'owner/name'")
    ref_spec: str = Field(description="Branch or tag name from the URL")

    @property
    def owner(self) -> str:
        """Repository owner (user or organization)."""
        return self.repository_id.split("/", 1)[0]

    @property
    def repository(self) -> str:
        """Repository name without the owner."""
        return self.repository_id.split("/", 1)[1]
