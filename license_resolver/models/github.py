"""Pydantic models for GitHub's repository license API payload.

Only the fields used for mapping are required; everything else GitHub
sends is ignored so API additions do not break parsing.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class GitHubLicenseInfo(BaseModel):
    """The nested ``license`` object of the payload."""

    model_config = {"extra": "ignore"}

    key: Optional[str] = Field(default=None, description="GitHub license key")
    name: Optional[str] = Field(description="License display name")
    # GitHub sends null or "NOASSERTION" for licenses it cannot classify
    spdx_id: Optional[str] = Field(description="SPDX license identifier")
    url: Optional[str] = Field(
        default=None, description="GitHub API URL for the license"
    )
    node_id: Optional[str] = Field(default=None, description="GraphQL node ID")


class GitHubLicenseResponse(BaseModel):
    """Response of ``GET /repos/{owner}/{repo}/license``."""

    model_config = {"extra": "ignore"}

    name: Optional[str] = Field(default=None, description="License file name")
    path: Optional[str] = Field(default=None, description="License file path")
    html_url: Optional[str] = Field(
        default=None, description="Browser URL of the license file"
    )
    download_url: Optional[str] = Field(
        default=None, description="Raw download URL of the license file"
    )
    license: GitHubLicenseInfo = Field(description="Detected license metadata")
