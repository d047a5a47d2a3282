"""Configuration Pydantic models for license-resolver."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from license_resolver.constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    GITHUB_API_BASE_URL,
    MAX_CONCURRENT_REQUESTS,
)


class ResolverConfig(BaseModel):
    """Configuration for license-resolver.

    Credentials are optional; without them requests are anonymous and
    subject to GitHub's lower rate limit.
    """

    model_config = {"extra": "forbid"}

    github_username: Optional[str] = Field(
        default=None, description="GitHub username for Basic authentication"
    )
    github_token: Optional[str] = Field(
        default=None, description="GitHub personal access token"
    )
    api_base_url: str = Field(
        default=GITHUB_API_BASE_URL,
        description="Base URL of the GitHub REST API",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT, description="User-Agent header value"
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, description="HTTP timeout in seconds"
    )
    max_concurrent_requests: int = Field(
        default=MAX_CONCURRENT_REQUESTS,
        ge=1,
        description="Maximum number of in-flight GitHub API requests",
    )

    @field_validator("api_base_url")
    @classmethod
    def ensure_trailing_slash(cls, value: str) -> str:
        """Request URLs are built by appending to the base."""
        return value if value.endswith("/") else value + "/"
