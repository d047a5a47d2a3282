"""License resolvers package."""

from license_resolver.resolvers.base import BaseLicenseResolver
from license_resolver.resolvers.github import (
    GITHUB_LICENSE_URL_PATTERNS,
    GitHubLicenseResolver,
    match_license_url,
)

__all__ = [
    "GITHUB_LICENSE_URL_PATTERNS",
    "BaseLicenseResolver",
    "GitHubLicenseResolver",
    "match_license_url",
]
