"""Custom exceptions for license-resolver."""

from typing import Optional


class LicenseResolverError(Exception):
    """Base exception for all license-resolver errors."""

    pass


class NetworkError(LicenseResolverError):
    """Exception raised when a network request fails."""

    pass


class ConfigurationError(LicenseResolverError):
    """Exception raised when configuration is invalid."""

    pass


class MalformedResponseError(LicenseResolverError):
    """Exception raised when a successful API response cannot be parsed."""

    pass


class GitHubApiError(LicenseResolverError):
    """Exception raised when the GitHub API rejects a request."""

    status_code: Optional[int] = None


class InvalidGitHubCredentialsError(GitHubApiError):
    """Exception raised when the GitHub API answers 401 Unauthorized."""

    status_code = 401


class GitHubRateLimitExceededError(GitHubApiError):
    """Exception raised when the GitHub API answers 403 Forbidden."""

    status_code = 403
