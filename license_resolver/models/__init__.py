"""Pydantic data models for license-resolver."""

from license_resolver.models.config import ResolverConfig
from license_resolver.models.github import GitHubLicenseInfo, GitHubLicenseResponse
from license_resolver.models.license import License, ResolvedReference
from license_resolver.models.result import ResolutionResult, ResolutionStatus

__all__ = [
    "GitHubLicenseInfo",
    "GitHubLicenseResponse",
    "License",
    "ResolutionResult",
    "ResolutionStatus",
    "ResolvedReference",
    "ResolverConfig",
]
