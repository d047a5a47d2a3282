"""GitHub license API resolver."""
import base64
import re
from typing import Optional

import httpx
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from license_resolver.constants import (
    DEFAULT_REF_SPEC,
    DEFAULT_USER_AGENT,
    GITHUB_API_BASE_URL,
)
from license_resolver.exceptions import (
    ConfigurationError,
    GitHubRateLimitExceededError,
    InvalidGitHubCredentialsError,
    MalformedResponseError,
    NetworkError,
)
from license_resolver.models.config import ResolverConfig
from license_resolver.models.github import GitHubLicenseResponse
from license_resolver.models.license import License, ResolvedReference
from license_resolver.models.result import ResolutionResult, ResolutionStatus
from license_resolver.resolvers.base import BaseLicenseResolver

# Recognized LICENSE file URL shapes, first match wins
GITHUB_LICENSE_URL_PATTERNS = [
    # https://github.com/owner/repo/blob/master/LICENSE
    re.compile(
        r"^https?://github\.com/(?P<repository_id>[^/]+/[^/]+)"
        r"/blob/(?P<ref_spec>[^/]+)/LICENSE(\.(md|txt))?$"
    ),
    # https://raw.githubusercontent.com/owner/repo/master/LICENSE
    re.compile(
        r"^https?://raw\.githubusercontent\.com/(?P<repository_id>[^/]+/[^/]+)"
        r"/(?P<ref_spec>[^/]+)/LICENSE(\.(md|txt))?$"
    ),
]


def match_license_url(license_url: str) -> Optional[ResolvedReference]:
    """Extract repository and ref from a GitHub LICENSE file URL.

    Args:
        license_url: Candidate license URL.

    Returns:
        ResolvedReference from the first matching pattern,
        or None if the URL is not a recognized GitHub LICENSE URL.
    """
    for pattern in GITHUB_LICENSE_URL_PATTERNS:
        match = pattern.match(license_url)
        if match:
            return ResolvedReference(
                repository_id=match.group("repository_id"),
                ref_spec=match.group("ref_spec"),
            )
    return None


def basic_authorization(username: str, token: str) -> str:
    """Build an RFC 7617 Basic authorization header value.

    Args:
        username: GitHub username.
        token: GitHub personal access token.

    Returns:
        Header value of the form "Basic <base64(username:token)>".
    """
    user_token = f"{username}:{token}".encode("utf-8")
    return "Basic " + base64.b64encode(user_token).decode("ascii")


class GitHubLicenseResolver(BaseLicenseResolver):
    """Resolver that asks GitHub's license API about LICENSE file URLs.

    Recognizes github.com blob URLs and raw.githubusercontent.com URLs
    for files named LICENSE, LICENSE.md or LICENSE.txt, and looks up the
    repository license through ``GET /repos/{owner}/{repo}/license``.

    Only the ``master`` ref is looked up. GitHub's license API does not
    necessarily report the correct license for other refs, so URLs on any
    other branch or tag resolve to None without a request.

    The injected client is shared, never modified: authorization is sent
    as a per-request header rather than set on the client's defaults.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        username: Optional[str] = None,
        token: Optional[str] = None,
        *,
        api_base_url: str = GITHUB_API_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ) -> None:
        """Initialize with an HTTP client and optional credentials.

        Args:
            client: httpx.AsyncClient used for all requests. Timeouts and
                transport policy are the client's responsibility.
            username: Optional GitHub username.
            token: Optional GitHub personal access token.
            api_base_url: GitHub REST API base URL. A trailing slash is
                added when missing.
            user_agent: User-Agent header sent with every request.
            console: Optional Rich Console for progress and diagnostics.
            error_console: Optional Rich Console for credential and rate-limit
                failures. Defaults to console.

        Raises:
            ConfigurationError: If only one of username and token is given.
        """
        if (username is None) != (token is None):
            raise ConfigurationError(
                "GitHub username and token must be provided together"
            )

        self._client = client
        if not api_base_url.endswith("/"):
            api_base_url += "/"
        self._api_base_url = api_base_url
        self._console = console
        self._error_console = error_console if error_console is not None else console
        self._authorization: Optional[str] = None

        headers = {"User-Agent": user_agent, "Accept": "application/json"}
        if username is not None and token is not None:
            self._authorization = basic_authorization(username, token)
            headers["Authorization"] = self._authorization
        self._headers = headers

    @classmethod
    def from_config(
        cls,
        config: ResolverConfig,
        client: httpx.AsyncClient,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ) -> "GitHubLicenseResolver":
        """Create a resolver from a ResolverConfig."""
        return cls(
            client,
            config.github_username,
            config.github_token,
            api_base_url=config.api_base_url,
            user_agent=config.user_agent,
            console=console,
            error_console=error_console,
        )

    @property
    def authorization(self) -> Optional[str]:
        """Authorization header value, or None for anonymous access."""
        return self._authorization

    async def resolve_license(self, license_url: Optional[str]) -> Optional[License]:
        """Resolve license for a GitHub LICENSE file URL.

        Args:
            license_url: URL of a LICENSE file on github.com or
                raw.githubusercontent.com, or None.

        Returns:
            License with GitHub's SPDX id and name and the unchanged input URL,
            or None if the URL is not recognized, is not on ``master``, or
            GitHub has no license on record.

        Raises:
            InvalidGitHubCredentialsError: If GitHub answers 401.
            GitHubRateLimitExceededError: If GitHub answers 403.
            MalformedResponseError: If a successful response cannot be parsed.
            NetworkError: If the request fails at the transport level.
        """
        if not license_url:
            return None

        reference = match_license_url(license_url)
        if reference is None:
            return None

        if reference.ref_spec != DEFAULT_REF_SPEC:
            return None

        self._print(
            f"Retrieving GitHub license for repository "
            f"{escape(reference.repository_id)} and ref {escape(reference.ref_spec)}"
        )

        github_license = await self._fetch_github_license(reference)
        if github_license is None:
            self._print(
                f"No license found on GitHub for repository "
                f"{escape(reference.repository_id)} using ref "
                f"{escape(reference.ref_spec)}"
            )
            return None

        return License(
            id=github_license.license.spdx_id,
            name=github_license.license.name,
            url=license_url,
        )

    async def lookup(self, license_url: Optional[str]) -> ResolutionResult:
        """Resolve a license URL into a ResolutionResult.

        Credential and rate-limit failures are reported as result statuses
        instead of exceptions.

        Args:
            license_url: URL of a LICENSE file, or None.

        Returns:
            ResolutionResult describing the outcome.

        Raises:
            MalformedResponseError: If a successful response cannot be parsed.
            NetworkError: If the request fails at the transport level.
        """
        try:
            resolved = await self.resolve_license(license_url)
        except InvalidGitHubCredentialsError as e:
            return ResolutionResult(
                url=license_url,
                status=ResolutionStatus.INVALID_CREDENTIALS,
                error=str(e),
            )
        except GitHubRateLimitExceededError as e:
            return ResolutionResult(
                url=license_url, status=ResolutionStatus.RATE_LIMITED, error=str(e)
            )

        if resolved is None:
            return ResolutionResult(
                url=license_url, status=ResolutionStatus.NOT_APPLICABLE
            )
        return ResolutionResult(
            url=license_url, status=ResolutionStatus.FOUND, license=resolved
        )

    def license_api_url(self, reference: ResolvedReference) -> str:
        """Build the license API URL for a repository and ref."""
        return (
            f"{self._api_base_url}repos/{reference.owner}/{reference.repository}"
            f"/license?ref={reference.ref_spec}"
        )

    async def _fetch_github_license(
        self, reference: ResolvedReference
    ) -> Optional[GitHubLicenseResponse]:
        """Execute a request to GitHub's license API.

        Args:
            reference: Repository and ref to look up.

        Returns:
            Parsed GitHub response, or None for any status other than
            2xx, 401 and 403.
        """
        try:
            response = await self._client.get(
                self.license_api_url(reference), headers=self._headers
            )
        except httpx.RequestError as e:
            raise NetworkError(
                f"Failed to fetch GitHub license for {reference.repository_id}: {e}"
            ) from e

        if httpx.codes.is_success(response.status_code):
            try:
                return GitHubLicenseResponse.model_validate_json(response.content)
            except ValidationError as e:
                raise MalformedResponseError(
                    f"Unexpected GitHub license response for "
                    f"{reference.repository_id}: {e}"
                ) from e

        if response.status_code == httpx.codes.UNAUTHORIZED:
            self._print_error("Invalid GitHub API credentials.")
            raise InvalidGitHubCredentialsError("Invalid GitHub API credentials.")

        if response.status_code == httpx.codes.FORBIDDEN:
            self._print_error("GitHub API rate limit exceeded.")
            raise GitHubRateLimitExceededError("GitHub API rate limit exceeded.")

        # License not found or any other GitHub API failure
        self._print(
            f"GitHub API failed with status code {response.status_code} "
            f"and message {escape(response.reason_phrase)}."
        )
        return None

    def _print(self, message: str) -> None:
        if self._console is not None:
            self._console.print(message)

    def _print_error(self, message: str) -> None:
        if self._error_console is not None:
            self._error_console.print(f"[red]{message}[/red]")
