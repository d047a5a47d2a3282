"""Concurrent resolution of many license URLs."""
import asyncio
from typing import Optional

import httpx
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from license_resolver.exceptions import NetworkError
from license_resolver.models.config import ResolverConfig
from license_resolver.models.result import ResolutionResult, ResolutionStatus
from license_resolver.resolvers.github import GitHubLicenseResolver


async def resolve_license_urls(
    urls: list[str],
    config: ResolverConfig,
    client: Optional[httpx.AsyncClient] = None,
    console: Optional[Console] = None,
    show_progress: bool = True,
    error_console: Optional[Console] = None,
) -> list[ResolutionResult]:
    """Resolve licenses for many URLs through one GitHub resolver.

    All URLs share a single resolver (and so a single authorization
    header) and a single HTTP client. A credential or rate-limit failure
    is recorded in that URL's result and does not affect the others.

    Args:
        urls: License URLs to resolve.
        config: Resolver configuration (credentials, API base, limits).
        client: Optional shared httpx.AsyncClient. If not provided,
            one is created with the configured timeout.
        console: Optional Rich Console for progress display.
        show_progress: Whether to show progress indicator (default: True).
        error_console: Optional Rich Console for credential and rate-limit
            notices. Per-URL progress notices are not printed in batches.

    Returns:
        One ResolutionResult per URL, in input order.

    Raises:
        MalformedResponseError: If GitHub returns an unparseable response.

    Note:
        NetworkErrors are caught and reported as NOT_APPLICABLE results
        carrying the error message, to allow partial results.
    """
    semaphore = asyncio.Semaphore(config.max_concurrent_requests)

    async def resolve_one(
        url: str, resolver: GitHubLicenseResolver
    ) -> ResolutionResult:
        async with semaphore:
            try:
                return await resolver.lookup(url)
            except NetworkError as e:
                return ResolutionResult(
                    url=url, status=ResolutionStatus.NOT_APPLICABLE, error=str(e)
                )

    async def run(c: httpx.AsyncClient) -> list[ResolutionResult]:
        resolver = GitHubLicenseResolver.from_config(
            config, c, error_console=error_console
        )

        if console is not None and show_progress and len(urls) > 0:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
                transient=True,
            ) as progress:
                task_id = progress.add_task(
                    f"Resolving {len(urls)} license URLs...", total=len(urls)
                )

                async def resolve_indexed(
                    idx: int, url: str
                ) -> tuple[int, ResolutionResult]:
                    return idx, await resolve_one(url, resolver)

                resolved: list[Optional[ResolutionResult]] = [None] * len(urls)
                for coro in asyncio.as_completed(
                    [resolve_indexed(i, url) for i, url in enumerate(urls)]
                ):
                    idx, result = await coro
                    resolved[idx] = result
                    progress.advance(task_id)

                return [result for result in resolved if result is not None]

        return list(
            await asyncio.gather(*(resolve_one(url, resolver) for url in urls))
        )

    if client is not None:
        return await run(client)

    async with httpx.AsyncClient(timeout=httpx.Timeout(config.timeout)) as new_client:
        return await run(new_client)
