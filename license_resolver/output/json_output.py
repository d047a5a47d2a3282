"""JSON output formatter for resolution results."""
import json
from datetime import datetime, timezone
from typing import Any

from license_resolver import __version__
from license_resolver.models.result import ResolutionResult


class JsonFormatter:
    """Format resolution results as JSON for programmatic processing."""

    def format_results(self, results: list[ResolutionResult]) -> str:
        """Format resolution results as JSON string.

        Args:
            results: The resolution results to format.

        Returns:
            JSON string with metadata and one entry per URL.
        """
        output = {
            "metadata": self._build_metadata(),
            "results": [self._build_result(result) for result in results],
        }
        return json.dumps(output, indent=2)

    def _build_metadata(self) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {"generated_at": timestamp, "tool_version": __version__}

    def _build_result(self, result: ResolutionResult) -> dict[str, Any]:
        return {
            "url": result.url,
            "status": result.status.value,
            "license": (
                result.license.model_dump() if result.license is not None else None
            ),
            "error": result.error,
        }
