"""Output formatters for license-resolver."""

from license_resolver.output.json_output import JsonFormatter
from license_resolver.output.terminal import TerminalFormatter

__all__ = [
    "JsonFormatter",
    "TerminalFormatter",
]
