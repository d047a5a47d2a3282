"""Constants for license-resolver."""

from license_resolver import __version__

# Exit codes
EXIT_SUCCESS = 0  # Every URL resolved to a license
EXIT_UNRESOLVED = 1  # One or more URLs had no license on record
EXIT_ERROR = 2  # Resolution failed due to error

GITHUB_API_BASE_URL = "https://api.github.com/"

# GitHub's license API is only trusted for the default branch
DEFAULT_REF_SPEC = "master"

DEFAULT_USER_AGENT = f"license-resolver/{__version__}"

# Seconds; applied to clients created by license-resolver itself
DEFAULT_TIMEOUT = 30.0

# Rate limiting for concurrent HTTP requests
MAX_CONCURRENT_REQUESTS = 10
