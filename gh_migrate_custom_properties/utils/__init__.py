"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_GITHUB_API_URL,
    DEFAULT_GITHUB_GRAPHQL_URL,
    ENV_PREFIX,
    LIST_OF_STRINGS_ERROR_SIGNATURE,
)
from .retry import retry_on_rate_limit

__all__ = [
    "DEFAULT_GITHUB_API_URL",
    "DEFAULT_GITHUB_GRAPHQL_URL",
    "ENV_PREFIX",
    "LIST_OF_STRINGS_ERROR_SIGNATURE",
    "retry_on_rate_limit",
]
