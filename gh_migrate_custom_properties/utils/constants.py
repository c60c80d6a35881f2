"""Shared constants used across the application."""

# Configuration Constants
# -----------------------

ENV_PREFIX = "GHMC_"
"""Prefix of every environment variable read by the tool (GH Migrate Custom properties)."""

# GitHub Endpoint Constants
# -------------------------

DEFAULT_GITHUB_API_URL = "https://api.github.com"
"""REST endpoint for github.com."""

DEFAULT_GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
"""GraphQL endpoint for github.com."""

# Remote Error Constants
# ----------------------

LIST_OF_STRINGS_ERROR_SIGNATURE = "value must be a list of strings"
"""Text GitHub returns when a single-select value is sent for a multi-select property."""

NOT_ACCESSIBLE_BY_INTEGRATION = "Resource not accessible by integration"
"""Text GitHub returns when an App installation token queries a user-only resource."""
