"""Contains utility functions for GitHub interactions."""

from gh_migrate_custom_properties.utils.constants import DEFAULT_GITHUB_API_URL, DEFAULT_GITHUB_GRAPHQL_URL


async def split_repository_in_configuration(repo: str | None) -> tuple[str, str]:
    """Splits a repository reference into owner and repository."""
    if repo is None:
        raise ValueError("Repository reference is required.")
    repo = repo.strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError("Repository must be in the format 'owner/repo' with no leading/trailing slashes or extra parts.")
    owner, repository = parts
    return owner, repository


def normalize_hostname(hostname: str) -> str:
    """Strip a trailing slash and force an https:// prefix onto an enterprise hostname."""
    hostname = hostname.strip().rstrip("/")
    if hostname.startswith("http://"):
        hostname = hostname.removeprefix("http://")
    if not hostname.startswith("https://"):
        hostname = f"https://{hostname}"
    return hostname


def get_github_api_urls(hostname: str | None) -> tuple[str, str]:
    """Returns the REST and GraphQL endpoints for github.com or a GitHub Enterprise Server host."""
    if not hostname:
        return DEFAULT_GITHUB_API_URL, DEFAULT_GITHUB_GRAPHQL_URL
    host = normalize_hostname(hostname)
    return f"{host}/api/v3/", f"{host}/api/graphql"
