# This file is intended to hold the setup for the authenticated githubkit client.

"""Sets up the authenticated githubkit client."""

from pathlib import Path
from typing import TypeAlias

import structlog
from githubkit import GitHub
from githubkit.auth import (
    AppAuthStrategy,
    AppInstallationAuthStrategy,
    TokenAuthStrategy,
)

from gh_migrate_custom_properties.configuration.models import ClientConfig, GitHubAuthenticationType

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

GitHubClient: TypeAlias = GitHub[AppInstallationAuthStrategy] | GitHub[TokenAuthStrategy]


def load_private_key(private_key: str) -> str:
    """Returns PEM text, reading it from disk when given a path to a key file."""
    if "-----BEGIN" in private_key:
        return private_key
    key_path = Path(private_key).expanduser()
    if key_path.is_file():
        return key_path.read_text(encoding="utf-8")
    return private_key


async def get_github_app_client(
    github_app_id: str,
    github_app_private_key: str,
    github_app_installation_id: int,
    github_api_url: str,
) -> GitHub[AppInstallationAuthStrategy]:
    """Returns a GitHub client authenticated with an App installation token."""
    if not (github_app_id and github_app_private_key and github_app_installation_id):
        raise RuntimeError("GitHub App authentication requires app_id, private_key, and installation_id in config.")
    auth = AppAuthStrategy(
        app_id=github_app_id,
        private_key=load_private_key(github_app_private_key),
    )
    # Disable HTTP caching to always get fresh data; auto_retry waits out rate limits
    return GitHub(
        auth=auth.as_installation(github_app_installation_id),
        base_url=github_api_url,
        http_cache=False,
        auto_retry=True,
    )


async def get_github_pat_client(github_pat_token: str, github_api_url: str) -> GitHub[TokenAuthStrategy]:
    """Returns a GitHub client authenticated with a token."""
    if not github_pat_token:
        raise RuntimeError("GitHub token authentication requires a token in config.")
    return GitHub(auth=TokenAuthStrategy(github_pat_token), base_url=github_api_url, http_cache=False, auto_retry=True)


async def get_github_client(
    config: ClientConfig,
    github_auth_type: GitHubAuthenticationType,
    github_api_url: str,
) -> GitHubClient:
    """Returns an authenticated GitHub client using either GitHub App or token credentials."""
    logger.debug("Building GitHub client", github_api_url=github_api_url, github_auth_type=github_auth_type.value)
    if github_auth_type == GitHubAuthenticationType.APP:
        return await get_github_app_client(
            github_app_id=config.app_id or "",
            github_app_private_key=config.private_key or "",
            github_app_installation_id=config.installation_id or 0,
            github_api_url=github_api_url,
        )
    return await get_github_pat_client(config.token or "", github_api_url)
