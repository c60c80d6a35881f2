"""Reconcile GitHub authentication configuration."""

import structlog

from gh_migrate_custom_properties.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError
from gh_migrate_custom_properties.configuration.models import ClientConfig, GitHubAuthenticationType
from gh_migrate_custom_properties.utils.constants import ENV_PREFIX

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def validate_github_authentication_configuration(config: ClientConfig, side: str) -> GitHubAuthenticationType:
    """Validates the GitHub authentication configuration for one side of the migration.

    Complete GitHub App credentials take precedence over a token. A token is
    used when the App credentials are absent or incomplete.

    Args:
        config (ClientConfig): The credentials for this side.
        side (str): Either "source" or "target", used in messages and
            environment variable names.

    Raises:
        GitHubAuthenticationConfigurationUndefinedError: If neither a token nor
            complete GitHub App credentials are available.

    Returns:
        GitHubAuthenticationType: The type of GitHub authentication to use.
    """
    if config.app_id and config.private_key and config.installation_id:
        return GitHubAuthenticationType.APP

    partial_app_configuration = bool(config.app_id or config.private_key or config.installation_id)

    if config.token:
        if partial_app_configuration:
            logger.warning("Incomplete GitHub App configuration, falling back to token authentication", side=side)
        return GitHubAuthenticationType.PAT

    if partial_app_configuration:
        prefix = f"{ENV_PREFIX}{side.upper()}"
        missing_settings: list[dict[str, str]] = []
        if not config.app_id:
            missing_settings.append({"name": "GitHub App ID", "env_name": f"{prefix}_APP_ID"})
        if not config.private_key:
            missing_settings.append({"name": "GitHub App private key", "env_name": f"{prefix}_PRIVATE_KEY"})
        if not config.installation_id:
            missing_settings.append({"name": "GitHub App installation ID", "env_name": f"{prefix}_INSTALLATION_ID"})
        msg = f"Incomplete {side} GitHub App configuration - missing settings include " + ", ".join(
            f"{setting['name']} (environment variable {setting['env_name']})" for setting in missing_settings
        )
        raise GitHubAuthenticationConfigurationUndefinedError(msg)

    raise GitHubAuthenticationConfigurationUndefinedError(
        f"Missing credentials for {side}: please provide either a token or a complete GitHub App configuration."
    )
