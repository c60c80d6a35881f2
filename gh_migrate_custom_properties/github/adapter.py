"""GitHub client adapter for the githubkit library."""

from typing import Any, Self

import structlog
from githubkit import Response
from githubkit.versions.latest.models import CustomPropertyValue as GitHubCustomPropertyValue

from gh_migrate_custom_properties.configuration.models import ClientConfig
from gh_migrate_custom_properties.configuration.reconcile import validate_github_authentication_configuration
from gh_migrate_custom_properties.schemas.properties import CustomPropertyValue
from gh_migrate_custom_properties.utils.github import get_github_api_urls
from gh_migrate_custom_properties.utils.retry import retry_on_rate_limit

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_client
from .exceptions import handle_github_request_failed
from .graphql import RateLimitAwareGraphQLClient

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

VIEWER_QUERY = """
query {
  viewer {
    login
    email
  }
}
"""


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.graphql = RateLimitAwareGraphQLClient(client)

    @classmethod
    async def create(cls, config: ClientConfig, side: str = "source") -> Self:
        """Create a new GitHub client adapter.

        Args:
            config: Credentials and optional enterprise hostname
            side: Either "source" or "target", used in log and error messages

        Returns:
            Configured GitHubKitAdapter instance

        Raises:
            GitHubAuthenticationConfigurationUndefinedError: If no usable credentials are configured
        """
        github_auth_type = await validate_github_authentication_configuration(config, side)
        github_api_url, graphql_url = get_github_api_urls(config.hostname)
        logger.info(
            "Creating client for GitHub instance",
            side=side,
            github_api_url=github_api_url,
            graphql_url=graphql_url,
            github_auth_type=github_auth_type.value,
        )
        client = await get_github_client(config, github_auth_type, github_api_url)
        return cls(client)

    # Custom property values
    @handle_github_request_failed
    @retry_on_rate_limit()
    async def get_repository_properties(self, owner: str, repo: str) -> list[CustomPropertyValue]:
        """Get all custom property values for a repository."""
        response: Response[list[GitHubCustomPropertyValue]] = await self.client.rest.repos.async_custom_properties_for_repos_get_repository_values(
            owner=owner, repo=repo
        )
        return [CustomPropertyValue(property_name=item.property_name, value=item.value) for item in response.parsed_data]

    @handle_github_request_failed
    @retry_on_rate_limit()
    async def create_or_update_repository_properties(self, owner: str, repo: str, properties: list[CustomPropertyValue]) -> None:
        """Create or update custom property values for a repository."""
        await self.client.rest.repos.async_custom_properties_for_repos_create_or_update_repository_values(
            owner=owner,
            repo=repo,
            properties=[prop.model_dump(mode="json") for prop in properties],
        )

    # Authentication
    async def get_viewer(self) -> dict[str, Any]:
        """Get the login and email of the authenticated user through GraphQL."""
        data = await self.graphql.query(VIEWER_QUERY)
        return data["viewer"]
