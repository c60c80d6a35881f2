"""Unit tests for the GitHubKitAdapter class and related GitHub operations."""

from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from gh_migrate_custom_properties.configuration.exceptions import GitHubAuthenticationConfigurationUndefinedError
from gh_migrate_custom_properties.configuration.models import ClientConfig
from gh_migrate_custom_properties.github.adapter import GitHubKitAdapter
from gh_migrate_custom_properties.github.exceptions import GitHubRequestError
from gh_migrate_custom_properties.schemas.properties import CustomPropertyValue


@pytest.mark.asyncio
async def test_get_repository_properties(dummy_response: Any) -> None:
    """Test that property values are converted into models."""
    adapter = GitHubKitAdapter(MagicMock())
    adapter.client.rest.repos.async_custom_properties_for_repos_get_repository_values = AsyncMock(
        return_value=dummy_response(
            parsed_data=[
                SimpleNamespace(property_name="Domain", value="Frontend"),
                SimpleNamespace(property_name="Teams", value=["a", "b"]),
                SimpleNamespace(property_name="Unset", value=None),
            ]
        )
    )

    properties = await adapter.get_repository_properties("owner", "repo")

    adapter.client.rest.repos.async_custom_properties_for_repos_get_repository_values.assert_awaited_once_with(owner="owner", repo="repo")
    assert properties == [
        CustomPropertyValue(property_name="Domain", value="Frontend"),
        CustomPropertyValue(property_name="Teams", value=["a", "b"]),
        CustomPropertyValue(property_name="Unset", value=None),
    ]


@pytest.mark.asyncio
async def test_get_repository_properties_empty(dummy_response: Any) -> None:
    """Test that a repository without values yields an empty list."""
    adapter = GitHubKitAdapter(MagicMock())
    adapter.client.rest.repos.async_custom_properties_for_repos_get_repository_values = AsyncMock(return_value=dummy_response(parsed_data=[]))
    assert await adapter.get_repository_properties("owner", "repo") == []


@pytest.mark.asyncio
async def test_create_or_update_repository_properties(dummy_response: Any) -> None:
    """Test that property values are sent as plain property payloads."""
    adapter = GitHubKitAdapter(MagicMock())
    adapter.client.rest.repos.async_custom_properties_for_repos_create_or_update_repository_values = AsyncMock(
        return_value=dummy_response(status_code=204)
    )

    await adapter.create_or_update_repository_properties(
        "target-org",
        "repo",
        [
            CustomPropertyValue(property_name="Domain", value=["Frontend"]),
            CustomPropertyValue(property_name="Owner", value="platform"),
        ],
    )

    adapter.client.rest.repos.async_custom_properties_for_repos_create_or_update_repository_values.assert_awaited_once_with(
        owner="target-org",
        repo="repo",
        properties=[
            {"property_name": "Domain", "value": ["Frontend"]},
            {"property_name": "Owner", "value": "platform"},
        ],
    )


@pytest.mark.asyncio
async def test_create_or_update_repository_properties_422(request_failed_factory: Any) -> None:
    """Test that a 422 failure is raised as GitHubRequestError carrying GitHub's message."""
    adapter = GitHubKitAdapter(MagicMock())
    adapter.client.rest.repos.async_custom_properties_for_repos_create_or_update_repository_values = AsyncMock(
        side_effect=request_failed_factory(422, {"message": "Property 'Domain' value must be a list of strings", "errors": []})
    )

    with pytest.raises(GitHubRequestError) as exc_info:
        await adapter.create_or_update_repository_properties("target-org", "repo", [])

    assert exc_info.value.status_code == 422
    assert exc_info.value.message == "Property 'Domain' value must be a list of strings"
    assert "value must be a list of strings" in str(exc_info.value)


@pytest.mark.asyncio
async def test_get_repository_properties_not_found(request_failed_factory: Any) -> None:
    """Test that a 404 is raised as GitHubRequestError without retrying."""
    adapter = GitHubKitAdapter(MagicMock())
    adapter.client.rest.repos.async_custom_properties_for_repos_get_repository_values = AsyncMock(
        side_effect=request_failed_factory(404, {"message": "Not Found"})
    )

    with pytest.raises(GitHubRequestError, match="404 Not Found"):
        await adapter.get_repository_properties("owner", "missing")
    adapter.client.rest.repos.async_custom_properties_for_repos_get_repository_values.assert_awaited_once()


@pytest.mark.asyncio
async def test_get_repository_properties_waits_out_rate_limit(request_failed_factory: Any, dummy_response: Any) -> None:
    """Test that a rate limited read is retried instead of failing the repository."""
    adapter = GitHubKitAdapter(MagicMock())
    adapter.client.rest.repos.async_custom_properties_for_repos_get_repository_values = AsyncMock(
        side_effect=[
            request_failed_factory(429, {"message": "Too Many Requests"}, {"retry-after": "3"}),
            dummy_response(parsed_data=[SimpleNamespace(property_name="Domain", value="Frontend")]),
        ]
    )

    with patch("gh_migrate_custom_properties.utils.retry.asyncio.sleep", new=AsyncMock()) as mock_sleep:
        properties = await adapter.get_repository_properties("owner", "repo")

    assert properties == [CustomPropertyValue(property_name="Domain", value="Frontend")]
    mock_sleep.assert_awaited_once_with(3.0)


@pytest.mark.asyncio
async def test_get_viewer_uses_graphql() -> None:
    """Test that the viewer is read through the rate limit aware GraphQL client."""
    adapter = GitHubKitAdapter(MagicMock())
    adapter.graphql.query = AsyncMock(return_value={"viewer": {"login": "octocat", "email": ""}})

    viewer = await adapter.get_viewer()

    assert viewer["login"] == "octocat"
    adapter.graphql.query.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_uses_enterprise_urls() -> None:
    """Test that the adapter is built against the enterprise REST endpoint."""
    client = MagicMock()
    with patch("gh_migrate_custom_properties.github.adapter.get_github_client", new=AsyncMock(return_value=client)) as mock_client:
        adapter = await GitHubKitAdapter.create(ClientConfig(token="token", hostname="github.example.com/"), side="source")

    assert mock_client.await_args.args[2] == "https://github.example.com/api/v3/"
    assert adapter.client is client
    assert adapter.graphql.client is client


@pytest.mark.asyncio
async def test_create_without_credentials_fails() -> None:
    """Test that the adapter refuses to build an unauthenticated client."""
    with pytest.raises(GitHubAuthenticationConfigurationUndefinedError):
        await GitHubKitAdapter.create(ClientConfig(), side="target")
