"""Orchestrates the synchronization of repository custom property values."""

import time

import structlog

from gh_migrate_custom_properties.configuration.models import SyncPropertiesConfig
from gh_migrate_custom_properties.github.abc import GitHubClientBase
from gh_migrate_custom_properties.github.adapter import GitHubKitAdapter
from gh_migrate_custom_properties.github.exceptions import GitHubRequestError, GraphQLQueryError
from gh_migrate_custom_properties.synchronize.properties import create_properties, fetch_properties
from gh_migrate_custom_properties.synchronize.results import RepositoryProperties, SyncStatistics
from gh_migrate_custom_properties.utils.constants import NOT_ACCESSIBLE_BY_INTEGRATION
from gh_migrate_custom_properties.utils.repository_list import RepositoryListError, parse_repository_file

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def verify_authentication(adapter: GitHubClientBase, side: str) -> str | None:
    """Check that the credentials for one side work and return the authenticated login.

    App installation tokens cannot query the viewer, so that specific denial
    is tolerated and None is returned.
    """
    try:
        viewer = await adapter.get_viewer()
    except (GraphQLQueryError, GitHubRequestError) as exc:
        if NOT_ACCESSIBLE_BY_INTEGRATION in str(exc):
            logger.info("Skipping viewer check for GitHub App installation", side=side)
            return None
        raise
    login = viewer.get("login")
    logger.info("Authenticated to GitHub", side=side, login=login)
    return login


def log_sync_outcome(stats: SyncStatistics) -> None:
    """Log the overall outcome of a run."""
    if stats.create_failures and stats.successful_create > 0:
        logger.warning("Some repository properties failed to sync", create_failures=len(stats.create_failures))
    elif stats.create_failures:
        logger.error("All repositories failed to sync properties", create_failures=len(stats.create_failures))
    elif stats.setup_errors:
        logger.error("Repository properties were not synced", setup_errors=len(stats.setup_errors))
    else:
        logger.info("All repository properties synced successfully", successful_create=stats.successful_create)


async def run_sync_properties_workflow(
    config: SyncPropertiesConfig,
    source_adapter: GitHubClientBase | None = None,
    target_adapter: GitHubClientBase | None = None,
    verify: bool = True,
) -> SyncStatistics:
    """Run the sync: read the repository list, fetch every source repository, then create in the target.

    Adapters are built from the configuration unless provided. Client
    construction and authentication failures propagate. A repository list
    that cannot be read is recorded in the statistics and the run ends with
    zero counts.
    """
    if source_adapter is None:
        source_adapter = await GitHubKitAdapter.create(config.source, side="source")
    if target_adapter is None:
        target_adapter = await GitHubKitAdapter.create(config.target, side="target")

    if verify:
        await verify_authentication(source_adapter, "source")
        await verify_authentication(target_adapter, "target")

    stats = SyncStatistics()
    try:
        repositories = parse_repository_file(config.repository_list, default_owner=config.source_organization)
    except (RepositoryListError, OSError) as exc:
        logger.error("Failed to read repository list", path=str(config.repository_list), error=str(exc))
        stats.setup_errors.append(f"Failed to read repository list {config.repository_list}: {exc}")
        log_sync_outcome(stats)
        return stats

    stats.total_processed = len(repositories)
    repository_properties = RepositoryProperties()

    start_time = time.time()
    logger.info("Retrieving source custom properties from repositories", repository_count=len(repositories))
    await fetch_properties(source_adapter, repositories, repository_properties, stats)
    logger.info(
        "Retrieved source custom properties",
        duration=round(time.time() - start_time, 2),
        successful_fetch=stats.successful_fetch,
        fetch_failures=len(stats.fetch_failures),
    )

    start_time = time.time()
    logger.info(
        "Creating properties in target repositories",
        target_owner=config.target_organization,
        repository_count=len(repository_properties.repositories),
        convert_props=config.convert_props,
    )
    await create_properties(
        target_adapter,
        repository_properties,
        config.target_organization,
        stats,
        convert_props=config.convert_props,
    )
    logger.info(
        "Created properties in target repositories",
        duration=round(time.time() - start_time, 2),
        successful_create=stats.successful_create,
        create_failures=len(stats.create_failures),
    )

    log_sync_outcome(stats)
    return stats
