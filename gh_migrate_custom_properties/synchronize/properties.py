"""Contains synchronization logic for repository custom property values."""

import structlog

from gh_migrate_custom_properties.github.abc import GitHubClientBase
from gh_migrate_custom_properties.github.exceptions import GitHubRequestError
from gh_migrate_custom_properties.schemas.properties import CustomPropertyValue
from gh_migrate_custom_properties.synchronize.models import FetchOutcome, RemoteErrorKind
from gh_migrate_custom_properties.synchronize.results import RepositoryProperties, SyncStatistics
from gh_migrate_custom_properties.utils.constants import LIST_OF_STRINGS_ERROR_SIGNATURE
from gh_migrate_custom_properties.utils.github import split_repository_in_configuration

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class PropertyConversionError(Exception):
    """Raised when the single-select to multi-select fallback cannot complete."""

    pass


def _error_message(error: Exception) -> str:
    if isinstance(error, GitHubRequestError):
        return error.message
    return str(error)


def classify_remote_error(error: Exception) -> RemoteErrorKind:
    """Decide how a failed create call is handled.

    This is the only place that inspects GitHub's error wording.
    """
    if LIST_OF_STRINGS_ERROR_SIGNATURE in str(error) or LIST_OF_STRINGS_ERROR_SIGNATURE in _error_message(error):
        return RemoteErrorKind.LIST_OF_STRINGS
    return RemoteErrorKind.OTHER


def extract_property_name(error_message: str) -> str:
    """Return the first single-quoted substring of an error message, or "" if there is none.

    Example: "422 Property 'Domain' values must be strings" -> "Domain"
    """
    parts = error_message.split("'")
    if len(parts) >= 3:
        return parts[1].strip()
    return ""


def convert_property_value(properties: list[CustomPropertyValue], failed_property_name: str) -> list[CustomPropertyValue]:
    """Return a copy of the properties with one single-select value turned into a multi-select value.

    Only the property named failed_property_name whose value is a string is
    rewritten. The input list and its models are not modified.
    """
    converted: list[CustomPropertyValue] = []
    for prop in properties:
        if prop.property_name == failed_property_name and isinstance(prop.value, str):
            logger.info("Converting property from single-select to multi-select", property_name=failed_property_name)
            converted.append(prop.model_copy(update={"value": [prop.value]}))
        else:
            converted.append(prop.model_copy(deep=True))
    return converted


async def fetch_repository_properties(
    source: GitHubClientBase,
    repository: str,
    repository_properties: RepositoryProperties,
) -> FetchOutcome:
    """Fetch one repository's property values and store them when there are any."""
    try:
        owner, repo_name = await split_repository_in_configuration(repository)
        properties = await source.get_repository_properties(owner, repo_name)
    except Exception as exc:
        logger.error("Error fetching repository properties", repository=repository, error=str(exc))
        return FetchOutcome.FAILED

    if not properties:
        logger.info("No repository properties found", repository=repository)
        return FetchOutcome.EMPTY

    repository_properties.repositories[repo_name] = properties
    logger.debug("Fetched repository properties", repository=repository, property_count=len(properties))
    return FetchOutcome.FETCHED


async def fetch_properties(
    source: GitHubClientBase,
    repositories: list[str],
    repository_properties: RepositoryProperties,
    stats: SyncStatistics,
) -> None:
    """Fetch properties for all repositories in list order and track stats.

    A failed fetch is recorded and the next repository is processed.
    """
    for repository in repositories:
        outcome = await fetch_repository_properties(source, repository, repository_properties)
        if outcome == FetchOutcome.FAILED:
            stats.fetch_failures.append(repository)
        elif outcome == FetchOutcome.FETCHED:
            stats.successful_fetch += 1


async def handle_property_conversion(
    target: GitHubClientBase,
    repository_name: str,
    properties: list[CustomPropertyValue],
    target_owner: str,
    error: Exception,
) -> None:
    """Convert the property named in the error to multi-select and retry the create call once.

    Raises:
        PropertyConversionError: If no property name can be read from the error.
        Exception: Whatever the retried create call raises.
    """
    property_name = extract_property_name(_error_message(error))
    if not property_name:
        raise PropertyConversionError(f"Could not extract property name from error: {error}")

    converted_properties = convert_property_value(properties, property_name)
    await target.create_or_update_repository_properties(target_owner, repository_name, converted_properties)


async def create_properties(
    target: GitHubClientBase,
    repository_properties: RepositoryProperties,
    target_owner: str,
    stats: SyncStatistics,
    convert_props: bool = False,
) -> None:
    """Create all stored properties in the target repositories and track stats."""
    for repository_name, properties in repository_properties.repositories.items():
        try:
            await target.create_or_update_repository_properties(target_owner, repository_name, properties)
        except Exception as exc:
            if not (convert_props and classify_remote_error(exc) == RemoteErrorKind.LIST_OF_STRINGS):
                logger.error("Failed to create properties", repository=repository_name, target_owner=target_owner, error=str(exc))
                stats.create_failures.append(repository_name)
                continue

            try:
                await handle_property_conversion(target, repository_name, properties, target_owner, exc)
            except Exception as conversion_exc:
                logger.error(
                    "Failed to create properties after conversion",
                    repository=repository_name,
                    target_owner=target_owner,
                    error=str(conversion_exc),
                )
                stats.create_failures.append(repository_name)
                continue

            stats.converted.append(repository_name)

        stats.successful_create += 1
        logger.debug("Created properties", repository=repository_name, target_owner=target_owner)
