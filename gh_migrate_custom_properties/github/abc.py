"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any

from gh_migrate_custom_properties.schemas.properties import CustomPropertyValue


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients used by the property sync engine."""

    # Custom property values
    @abstractmethod
    async def get_repository_properties(self, owner: str, repo: str) -> list[CustomPropertyValue]:
        """Get all custom property values for a repository."""
        pass

    @abstractmethod
    async def create_or_update_repository_properties(self, owner: str, repo: str, properties: list[CustomPropertyValue]) -> None:
        """Create or update custom property values for a repository."""
        pass

    # Authentication
    @abstractmethod
    async def get_viewer(self) -> dict[str, Any]:
        """Get the login and email of the authenticated user."""
        pass
