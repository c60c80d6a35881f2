"""Contains results of the property sync workflow."""

from dataclasses import dataclass, field

from gh_migrate_custom_properties.schemas.properties import CustomPropertyValue


@dataclass
class SyncStatistics:
    """Counters and failure lists accumulated during one sync run."""

    total_processed: int = 0
    successful_fetch: int = 0
    successful_create: int = 0
    fetch_failures: list[str] = field(default_factory=list)
    create_failures: list[str] = field(default_factory=list)
    converted: list[str] = field(default_factory=list)
    setup_errors: list[str] = field(default_factory=list)

    @property
    def has_failures(self) -> bool:
        """Whether any repository failed or the run could not be set up."""
        return bool(self.fetch_failures or self.create_failures or self.setup_errors)


@dataclass
class RepositoryProperties:
    """Custom property values fetched from the source, keyed by repository name."""

    repositories: dict[str, list[CustomPropertyValue]] = field(default_factory=dict)
