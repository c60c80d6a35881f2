"""Models for configuration between CLI arguments and environment variables."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class GitHubAuthenticationType(str, Enum):
    """Enum for GitHub authentication types."""

    PAT = "pat"
    APP = "app"


@dataclass
class ClientConfig:
    """Credentials and host for one side (source or target) of the migration."""

    token: str | None = None
    hostname: str | None = None
    app_id: str | None = None
    private_key: str | None = None
    installation_id: int | None = None


@dataclass
class SyncPropertiesConfig:
    """Configuration for a custom property sync run."""

    target_organization: str
    repository_list: Path
    convert_props: bool = False
    source_organization: str | None = None
    source: ClientConfig = field(default_factory=ClientConfig)
    target: ClientConfig = field(default_factory=ClientConfig)
