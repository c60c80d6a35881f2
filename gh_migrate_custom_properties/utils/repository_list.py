"""Parses repository list files into normalized owner/repo references.

A repository list holds one repository per line in any of these forms::

    owner/repo
    https://github.com/owner/repo
    repo            (only when a default owner is configured)

Blank lines are skipped. Any other line fails the whole read.
"""

from pathlib import Path
from urllib.parse import urlparse

import structlog

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class RepositoryListError(ValueError):
    """Raised when a repository list file cannot be turned into repository references."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        """Initialize the exception with the offending line number, if any."""
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


def _parse_repository_url(line: str, line_number: int) -> str:
    parsed = urlparse(line)
    segments = [segment for segment in parsed.path.split("/") if segment]
    if not parsed.netloc or len(segments) != 2:
        raise RepositoryListError(f"invalid repository URL {line!r}, expected https://<host>/<owner>/<repo>", line_number)
    owner, repository = segments
    repository = repository.removesuffix(".git")
    if not repository:
        raise RepositoryListError(f"invalid repository URL {line!r}, repository name is empty", line_number)
    return f"{owner}/{repository}"


def parse_repository_line(line: str, line_number: int, default_owner: str | None = None) -> str | None:
    """Normalize one line of a repository list.

    Returns None for blank lines and raises RepositoryListError for malformed ones.
    """
    line = line.strip()
    if not line:
        return None

    if line.startswith(("http://", "https://")):
        return _parse_repository_url(line, line_number)

    if ":" in line:
        raise RepositoryListError(f"invalid URI {line!r}", line_number)

    if "/" in line:
        parts = line.strip("/").split("/")
        if len(parts) != 2 or not all(parts):
            raise RepositoryListError(f"invalid repository {line!r}, expected owner/repo", line_number)
        return f"{parts[0]}/{parts[1]}"

    if default_owner:
        return f"{default_owner}/{line}"
    raise RepositoryListError(
        f"repository {line!r} has no owner, use owner/repo or configure a source organization",
        line_number,
    )


def parse_repository_file(path: Path, default_owner: str | None = None) -> list[str]:
    """Read a repository list file into an ordered list of owner/repo strings.

    Duplicates are preserved in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        RepositoryListError: If a line is malformed or the file lists no repositories.
    """
    repositories: list[str] = []
    with open(path, encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            repository = parse_repository_line(line, line_number, default_owner=default_owner)
            if repository is not None:
                repositories.append(repository)

    if not repositories:
        raise RepositoryListError("no repositories found in the list")

    logger.info("Loaded repository list", path=str(path), repository_count=len(repositories))
    return repositories
