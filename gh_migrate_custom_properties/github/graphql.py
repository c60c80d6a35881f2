"""Rate limit aware GitHub GraphQL client."""

import asyncio
from datetime import datetime, timezone
from typing import Any

import structlog
from githubkit.exception import GraphQLFailed, RateLimitExceeded

from gh_migrate_custom_properties.github.client import GitHubClient
from gh_migrate_custom_properties.github.exceptions import GraphQLQueryError, handle_github_request_failed

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

RATE_LIMIT_QUERY = """
query {
  rateLimit {
    remaining
    resetAt
  }
}
"""


class RateLimitAwareGraphQLClient:
    """Issues GraphQL queries only while the GraphQL rate limit budget is not exhausted.

    Every query is preceded by a ``rateLimit`` query. When no budget remains,
    or GitHub answers a query with a rate limit error, the client sleeps and
    checks again. Consecutive waits never drop below an exponentially growing
    floor, so a reset time that has already passed cannot cause a tight loop.
    The GraphQL endpoint is derived by githubkit from the client's base URL.
    """

    def __init__(
        self,
        client: GitHubClient,
        initial_delay: float = 1.0,
        max_delay: float = 60.0,
        exponential_base: float = 2.0,
    ) -> None:
        """Initialize with an authenticated githubkit client and the wait floor settings."""
        self.client = client
        self.initial_delay = initial_delay
        self.max_delay = max_delay
        self.exponential_base = exponential_base

    async def _execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        try:
            return await self.client.graphql.arequest(query, variables)
        except GraphQLFailed as exc:
            errors = [{"message": error.message, "type": error.type} for error in exc.response.errors or []]
            raise GraphQLQueryError(errors) from exc

    @handle_github_request_failed
    async def query(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Run a GraphQL query once budget is available and return its data."""
        floor = self.initial_delay
        while True:
            try:
                rate_limit = (await self._execute(RATE_LIMIT_QUERY))["rateLimit"]
                if rate_limit["remaining"] > 0:
                    return await self._execute(query, variables)
                reset_at = datetime.fromisoformat(rate_limit["resetAt"])
                wait_time = (reset_at - datetime.now(timezone.utc)).total_seconds()
                reason = "budget exhausted"
            except RateLimitExceeded as exc:
                wait_time = exc.retry_after.total_seconds()
                reason = "rate limit error"

            wait_time = max(wait_time, floor)
            logger.warning("GraphQL rate limit reached, sleeping before retrying", reason=reason, wait_time=round(wait_time, 2))
            await asyncio.sleep(wait_time)
            floor = min(floor * self.exponential_base, self.max_delay)
