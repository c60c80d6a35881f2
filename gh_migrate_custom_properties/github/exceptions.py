"""Contains exceptions raised by the GitHub client layer."""

from functools import wraps
from typing import Any, Awaitable, Callable, TypeVar

import structlog
from githubkit.exception import RequestFailed

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


class GitHubRequestError(Exception):
    """Raised when a GitHub request fails with a non rate limit error."""

    def __init__(self, status_code: int, message: str, errors: list[Any] | None = None, url: str | None = None) -> None:
        """Initialize the exception with the details GitHub returned."""
        self.status_code = status_code
        self.message = message
        self.errors = errors or []
        self.url = url
        super().__init__(f"{status_code} {message} | errors: {self.errors} | url: {url}")


class GraphQLQueryError(Exception):
    """Raised when a GitHub GraphQL response carries errors."""

    def __init__(self, errors: list[dict[str, Any]]) -> None:
        """Initialize the exception with the GraphQL error objects."""
        self.errors = errors
        messages = "; ".join(str(error.get("message", error)) for error in errors)
        super().__init__(f"GraphQL query failed: {messages}")


def handle_github_request_failed(func: F) -> F:
    """Decorator to turn githubkit request failures into GitHubRequestError with GitHub's message."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            try:
                error_data = exc.response.json()
            except Exception:
                error_data = {}
            if not isinstance(error_data, dict):
                error_data = {}
            status_code = exc.response.status_code
            message = error_data.get("message", "Request failed")
            errors = error_data.get("errors", [])
            url = str(getattr(exc.response, "url", None))
            logger.debug(
                "GitHub request failed",
                function=func.__name__,
                status_code=status_code,
                message=message,
                errors=errors,
                url=url,
            )
            raise GitHubRequestError(status_code, message, errors, url) from exc

    return wrapper  # type: ignore
