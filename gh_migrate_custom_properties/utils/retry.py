"""Retry decorator for waiting out GitHub REST rate limits.

githubkit already retries rate limited requests on its own. This decorator is
the second line: when githubkit gives up, the call is retried after the wait
GitHub asked for, so rate limits never surface as per-repository failures.
"""

import asyncio
import functools
import inspect
import time
from typing import Any, Callable, TypeVar

import structlog
from githubkit.exception import PrimaryRateLimitExceeded, RequestFailed, SecondaryRateLimitExceeded

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _wait_time_from_headers(headers: Any, default: float) -> float:
    """Seconds to wait according to retry-after or x-ratelimit-reset, else the default."""
    retry_after = headers.get("retry-after")
    if retry_after:
        try:
            return float(retry_after)
        except ValueError:
            logger.warning("Invalid retry-after header value", retry_after=retry_after)

    rate_limit_reset = headers.get("x-ratelimit-reset")
    if rate_limit_reset:
        try:
            reset_timestamp = int(rate_limit_reset)
        except ValueError:
            logger.warning("Invalid x-ratelimit-reset header value", rate_limit_reset=rate_limit_reset)
        else:
            current_timestamp = int(time.time())
            if reset_timestamp > current_timestamp:
                return float(reset_timestamp - current_timestamp + 1)

    return default


def _is_rate_limit_response(exc: RequestFailed) -> bool:
    status_code = exc.response.status_code
    if status_code == 429:
        return True
    if status_code != 403:
        return False
    if exc.response.headers.get("x-ratelimit-remaining") == "0":
        return True
    try:
        message = str(exc.response.json().get("message", ""))
    except Exception:
        message = ""
    return "rate limit" in message.lower()


def retry_on_rate_limit(
    max_retries: int = 100,
    initial_delay: float = 10.0,
    max_delay: float = 3600.0,
    exponential_base: float = 2.0,
) -> Callable[[F], F]:
    """Decorator for retrying async GitHub REST calls that hit a rate limit.

    Only rate limit responses (429, or 403 flagged as a rate limit) are
    retried. Any other failure is raised immediately.

    Args:
        max_retries: Maximum number of retry attempts (default: 100)
        initial_delay: Delay in seconds when GitHub gives no hint (default: 10.0)
        max_delay: Upper bound for a single wait in seconds (default: 3600.0)
        exponential_base: Growth factor of the fallback delay (default: 2.0)
    """

    def decorator(func: F) -> F:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"Function {func.__name__} decorated with @retry_on_rate_limit must be async.")

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            delay = initial_delay
            for attempt in range(max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except (PrimaryRateLimitExceeded, SecondaryRateLimitExceeded) as e:
                    if attempt == max_retries:
                        logger.error("Max retries reached for GitHub rate limit error", function=func.__name__, attempt=attempt + 1)
                        raise
                    retry_after = getattr(e, "retry_after", None)
                    wait_time = retry_after.total_seconds() if retry_after else delay
                    rate_limit_type = "primary" if isinstance(e, PrimaryRateLimitExceeded) else "secondary"
                except RequestFailed as e:
                    if not _is_rate_limit_response(e):
                        raise
                    if attempt == max_retries:
                        logger.error(
                            "Max retries reached for rate limit error",
                            function=func.__name__,
                            attempt=attempt + 1,
                            status_code=e.response.status_code,
                        )
                        raise
                    wait_time = _wait_time_from_headers(e.response.headers, delay)
                    rate_limit_type = "response"

                wait_time = min(wait_time, max_delay)
                logger.warning(
                    f"GitHub rate limit exceeded, waiting {wait_time} seconds",
                    function=func.__name__,
                    rate_limit_type=rate_limit_type,
                    attempt=attempt + 1,
                    max_retries=max_retries,
                )
                await asyncio.sleep(wait_time)
                delay = min(delay * exponential_base, max_delay)

        return async_wrapper  # type: ignore

    return decorator
