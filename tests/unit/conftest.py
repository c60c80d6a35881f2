"""Fixtures for unit tests."""

from typing import Any, Generator

import httpx
import pytest
import structlog
from githubkit import Response
from githubkit.exception import RequestFailed


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


class DummyResponse:
    """A dummy response object to mock parsed githubkit responses."""

    def __init__(self, parsed_data: Any = None, status_code: int = 200) -> None:
        """Initialize the dummy response with a status code and parsed data."""
        self.status_code = status_code
        self.parsed_data = parsed_data


def make_response(
    status_code: int,
    data: Any = None,
    headers: dict[str, str] | None = None,
    url: str = "https://api.github.com/repos/owner/repo/properties/values",
) -> Response[Any]:
    """Build a githubkit Response around an httpx response with a JSON body."""
    raw_response = httpx.Response(
        status_code,
        json=data,
        headers=headers,
        request=httpx.Request("GET", url),
    )
    return Response(raw_response, Any)


def make_request_failed(status_code: int, data: Any = None, headers: dict[str, str] | None = None) -> RequestFailed:
    """Build a githubkit RequestFailed around a failed response."""
    return RequestFailed(make_response(status_code, data, headers))


@pytest.fixture
def dummy_response() -> type[DummyResponse]:
    """Expose the DummyResponse class to tests."""
    return DummyResponse


@pytest.fixture
def request_failed_factory() -> Any:
    """Expose the RequestFailed builder to tests."""
    return make_request_failed


@pytest.fixture
def response_factory() -> Any:
    """Expose the githubkit Response builder to tests."""
    return make_response
