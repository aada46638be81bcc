from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import httpx
import pytest

from patientget.execution import Transport

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_response() -> httpx.Response:
    """Create a mock httpx.Response for testing."""
    return Mock(spec=httpx.Response, status_code=200)


@pytest.fixture
def mock_transport(mock_response: httpx.Response) -> Mock:
    """Create a mock transport whose send method returns
    ``mock_response``."""
    return Mock(spec=Transport, send=Mock(return_value=mock_response))


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback, e.g. to observe retries."""
    return Mock()


@pytest.fixture
def http_request() -> httpx.Request:
    """Create a GET request for strategy tests."""
    return httpx.Request("GET", "https://api.example.com/data")
