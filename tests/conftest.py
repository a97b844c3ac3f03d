"""Global test configuration for superkeyloader tests."""

import os
from collections.abc import Generator
from unittest.mock import MagicMock, patch

import httpx
import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop SUPERKEYLOADER_* variables from the test environment."""
    for name in list(os.environ):
        if name.startswith("SUPERKEYLOADER_"):
            monkeypatch.delenv(name)


@pytest.fixture
def mock_httpx_client_cls() -> Generator[MagicMock, None, None]:
    """Mock httpx.Client class used by the provider adapters."""
    client = MagicMock(spec=httpx.Client)
    with patch("superkeyloader.providers._common.httpx.Client") as mock_cls:
        mock_cls.return_value.__enter__.return_value = client
        yield mock_cls


@pytest.fixture
def mock_httpx_client(mock_httpx_client_cls: MagicMock) -> MagicMock:
    """Mock httpx.Client instance, set `get.return_value` on it."""
    return mock_httpx_client_cls.return_value.__enter__.return_value


@pytest.fixture
def mock_transport_handler() -> Generator[MagicMock, None, None]:
    """Run the real httpx.Client against an in-memory transport.

    Set `side_effect` on the returned mock to a `request -> httpx.Response`
    callable.
    """
    handler = MagicMock()
    transport = httpx.MockTransport(lambda request: handler(request))
    client_cls = httpx.Client
    with patch(
        "superkeyloader.providers._common.httpx.Client",
        side_effect=lambda **kwargs: client_cls(transport=transport, **kwargs),
    ):
        yield handler
