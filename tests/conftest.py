"""
Shared pytest fixtures for all tests.

Provides a stub SOAP invoker and client factories so no test touches the
network.
"""

from collections.abc import Mapping
from typing import Any, Callable

import pytest

from sedo_client import SedoClient
from sedo_client.config import reset_settings


class StubInvoker:
    """ISoapInvoker double returning a canned result and recording calls."""

    def __init__(self, result: Any = None) -> None:
        self.result = result
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def invoke(self, method: str, arguments: Mapping[str, Any]) -> Any:
        self.calls.append((method, dict(arguments)))
        return self.result


@pytest.fixture
def credentials() -> dict[str, str]:
    """Credential arguments for SedoClient."""
    return {
        "username": "reseller",
        "password": "s3cret",
        "sign_key": "sign-123",
        "partner_id": "4711",
    }


@pytest.fixture
def stub_invoker() -> StubInvoker:
    """Stub invoker returning None until configured."""
    return StubInvoker()


@pytest.fixture
def make_client(credentials: dict[str, str], stub_invoker: StubInvoker) -> Callable[..., SedoClient]:
    """Factory building clients bound to the stub invoker."""

    def _make(**overrides: Any) -> SedoClient:
        kwargs: dict[str, Any] = {**credentials, "invoker": stub_invoker}
        kwargs.update(overrides)
        return SedoClient(**kwargs)

    return _make


@pytest.fixture(autouse=True)
def clear_cached_settings():
    """Keep the settings singleton from leaking between tests."""
    reset_settings()
    yield
    reset_settings()
