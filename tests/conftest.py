"""Shared fixtures for the API tests."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from devops_demo.config import ENVIRONMENT_VAR
from devops_demo.main import create_app


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with APP_ENVIRONMENT unset."""
    monkeypatch.delenv(ENVIRONMENT_VAR, raising=False)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client for an app built in the default (Production) mode."""
    with TestClient(create_app()) as test_client:
        yield test_client
