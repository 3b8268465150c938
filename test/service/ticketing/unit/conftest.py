"""
Unit test configuration for ticketing service.

Overrides autouse fixtures from parent conftest to enable pure unit testing
without a database.

This module also prevents the session-scoped TestClient from being created.
"""

from collections.abc import AsyncGenerator, Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from src.service.ticketing.domain.entity.event_entity import EventEntity
from test.service.ticketing.unit.helpers import FakeUnitOfWork


@pytest.fixture(autouse=True, scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    """No-op override for unit tests - no real database needed"""
    yield


@pytest.fixture(scope='session')
def client() -> Generator[MagicMock, None, None]:
    """Mock client for unit tests - prevents TestClient/lifespan from being created"""
    mock_client = MagicMock(spec=TestClient)
    yield mock_client


@pytest.fixture(autouse=True)
def clear_client_cookies(client: MagicMock) -> Generator[None, None, None]:
    """No-op override for unit tests - uses mock client"""
    yield


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def sample_event() -> EventEntity:
    return EventEntity(
        id=1,
        name='Jazz Night',
        description='Live music',
        price=10.0,
        capacity=5,
    )
