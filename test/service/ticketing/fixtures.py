from typing import Any

import pytest


@pytest.fixture
def context() -> dict[str, Any]:
    """Shared state for the steps of one BDD scenario."""
    return {}


@pytest.fixture
def ticket_state() -> dict[str, Any]:
    return {'event': None, 'ticket': None}
