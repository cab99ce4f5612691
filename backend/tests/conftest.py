"""Root conftest — shared test configuration and domain fixtures.

Invariants:
    - Every test gets a fresh, empty ClientRegistry
    - Environment pinned so a developer's .env cannot change test behavior
"""

import os

import pytest

os.environ.setdefault("SEED_DEMO_CLIENTS", "false")
os.environ.setdefault("LOG_FORMAT", "text")

from client_registry.core.client_registry import ClientRegistry  # noqa: E402
from tests.factories import VALID_ID_B, make_client  # noqa: E402


@pytest.fixture
def registry():
    return ClientRegistry()


@pytest.fixture
def client_a():
    return make_client()


@pytest.fixture
def client_b():
    return make_client(
        first_name="Jane", last_name="Smith", mobile_number="0723456789",
        id_number=VALID_ID_B, physical_address="456 Maple Avenue",
    )
