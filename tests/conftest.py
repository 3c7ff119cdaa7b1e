"""Shared test fixtures for exposure engine tests."""

from types import SimpleNamespace

import pytest

from exposure_engine.entity import Entity


# =============================================================================
# Entity Fixtures
# =============================================================================

@pytest.fixture
def fresh_entity() -> type[Entity]:
    """A new entity type with an empty exposure registry."""
    class FreshEntity(Entity):
        pass

    return FreshEntity


# =============================================================================
# Domain Object Fixtures
# =============================================================================

@pytest.fixture
def friends() -> list[SimpleNamespace]:
    return [
        SimpleNamespace(name="Friend 1", email="friend1@example.com", friends=[]),
        SimpleNamespace(name="Friend 2", email="friend2@example.com", friends=[]),
    ]


@pytest.fixture
def model(friends) -> SimpleNamespace:
    """A user-like object with nested friends."""
    return SimpleNamespace(
        name="Bob Bobson",
        email="bob@example.com",
        friends=friends,
    )


# =============================================================================
# Test Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks as integration test")
