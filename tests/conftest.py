"""
Pytest configuration and shared fixtures for the mazepath test suite.
"""

import pytest

from mazepath.geometry import build_graph, generate_maze
from mazepath.utils import configure_logging

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests (slower, cross-component)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the default logging configuration after each test."""
    yield
    configure_logging(level="WARNING")


# =============================================================================
# Maze Fixtures
# =============================================================================


class FirstChoice:
    """Random source whose draws are all 0.0, so the first candidate always wins."""

    def __init__(self):
        self.calls = 0

    def random(self):
        self.calls += 1
        return 0.0


@pytest.fixture
def first_choice_rng():
    """Deterministic random source; carves a serpentine maze."""
    return FirstChoice()


@pytest.fixture
def serpentine_maze(first_choice_rng):
    """5x5 maze whose only route snakes down and up each column."""
    return generate_maze(5, 5, rng=first_choice_rng)


@pytest.fixture
def seeded_maze():
    """20x20 maze from seed 42."""
    return generate_maze(20, 20, seed=42)


@pytest.fixture
def seeded_graph(seeded_maze):
    return build_graph(seeded_maze)
