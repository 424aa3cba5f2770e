"""
Pytest configuration and fixtures for the test suite.

Defines markers for selective test execution:
    pytest -m unit          # Fast unit tests
    pytest -m integration   # End-to-end translation scenarios

Fixture elements are centralized in tests/fixtures/ for reuse across all test modules.
"""

import os
import sys

import pytest

# Add src to path for imports
src_dir = os.path.join(os.path.dirname(__file__), '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

# Add tests directory to path for fixtures import
tests_dir = os.path.dirname(__file__)
if tests_dir not in sys.path:
    # Ensure src directory stays ahead of tests for module resolution
    sys.path.insert(1, tests_dir)

from core.config import TranslationConfig
from formats.xmi import GraphStore, ResourceFactory


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: End-to-end translation scenarios")


# =============================================================================
# Translation fixtures
# =============================================================================

@pytest.fixture
def store():
    """An empty graph store."""
    return GraphStore()


@pytest.fixture
def factory(store):
    """A factory preserving source identifiers (the default)."""
    return ResourceFactory(store, TranslationConfig())


@pytest.fixture
def factory_without_ids(store):
    """A factory with source identifier preservation turned off."""
    return ResourceFactory(store, TranslationConfig(preserve_source_ids=False))
