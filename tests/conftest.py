"""
Pytest configuration and fixtures for mkp-mcp-server tests.
"""
import random
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from mkp_server.cognitive_system import MockMKPSystem
from mkp_server.mcp_handlers import ToolDispatcher, build_tool_registry

FIXED_NOW = datetime(2025, 1, 15, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def rng():
    """Seeded random source so randomized fields are reproducible."""
    return random.Random(1234)


@pytest.fixture
def system(rng):
    return MockMKPSystem(rng=rng, clock=lambda: FIXED_NOW)


@pytest.fixture
def registry(system):
    return build_tool_registry(system)


@pytest.fixture
def dispatcher(registry):
    return ToolDispatcher(registry)


@pytest.fixture
def fixed_now():
    return FIXED_NOW
