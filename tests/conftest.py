"""
Pytest configuration and shared fixtures for streamloop tests.

Every fixture is function-scoped: registries and sessions carry the names of
one transformation and must never leak between tests.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from streamloop.naming import NameRegistry, JavaStyleNamingOracle, NamingSession
from streamloop.frontend import TypeParser


# =============================================================================
# Session-scoped fixtures (stateless, shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def type_parser():
    """Type parser is stateless after construction; build the grammar once."""
    return TypeParser()


@pytest.fixture(scope="session")
def oracle():
    """Default type naming oracle (pure, safe to share)."""
    return JavaStyleNamingOracle()


# =============================================================================
# Function-scoped fixtures (one transformation per test)
# =============================================================================

@pytest.fixture
def registry():
    """Empty registry: no enclosing scope, no reserved names."""
    return NameRegistry()


@pytest.fixture
def session(registry, oracle):
    """Naming session sharing the test's registry."""
    return NamingSession(registry=registry, oracle=oracle)


class FixedOracle:
    """Oracle returning a fixed list regardless of type; records calls."""

    def __init__(self, names=()):
        self.names = list(names)
        self.calls = []

    def suggest_names(self, ty):
        self.calls.append(ty)
        return list(self.names)


@pytest.fixture
def empty_oracle():
    return FixedOracle()


@pytest.fixture
def fixed_oracle():
    """Factory for oracles with a given suggestion list."""
    return FixedOracle
