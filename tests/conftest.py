"""
Pytest configuration and shared fixtures.

This conftest.py:
1. Adds project root and tests root to sys.path for imports
2. Provides commonly-used trees via pytest's autodiscovery
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from fixtures import LEAF_AB, make_sequential_tree
from merkle_core.config import set_default_config
from merkle_core.merkle import MerkleTree


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def small_tree() -> MerkleTree:
    """Depth 3 tree with every leaf 0xabab...ab."""
    return MerkleTree(3, LEAF_AB)


@pytest.fixture
def sequential_tree() -> MerkleTree:
    """Depth 5 tree whose leaf i holds i * 0x1111...11."""
    return make_sequential_tree(5)


@pytest.fixture(autouse=True)
def _reset_default_config():
    """Keep the process-wide default config from leaking between tests."""
    set_default_config(None)
    yield
    set_default_config(None)
