"""
Test fixtures package.

Usage:
    from fixtures import LEAF_AB, make_sequential_tree
"""

from .common import (
    DEPTH2_SET_ROOT,
    DEPTH3_AB_MIDDLE,
    DEPTH3_AB_ROOT,
    DEPTH10_RESET_ROOT,
    DEPTH20_AB_ROOT,
    LEAF_AB,
    LEAF_ABCD,
    LEAF_ZERO,
    SEQUENTIAL_MULTIPLIER,
    SEQUENTIAL_ROOT,
    make_sequential_tree,
    sequential_leaf,
)

__all__ = [
    "DEPTH2_SET_ROOT",
    "DEPTH3_AB_MIDDLE",
    "DEPTH3_AB_ROOT",
    "DEPTH10_RESET_ROOT",
    "DEPTH20_AB_ROOT",
    "LEAF_AB",
    "LEAF_ABCD",
    "LEAF_ZERO",
    "SEQUENTIAL_MULTIPLIER",
    "SEQUENTIAL_ROOT",
    "make_sequential_tree",
    "sequential_leaf",
]
