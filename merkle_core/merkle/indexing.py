"""
Heap-Array Index Arithmetic

Pure integer functions for a complete binary tree stored as a flat list:

    root at index 0
    children of i at 2i + 1 (left) and 2i + 2 (right)
    parent of i at (i - 1) // 2

A node is addressed either by its flat index or by its (depth, offset)
coordinate, where depth 0 is the root level and offset counts nodes from
the left within a level. Level d spans [2^d - 1, 2^(d+1) - 1).

Every function rejects negative input with BelowZeroException.
"""
from __future__ import annotations

from merkle_core.schemas.errors import BelowZeroException, InvalidCoordinateException


def _require_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise BelowZeroException(details={name: value})


def depth_offset_to_index(depth: int, offset: int) -> int:
    """
    Map a (depth, offset) coordinate to its flat index.

    Args:
        depth: Zero-based level (0 is the root)
        offset: Position within the level, 0 <= offset < 2^depth

    Returns:
        Flat index 2^depth - 1 + offset

    Raises:
        BelowZeroException: If depth or offset is negative
        InvalidCoordinateException: If offset >= 2^depth
    """
    _require_non_negative(depth=depth, offset=offset)
    base = (1 << depth) - 1
    if offset > base:
        raise InvalidCoordinateException(
            details={"depth": depth, "offset": offset, "level_size": base + 1}
        )
    return base + offset


def index_to_depth_offset(index: int) -> tuple[int, int]:
    """
    Map a flat index back to its (depth, offset) coordinate.

    Level sizes 1, 2, 4, ... are accumulated until the running total
    exceeds the index.
    """
    _require_non_negative(index=index)
    depth = 0
    nodes_through_depth = 1
    while index >= nodes_through_depth:
        depth += 1
        nodes_through_depth += 1 << depth

    offset = index - ((1 << depth) - 1)
    return depth, offset


def parent_index(index: int) -> int | None:
    """Index of the parent node, or None for the root."""
    _require_non_negative(index=index)
    if index == 0:
        return None
    return (index - 1) // 2


def left_child_index(index: int) -> int:
    """Index of the left child; the right child is the next index."""
    _require_non_negative(index=index)
    return 2 * index + 1


def is_left_child(index: int) -> bool:
    """Left children sit at odd indices."""
    return index % 2 == 1


def sibling_index(index: int) -> int | None:
    """Index of the other child of this node's parent, or None for the root."""
    _require_non_negative(index=index)
    if index == 0:
        return None
    return index + 1 if is_left_child(index) else index - 1


__all__ = [
    "depth_offset_to_index",
    "index_to_depth_offset",
    "parent_index",
    "left_child_index",
    "is_left_child",
    "sibling_index",
]
