"""
Fixed-Depth Merkle Tree
Array-backed binary Merkle tree with single-leaf updates and inclusion proofs.

This module provides:
- MerkleTree: complete binary tree stored as a flat heap-ordered list
- verify_proof: fold a proof and a leaf value into a candidate root

Commitment Rules:
1. Parent hashing: parent = sha3_256(left || right), raw 64 bytes, no framing
2. Depth is one-indexed: depth 20 has levels 0..19 and 2^19 leaves
3. Leaves occupy the last num_leaves slots of the list
4. Nodes are held as raw 32-byte values; hex appears only at the API boundary

Depth is capped at MAX_DEPTH. The tree is not synchronized; callers sharing
one instance between threads must serialize calls to set().
"""
from __future__ import annotations

import logging
from typing import Sequence

from merkle_core.crypto.hashing import decode_hash, hash_concat, to_hex
from merkle_core.merkle.indexing import (
    is_left_child,
    left_child_index,
    parent_index,
    sibling_index,
)
from merkle_core.schemas.errors import (
    InvalidDepthException,
    InvalidIndexException,
    MaxDepthExceededException,
)
from merkle_core.schemas.proof import Direction, ProofStep


logger = logging.getLogger(__name__)


MAX_DEPTH = 30


class MerkleTree:
    """
    A fixed-depth Merkle tree whose leaves all start at the same value.

    Example:
        >>> tree = MerkleTree(3, "0x" + "ab" * 32)
        >>> tree.num_leaves
        4
        >>> tree.set(0, "0x" + "cd" * 32)
        >>> MerkleTree.verify(tree.proof(0), "0x" + "cd" * 32) == tree.root
        True
    """

    def __init__(self, depth: int, initial_leaf: str | bytes) -> None:
        """
        Build a tree of the given one-indexed depth with every leaf set to
        initial_leaf.

        Because the leaves are uniform, every node on a level shares one
        hash, so only depth - 1 hashes are computed.

        Raises:
            MaxDepthExceededException: If depth > MAX_DEPTH
            InvalidDepthException: If depth < 1 or is not an int
            EncodeException: If initial_leaf is not valid hex
            InvalidBytesException: If initial_leaf is not 32 bytes
        """
        if not isinstance(depth, int) or isinstance(depth, bool):
            raise InvalidDepthException(depth)
        if depth > MAX_DEPTH:
            raise MaxDepthExceededException(depth, MAX_DEPTH)
        if depth < 1:
            raise InvalidDepthException(depth)

        current_hash = decode_hash(initial_leaf)

        levels = depth - 1
        leaf_count = 1 << levels
        total_nodes = 2 * leaf_count - 1

        nodes: list[bytes] = [current_hash] * total_nodes

        # Build up: level d spans [2^d - 1, 2^(d+1) - 1)
        for d in reversed(range(levels)):
            current_hash = hash_concat(current_hash, current_hash)
            start_idx = (1 << d) - 1
            end_idx = (1 << (d + 1)) - 1
            nodes[start_idx:end_idx] = [current_hash] * (end_idx - start_idx)

        self._depth = depth
        self._nodes = nodes
        logger.debug(f"Built tree depth={depth} leaves={leaf_count} root={to_hex(nodes[0])}")

    @property
    def root(self) -> str:
        """Root hash as 0x-prefixed hex."""
        return to_hex(self._nodes[0])

    @property
    def num_leaves(self) -> int:
        return len(self._nodes) // 2 + 1

    @property
    def depth(self) -> int:
        """One-indexed depth supplied at construction."""
        return self._depth

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"MerkleTree(depth={self._depth}, root={self.root!r})"

    def _leaf_array_index(self, leaf_index: int) -> int:
        leaf_count = self.num_leaves
        if (
            not isinstance(leaf_index, int)
            or isinstance(leaf_index, bool)
            or not 0 <= leaf_index < leaf_count
        ):
            raise InvalidIndexException(leaf_index, leaf_count)
        return len(self._nodes) - leaf_count + leaf_index

    def leaf(self, leaf_index: int) -> str:
        """Current value of a leaf as 0x-prefixed hex."""
        return to_hex(self._nodes[self._leaf_array_index(leaf_index)])

    def node(self, index: int) -> str:
        """Value at a flat heap index (internal or leaf) as 0x-prefixed hex."""
        if (
            not isinstance(index, int)
            or isinstance(index, bool)
            or not 0 <= index < len(self._nodes)
        ):
            raise InvalidIndexException(index, len(self._nodes), kind="node")
        return to_hex(self._nodes[index])

    def set(self, leaf_index: int, value: str | bytes) -> None:
        """
        Overwrite one leaf and recompute every ancestor up to the root.

        Input is validated before any node is touched, so a failed call
        leaves the tree unchanged.

        Raises:
            InvalidIndexException: If leaf_index is outside [0, num_leaves)
            EncodeException: If value is not valid hex
            InvalidBytesException: If value is not 32 bytes
        """
        array_index = self._leaf_array_index(leaf_index)
        leaf_hash = decode_hash(value)

        nodes = self._nodes
        nodes[array_index] = leaf_hash

        index = parent_index(array_index)
        while index is not None:
            left = left_child_index(index)
            nodes[index] = hash_concat(nodes[left], nodes[left + 1])
            index = parent_index(index)

        logger.debug(f"Set leaf {leaf_index} -> root={to_hex(nodes[0])}")

    def proof(self, leaf_index: int) -> list[ProofStep]:
        """
        Collect sibling hashes from a leaf up to (not including) the root.

        Each step records whether the path node was the left or right child
        at that level and the hash of its sibling.

        Raises:
            InvalidIndexException: If leaf_index is outside [0, num_leaves)
        """
        index = self._leaf_array_index(leaf_index)

        steps: list[ProofStep] = []
        parent = parent_index(index)
        while parent is not None:
            direction = Direction.LEFT if is_left_child(index) else Direction.RIGHT
            sibling = self._nodes[sibling_index(index)]
            steps.append(ProofStep(direction=direction, sibling=to_hex(sibling)))

            index = parent
            parent = parent_index(index)

        return steps

    @staticmethod
    def verify(proof: Sequence[ProofStep], leaf_value: str | bytes) -> str:
        """
        Fold a proof and a leaf value into the root they imply.

        Compare the result against a trusted root to decide inclusion.
        Needs no tree instance.
        """
        return verify_proof(proof, leaf_value)


def verify_proof(proof: Sequence[ProofStep], leaf_value: str | bytes) -> str:
    """
    Recompute a root from a leaf and its proof.

    Algorithm:
    1. Start with the decoded leaf value
    2. For each step (leaf to root):
       - RIGHT: the path node was the right child, hash = H(sibling || hash)
       - LEFT: the path node was the left child, hash = H(hash || sibling)
    3. Return the final hash as 0x-prefixed hex

    Raises:
        EncodeException: If the leaf or a sibling is not valid hex
        InvalidBytesException: If the leaf or a sibling is not 32 bytes
    """
    current = decode_hash(leaf_value)

    for step in proof:
        sibling = decode_hash(step.sibling)
        if step.direction == Direction.RIGHT:
            current = hash_concat(sibling, current)
        else:
            current = hash_concat(current, sibling)

    return to_hex(current)


__all__ = [
    "MAX_DEPTH",
    "MerkleTree",
    "verify_proof",
]
