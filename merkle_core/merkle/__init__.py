"""
Merkle Tree and Commitments
Fixed-depth, array-backed Merkle tree with updates, proofs and verification.

This module provides:
- MerkleTree: the tree (construction, set, proof, static verify)
- verify_proof: stateless proof fold
- Index arithmetic for the heap-array layout
- MerkleProver / MerkleVerifier: convenience wrappers

Usage:
    from merkle_core.merkle import MerkleTree

    tree = MerkleTree(20, "0x" + "ab" * 32)
    tree.set(7, "0x" + "cd" * 32)
    proof = tree.proof(7)
    assert MerkleTree.verify(proof, "0x" + "cd" * 32) == tree.root
"""
from .indexing import (
    depth_offset_to_index,
    index_to_depth_offset,
    is_left_child,
    left_child_index,
    parent_index,
    sibling_index,
)

from .merkle_tree import (
    MAX_DEPTH,
    MerkleTree,
    verify_proof,
)

from .merkle_proofs import (
    MerkleProver,
    MerkleVerifier,
)


__all__ = [
    # Index arithmetic
    "depth_offset_to_index",
    "index_to_depth_offset",
    "is_left_child",
    "left_child_index",
    "parent_index",
    "sibling_index",
    # Tree
    "MAX_DEPTH",
    "MerkleTree",
    "verify_proof",
    # Convenience classes
    "MerkleProver",
    "MerkleVerifier",
]
