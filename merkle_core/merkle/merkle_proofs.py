"""
Merkle Proofs Convenience Wrappers
Class-based interfaces over MerkleTree.proof and verify_proof.

This module provides:
- MerkleProver: Generate self-describing InclusionProof envelopes
- MerkleVerifier: Check proofs against a trusted root
"""
from __future__ import annotations

from typing import Sequence

from merkle_core.crypto.hashing import normalize_hash
from merkle_core.merkle.merkle_tree import MerkleTree, verify_proof
from merkle_core.schemas.proof import InclusionProof, ProofStep


class MerkleProver:
    """
    Convenience class for generating inclusion proofs.

    Example:
        >>> tree = MerkleTree(4, "0x" + "00" * 32)
        >>> proof = MerkleProver.prove(tree, 5)
        >>> proof.root == tree.root
        True
    """

    @staticmethod
    def prove(tree: MerkleTree, leaf_index: int) -> InclusionProof:
        """
        Generate an InclusionProof for a leaf of the given tree.

        Raises:
            InvalidIndexException: If leaf_index is out of range
        """
        return InclusionProof(
            leaf_index=leaf_index,
            leaf=tree.leaf(leaf_index),
            steps=tree.proof(leaf_index),
            root=tree.root,
        )


class MerkleVerifier:
    """Convenience class for verifying proofs against a known-good root."""

    @staticmethod
    def verify(
        steps: Sequence[ProofStep],
        leaf_value: str | bytes,
        expected_root: str | bytes,
    ) -> bool:
        """
        Check that leaf_value and steps fold to expected_root.

        Both roots are compared in canonical lowercase 0x form, so prefix
        and case differences in expected_root do not matter. Malformed
        input raises instead of returning False.
        """
        return verify_proof(steps, leaf_value) == normalize_hash(expected_root)

    @staticmethod
    def verify_inclusion(proof: InclusionProof, expected_root: str | bytes | None = None) -> bool:
        """
        Verify an InclusionProof envelope.

        When expected_root is omitted the root stored in the envelope is
        used, which only shows the envelope is internally consistent.
        """
        root = proof.root if expected_root is None else expected_root
        return MerkleVerifier.verify(proof.steps, proof.leaf, root)


__all__ = [
    "MerkleProver",
    "MerkleVerifier",
]
