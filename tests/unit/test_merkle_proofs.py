"""
Proof Wrapper and Schema Unit Tests
Tests for merkle_core/merkle/merkle_proofs.py and merkle_core/schemas/proof.py
"""
import pytest
from pydantic import ValidationError

from fixtures import LEAF_AB, SEQUENTIAL_ROOT, sequential_leaf
from merkle_core.merkle import MerkleProver, MerkleTree, MerkleVerifier
from merkle_core.schemas.errors import EncodeException
from merkle_core.schemas.proof import Direction, InclusionProof, ProofStep


class TestMerkleProver:
    """Tests for MerkleProver.prove()."""

    def test_envelope_contents(self, sequential_tree):
        proof = MerkleProver.prove(sequential_tree, 3)

        assert proof.leaf_index == 3
        assert proof.leaf == sequential_leaf(3)
        assert proof.root == SEQUENTIAL_ROOT
        assert proof.steps == sequential_tree.proof(3)
        assert proof.depth == 5


class TestMerkleVerifier:
    """Tests for MerkleVerifier."""

    def test_verify_true_for_member(self, sequential_tree):
        steps = sequential_tree.proof(9)

        assert MerkleVerifier.verify(steps, sequential_leaf(9), SEQUENTIAL_ROOT)

    def test_verify_false_for_non_member(self, sequential_tree):
        steps = sequential_tree.proof(9)

        assert not MerkleVerifier.verify(steps, sequential_leaf(8), SEQUENTIAL_ROOT)

    def test_expected_root_prefix_and_case_insensitive(self, sequential_tree):
        steps = sequential_tree.proof(9)
        bare_upper = SEQUENTIAL_ROOT[2:].upper()

        assert MerkleVerifier.verify(steps, sequential_leaf(9), bare_upper)

    def test_malformed_expected_root_raises(self, sequential_tree):
        with pytest.raises(EncodeException):
            MerkleVerifier.verify(sequential_tree.proof(0), sequential_leaf(0), "0xqq" * 16)

    def test_verify_inclusion_against_trusted_root(self, sequential_tree):
        proof = MerkleProver.prove(sequential_tree, 12)

        assert MerkleVerifier.verify_inclusion(proof)
        assert MerkleVerifier.verify_inclusion(proof, SEQUENTIAL_ROOT)
        assert not MerkleVerifier.verify_inclusion(proof, MerkleTree(5, LEAF_AB).root)


class TestProofSchema:
    """Tests for ProofStep / InclusionProof models."""

    def test_direction_values(self):
        assert Direction.LEFT.value == "left"
        assert Direction("right") is Direction.RIGHT

    def test_proof_step_is_frozen(self):
        step = ProofStep(direction=Direction.LEFT, sibling=LEAF_AB)

        with pytest.raises(ValidationError):
            step.sibling = "0x00"

    def test_proof_step_rejects_unknown_direction(self):
        with pytest.raises(ValidationError):
            ProofStep(direction="up", sibling=LEAF_AB)

    def test_inclusion_proof_json_round_trip(self, sequential_tree):
        proof = MerkleProver.prove(sequential_tree, 3)

        restored = InclusionProof.from_json(proof.to_json())

        assert restored == proof
        assert MerkleTree.verify(restored.steps, restored.leaf) == SEQUENTIAL_ROOT

    def test_inclusion_proof_json_shape(self, sequential_tree):
        proof = MerkleProver.prove(sequential_tree, 0)

        data = proof.model_dump(mode="json")

        assert set(data) == {"leaf_index", "leaf", "steps", "root"}
        assert data["steps"][0] == {"direction": "left", "sibling": sequential_leaf(1)}

    def test_inclusion_proof_rejects_negative_index(self):
        with pytest.raises(ValidationError):
            InclusionProof(leaf_index=-1, leaf=LEAF_AB, steps=[], root=LEAF_AB)
