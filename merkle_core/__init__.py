"""
merkle_core

Fixed-depth, array-backed binary Merkle tree over 32-byte SHA3-256 values.
"""

from .merkle import MerkleTree, verify_proof
from .schemas import Direction, InclusionProof, ProofStep

__version__ = "0.1.0"

__all__ = [
    "MerkleTree",
    "verify_proof",
    "Direction",
    "InclusionProof",
    "ProofStep",
]
