"""
Schemas

Purpose: Export the public API for the schemas module: proof value objects,
error models and exceptions.
"""

# Proof value objects
from .proof import (
    Direction,
    InclusionProof,
    ProofStep,
)

# Error models and exceptions
from .errors import (
    BelowZeroException,
    EncodeException,
    ErrorCodes,
    IndexValidationException,
    InvalidBytesException,
    InvalidCoordinateException,
    InvalidDepthException,
    InvalidIndexException,
    MaxDepthExceededException,
    MerkleError,
    MerkleException,
    TreeException,
)

__all__ = [
    # Proofs
    "Direction",
    "InclusionProof",
    "ProofStep",
    # Errors
    "BelowZeroException",
    "EncodeException",
    "ErrorCodes",
    "IndexValidationException",
    "InvalidBytesException",
    "InvalidCoordinateException",
    "InvalidDepthException",
    "InvalidIndexException",
    "MaxDepthExceededException",
    "MerkleError",
    "MerkleException",
    "TreeException",
]
