"""
Schemas
File: proof.py

Purpose: Inclusion proof value objects.

A proof is an ordered list of ProofStep from the leaf up to (but excluding)
the root. Siblings are carried as 0x-prefixed hex strings; they are decoded
only when a proof is folded, so a malformed sibling surfaces as a typed
error from verification rather than from model construction.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Direction(str, Enum):
    """Which child the node on the proof path was at a given level."""

    LEFT = "left"
    RIGHT = "right"


class ProofStep(BaseModel):
    """One level of an inclusion proof."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    direction: Direction = Field(
        ...,
        description="Whether the path node (not the sibling) was the left or right child",
    )
    sibling: str = Field(
        ...,
        description="Sibling hash as 0x-prefixed hex",
    )


class InclusionProof(BaseModel):
    """
    A self-describing inclusion proof.

    Bundles the steps with the leaf they start from and the root they were
    generated against, so the whole thing can be written to and read back
    from a file.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    leaf_index: int = Field(..., ge=0, description="0-based leaf index")
    leaf: str = Field(..., description="Leaf value as 0x-prefixed hex")
    steps: list[ProofStep] = Field(default_factory=list, description="Steps from leaf to root")
    root: str = Field(..., description="Root the proof was generated against")

    @property
    def depth(self) -> int:
        """One-indexed depth of the tree the proof was taken from."""
        return len(self.steps) + 1

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(indent=indent)

    @classmethod
    def from_json(cls, data: str | bytes) -> "InclusionProof":
        return cls.model_validate_json(data)
