"""
CLI Verify Command

Fold an inclusion proof file and compare the result with a trusted root.

Usage:
    merkle-heap verify proof.json [--leaf HEX] [--root HEX] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass
from pathlib import Path

from pydantic import ValidationError

from merkle_core.crypto.hashing import normalize_hash
from merkle_core.merkle import verify_proof
from merkle_core.schemas.errors import MerkleException
from merkle_core.schemas.proof import InclusionProof
from merkle_cli.commands.build import report_error
from merkle_cli.exit_codes import (
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
)


logger = logging.getLogger(__name__)



@dataclass
class VerifySummary:
    """Summary of proof verification for CLI output."""
    proof_path: str = ""
    leaf_index: int = 0
    leaf: str = ""
    expected_root: str = ""
    computed_root: str = ""

    @property
    def ok(self) -> bool:
        return self.computed_root == self.expected_root

    def to_dict(self) -> dict:
        d = asdict(self)
        d["ok"] = self.ok
        return d


def load_proof(path: Path) -> InclusionProof:
    """Read an InclusionProof JSON document."""
    return InclusionProof.from_json(path.read_text())


def print_summary_human(summary: VerifySummary) -> None:
    print(f"proof: {summary.proof_path}")
    print(f"leaf_index: {summary.leaf_index}")
    print(f"leaf: {summary.leaf}")
    print(f"expected_root: {summary.expected_root}")
    print(f"computed_root: {summary.computed_root}")
    print(f"ok: {str(summary.ok).lower()}")


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Returns:
        Exit code (0=root matches, 1=error, 2=root mismatch)
    """
    proof_path = Path(args.proof_path)
    if not proof_path.exists():
        print(f"Error: Proof not found: {proof_path}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        proof = load_proof(proof_path)
    except ValidationError as e:
        print(f"Error loading proof: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    leaf = args.leaf if args.leaf is not None else proof.leaf
    root = args.root if args.root is not None else proof.root

    try:
        summary = VerifySummary(
            proof_path=str(proof_path),
            leaf_index=proof.leaf_index,
            leaf=normalize_hash(leaf),
            expected_root=normalize_hash(root),
            computed_root=verify_proof(proof.steps, leaf),
        )
    except MerkleException as e:
        report_error(e, args.json)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print_summary_human(summary)

    if summary.ok:
        logger.info("Verification passed")
        return EXIT_SUCCESS

    logger.warning("Verification failed")
    return EXIT_VERIFICATION_FAILED
