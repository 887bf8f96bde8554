"""
CLI Build Commands

Build a tree from the command line and print its root or a proof.

Usage:
    merkle-heap root --depth 20 --leaf 0xabab... [--set 3=0xcdcd...] [--json]
    merkle-heap proof --index 3 --depth 20 [--set 3=0xcdcd...] [--out proof.json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from merkle_cli.exit_codes import EXIT_RUNTIME_ERROR, EXIT_SUCCESS
from merkle_core.config import RuntimeConfig, get_default_config
from merkle_core.merkle import MerkleProver, MerkleTree
from merkle_core.schemas.errors import MerkleException


logger = logging.getLogger(__name__)



def parse_assignment(text: str) -> tuple[int, str]:
    """Parse an ``INDEX=HEX`` leaf assignment."""
    index_text, sep, value = text.partition("=")
    if not sep or not value:
        raise ValueError(f"Expected INDEX=HEX, got {text!r}")
    try:
        index = int(index_text)
    except ValueError as e:
        raise ValueError(f"Leaf index must be an integer, got {index_text!r}") from e
    return index, value


def build_tree(args: Namespace, config: RuntimeConfig) -> MerkleTree:
    """Build a tree from CLI arguments, falling back to configured defaults."""
    depth = args.depth if args.depth is not None else config.tree.depth
    leaf = args.leaf if args.leaf is not None else config.tree.initial_leaf

    logger.info(f"Building tree depth={depth}")
    tree = MerkleTree(depth, leaf)

    for assignment in args.set or []:
        index, value = parse_assignment(assignment)
        tree.set(index, value)

    return tree


def report_error(error: Exception, output_json: bool) -> None:
    """Print an error either as a structured JSON model or as plain text."""
    if output_json and isinstance(error, MerkleException):
        print(error.to_error_model().model_dump_json(indent=2))
    else:
        print(f"Error: {error}", file=sys.stderr)


def root_cmd(args: Namespace) -> int:
    """Execute the root command."""
    try:
        tree = build_tree(args, get_default_config())
    except (MerkleException, ValueError) as e:
        report_error(e, args.json)
        return EXIT_RUNTIME_ERROR

    if args.json:
        print(json.dumps({
            "depth": tree.depth,
            "num_leaves": tree.num_leaves,
            "root": tree.root,
        }, indent=2))
    else:
        print(tree.root)
    return EXIT_SUCCESS


def proof_cmd(args: Namespace) -> int:
    """Execute the proof command."""
    try:
        tree = build_tree(args, get_default_config())
        proof = MerkleProver.prove(tree, args.index)
    except (MerkleException, ValueError) as e:
        report_error(e, args.json)
        return EXIT_RUNTIME_ERROR

    document = proof.to_json()

    if args.out:
        out_path = Path(args.out)
        out_path.write_text(document)
        logger.info(f"Wrote proof for leaf {args.index} to {out_path}")
        if args.json:
            print(document)
        else:
            print(f"leaf_index: {proof.leaf_index}")
            print(f"leaf: {proof.leaf}")
            print(f"root: {proof.root}")
            print(f"steps: {len(proof.steps)}")
            print(f"written: {out_path}")
    else:
        print(document)
    return EXIT_SUCCESS
