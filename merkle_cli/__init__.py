"""
merkle-heap CLI

Command-line interface for building trees, generating proofs and verifying them.

Usage:
    python -m merkle_cli root --depth 20 --leaf 0xabab...
    python -m merkle_cli proof --index 3 --depth 5 --out proof.json
    python -m merkle_cli verify proof.json --root 0x...
"""

__version__ = "0.1.0"
