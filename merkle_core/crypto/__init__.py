"""
Core cryptographic utilities: the hash primitive and the hex codec used at
the tree's public boundary.
"""
from .hashing import (
    HASH_SIZE,
    sha3_256,
    hash_concat,
    to_hex,
    strip_hex_prefix,
    from_hex,
    decode_hash,
    normalize_hash,
)

__all__ = [
    "HASH_SIZE",
    "sha3_256",
    "hash_concat",
    "to_hex",
    "strip_hex_prefix",
    "from_hex",
    "decode_hash",
    "normalize_hash",
]
