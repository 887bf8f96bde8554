"""
Hashing Utilities
Hash primitive and hex boundary codec for the Merkle tree.

This module provides:
- SHA3-256 hashing for raw bytes
- Parent hashing over the raw concatenation of two children
- Hex encoding/decoding with an optional 0x prefix
- Strict decoding of 32-byte hash values

Security/Determinism Notes:
- Always hash raw bytes, never their hex text
- Every call builds a fresh hasher; no state is shared between calls
- Output hex is always lowercase with a 0x prefix
"""
from __future__ import annotations

import hashlib

from merkle_core.schemas.errors import EncodeException, InvalidBytesException


HASH_SIZE = 32


def sha3_256(data: bytes) -> bytes:
    """
    Compute the SHA3-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA3-256 digest

    Example:
        >>> sha3_256(b"").hex()[:16]
        'a7ffc6f8bf1ed766'
    """
    return hashlib.sha3_256(data).digest()


def hash_concat(left: bytes, right: bytes) -> bytes:
    """
    Hash the concatenation of two byte sequences.

    This is the Merkle parent rule: parent = sha3_256(left + right),
    with no prefix or framing between the two children.

    Args:
        left: Left child hash (32 bytes)
        right: Right child hash (32 bytes)

    Returns:
        32-byte SHA3-256 digest of the concatenation
    """
    return sha3_256(left + right)


def to_hex(data: bytes) -> str:
    """
    Convert bytes to a lowercase hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def strip_hex_prefix(hex_string: str) -> str:
    """Remove an optional 0x/0X prefix, leaving shorter strings untouched."""
    if len(hex_string) >= 2 and hex_string[:2] in ("0x", "0X"):
        return hex_string[2:]
    return hex_string


def from_hex(hex_string: str) -> bytes:
    """
    Convert a hexadecimal string, with or without 0x prefix, to bytes.

    Args:
        hex_string: Hex string, e.g. "0xdeadbeef" or "deadbeef"

    Returns:
        Decoded bytes (possibly empty)

    Raises:
        EncodeException: If the input is not a string, has odd length,
                         or contains non-hex characters (including whitespace)

    Example:
        >>> from_hex("0xdeadbeef").hex()
        'deadbeef'
    """
    if not isinstance(hex_string, str):
        raise EncodeException(
            f"Hex value must be a string, got {type(hex_string).__name__}"
        )

    hex_content = strip_hex_prefix(hex_string)

    # bytes.fromhex skips whitespace
    if any(c.isspace() for c in hex_content):
        raise EncodeException("Whitespace in hex string", value=hex_string)

    if len(hex_content) % 2 != 0:
        raise EncodeException(
            f"Odd number of digits in hex string (length {len(hex_content)})",
            value=hex_string,
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise EncodeException(f"Invalid hex string: {e}", value=hex_string) from e


def decode_hash(value: str | bytes) -> bytes:
    """
    Decode a boundary hash value into exactly 32 raw bytes.

    Raw bytes are accepted as-is after a length check.

    Raises:
        EncodeException: If a string value is not valid hex
        InvalidBytesException: If the decoded value is not 32 bytes
    """
    if isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    else:
        raw = from_hex(value)

    if len(raw) != HASH_SIZE:
        raise InvalidBytesException(len(raw), HASH_SIZE)
    return raw


def normalize_hash(value: str | bytes) -> str:
    """Canonical 0x-prefixed lowercase form of a 32-byte hash value."""
    return to_hex(decode_hash(value))


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
