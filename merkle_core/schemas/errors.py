"""
Schemas
File: errors.py

Purpose: Error taxonomy for index arithmetic and tree operations.
Defines both a Pydantic model for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Index arithmetic
    INVALID = "INVALID"
    BELOW_ZERO = "BELOW_ZERO"

    # Tree construction and access
    MAX_DEPTH_EXCEEDED = "MAX_DEPTH_EXCEEDED"
    INVALID_DEPTH = "INVALID_DEPTH"
    INVALID_BYTES = "INVALID_BYTES"
    ENCODE_ERROR = "ENCODE_ERROR"
    INVALID_INDEX = "INVALID_INDEX"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class MerkleError(BaseModel):
    """
    Error model for passing failures across a boundary without exceptions,
    e.g. in the CLI's JSON output.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_BYTES],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "MerkleException":
        """Convert this error model to a raisable exception."""
        return MerkleException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleException(Exception):
    """
    Base exception for all Merkle tree errors.

    Carries structured error information and can be converted to a
    MerkleError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "MERKLE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> MerkleError:
        """Convert this exception to a MerkleError model."""
        return MerkleError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


# -----------------------------------------------------------------------------
# Index arithmetic
# -----------------------------------------------------------------------------

class IndexValidationException(MerkleException):
    """Base for failures in (depth, offset) / flat index arithmetic."""


class InvalidCoordinateException(IndexValidationException):
    """Raised when an offset lies outside the range of its depth."""

    def __init__(
        self,
        message: str = "Input is invalid",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID,
            details=details,
        )


class BelowZeroException(IndexValidationException):
    """Raised when a negative value reaches index arithmetic."""

    def __init__(
        self,
        message: str = "Input can only accept positive values",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.BELOW_ZERO,
            details=details,
        )


# -----------------------------------------------------------------------------
# Tree
# -----------------------------------------------------------------------------

class TreeException(MerkleException):
    """Base for failures in tree construction, update and proofs."""


class MaxDepthExceededException(TreeException):
    """Raised when the requested depth is above the supported maximum."""

    def __init__(self, depth: int, max_depth: int) -> None:
        super().__init__(
            message=f"depth must be at most {max_depth}, got {depth}",
            code=ErrorCodes.MAX_DEPTH_EXCEEDED,
            details={"depth": depth, "max_depth": max_depth},
        )


class InvalidDepthException(TreeException):
    """Raised when the requested depth is not an integer of at least one."""

    def __init__(self, depth: Any) -> None:
        super().__init__(
            message=f"depth must be an integer of at least 1, got {depth!r}",
            code=ErrorCodes.INVALID_DEPTH,
            details={"depth": depth},
        )


class InvalidBytesException(TreeException):
    """Raised when a decoded hash is not exactly 32 bytes."""

    def __init__(self, length: int, expected: int = 32) -> None:
        super().__init__(
            message=f"leaf must be {expected} byte hex string, got {length} bytes",
            code=ErrorCodes.INVALID_BYTES,
            details={"length": length, "expected": expected},
        )


class EncodeException(TreeException):
    """
    Raised when a hash string is not valid hexadecimal.

    The underlying decode failure is chained as ``__cause__``.
    """

    def __init__(self, message: str, value: str | None = None) -> None:
        details: dict[str, Any] = {}
        if value is not None:
            details["value"] = value[:70]
        super().__init__(
            message=message,
            code=ErrorCodes.ENCODE_ERROR,
            details=details,
        )


class InvalidIndexException(TreeException):
    """Raised when a leaf or node index is outside the tree."""

    def __init__(self, index: Any, limit: int, kind: str = "leaf") -> None:
        super().__init__(
            message=f"{kind} index {index!r} out of range for {limit} {kind}s",
            code=ErrorCodes.INVALID_INDEX,
            details={"index": index, "limit": limit, "kind": kind},
        )
