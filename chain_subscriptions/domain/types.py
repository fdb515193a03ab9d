"""Type definitions and protocols for strong typing across the package.

This module provides Protocol classes for collaborators that live outside
the domain, so that domain services can depend on them structurally.
"""

from typing import Protocol


class Hasher(Protocol):
    """Protocol for the Keccak-256 hash primitive.

    Implementations hash the concatenation of all chunks and return the
    32-byte digest.
    """

    def keccak256(self, *chunks: bytes) -> bytes:
        """Hash the concatenation of the given chunks.

        Args:
            chunks: Byte strings hashed in order, without separators

        Returns:
            The 32-byte digest
        """
        ...
