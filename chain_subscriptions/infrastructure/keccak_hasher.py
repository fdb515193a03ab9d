"""Keccak-256 hash primitive backed by pycryptodome."""

from Crypto.Hash import keccak


class KeccakHasher:
    """Default Hasher implementation.

    Uses the original Keccak-256 padding (as used for Ethereum identities),
    which differs from the standardized SHA3-256.
    """

    DIGEST_BITS = 256

    def keccak256(self, *chunks: bytes) -> bytes:
        """Hash the concatenation of the given chunks."""
        digest = keccak.new(digest_bits=self.DIGEST_BITS)
        for chunk in chunks:
            digest.update(chunk)
        return digest.digest()
