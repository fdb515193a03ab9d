"""Domain value objects following Domain-Driven Design principles.

Fixed-width byte strings (addresses, 32-byte hashes, function selectors)
wrapped as immutable value objects. They accept raw bytes or ``0x``-prefixed
hex and always hold exactly their declared width, so that the identity
hash and the canonical encoding never see a malformed component.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FixedBytes(BaseModel):
    """Base value object for fixed-width byte strings."""

    model_config = ConfigDict(frozen=True, strict=True)

    SIZE: ClassVar[int] = 0

    value: bytes = Field(..., description="The raw bytes")

    @field_validator("value", mode="before")
    @classmethod
    def parse_value(cls, v: Any) -> Any:
        """Accept hex strings and bytearrays in addition to bytes."""
        if isinstance(v, str):
            text = v[2:] if v.startswith(("0x", "0X")) else v
            try:
                return bytes.fromhex(text)
            except ValueError as e:
                raise ValueError(f"Invalid hex string '{v}'") from e
        if isinstance(v, bytearray | memoryview):
            return bytes(v)
        return v

    @field_validator("value")
    @classmethod
    def validate_width(cls, v: bytes) -> bytes:
        """Enforce the declared width."""
        if len(v) != cls.SIZE:
            raise ValueError(f"{cls.__name__} must be exactly {cls.SIZE} bytes, got {len(v)}")
        return v

    def hex(self) -> str:
        """Lowercase hex with 0x prefix."""
        return "0x" + self.value.hex()

    def __bytes__(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        """String representation returns the hex value."""
        return self.hex()

    def __eq__(self, other: Any) -> bool:
        """Equality comparison against the same type, raw bytes, or hex."""
        if isinstance(other, type(self)):
            return self.value == other.value
        if isinstance(other, bytes):
            return self.value == other
        if isinstance(other, str):
            return self.hex() == other.lower()
        return False

    def __hash__(self) -> int:
        """Make hashable for use in sets and dicts."""
        return hash((type(self).__name__, self.value))


class Hash32(FixedBytes):
    """Value object representing a 32-byte hash (identity, event signature, topic)."""

    SIZE: ClassVar[int] = 32

    @classmethod
    def from_bytes(cls, data: bytes) -> "Hash32":
        """Right-align arbitrary bytes into a 32-byte hash.

        Shorter input is left-padded with zeros; longer input keeps its
        last 32 bytes.
        """
        return cls(value=data[-cls.SIZE :].rjust(cls.SIZE, b"\x00"))


class Address(FixedBytes):
    """Value object representing a 20-byte contract address."""

    SIZE: ClassVar[int] = 20

    def to_hash(self) -> Hash32:
        """Left-pad the address into a 32-byte log topic."""
        return Hash32.from_bytes(self.value)


class Selector(FixedBytes):
    """Value object representing a 4-byte callback function selector."""

    SIZE: ClassVar[int] = 4
