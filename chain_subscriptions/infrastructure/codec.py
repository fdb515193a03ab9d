"""Canonical persisted encoding of subscriptions using MessagePack.

A record is stored as a nine-element array::

    [target_contract, event_signature, subscriber_contract, callback_address,
     callback_selector, gas_limit, gas_price, deposit_balance, active]

Byte fields are msgpack ``bin``, ``gas_limit`` is a msgpack unsigned int,
``gas_price`` and ``deposit_balance`` are minimal big-endian byte strings
(zero is empty) so their width is unbounded, and ``active`` is a msgpack
bool. The identity is not stored; it is recomputed from the first three
fields on decode. Any change to this layout is a protocol upgrade.
"""

from typing import Any

import msgpack
from pydantic import ValidationError

from ..domain.exceptions import SerializationError
from ..domain.models import Subscription
from ..domain.services import SubscriptionIdentityService
from ..domain.value_objects import Address, Hash32

FIELD_COUNT = 9


def encode_uint(value: int) -> bytes:
    """Minimal big-endian encoding of a non-negative integer."""
    if value < 0:
        raise SerializationError(f"Cannot encode negative integer {value}")
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def decode_uint(data: bytes, field: str) -> int:
    """Inverse of encode_uint, rejecting non-minimal encodings."""
    if not isinstance(data, bytes):
        raise SerializationError(f"Field '{field}' must be bytes, got {type(data).__name__}")
    if data[:1] == b"\x00":
        raise SerializationError(f"Field '{field}' has a non-minimal encoding")
    return int.from_bytes(data, "big")


def _expect_bytes(value: Any, field: str) -> bytes:
    if not isinstance(value, bytes):
        raise SerializationError(f"Field '{field}' must be bytes, got {type(value).__name__}")
    return value


class SubscriptionCodec:
    """Encodes and decodes the canonical subscription tuple."""

    def __init__(self, identity_service: SubscriptionIdentityService):
        """Initialize the codec.

        Args:
            identity_service: Used to recompute the identity on decode
        """
        self._identity = identity_service

    def encode(self, subscription: Subscription) -> bytes:
        """Serialize a subscription to its canonical bytes."""
        fields = [
            subscription.target_contract.value,
            subscription.event_signature.value,
            subscription.subscriber_contract.value,
            subscription.callback_address.value,
            subscription.callback_selector.value,
            subscription.gas_limit,
            encode_uint(subscription.gas_price),
            encode_uint(subscription.deposit_balance),
            subscription.active,
        ]
        try:
            return bytes(msgpack.packb(fields, use_bin_type=True))
        except Exception as e:
            raise SerializationError(f"Failed to encode subscription: {e}") from e

    def decode(self, data: bytes) -> Subscription:
        """Deserialize canonical bytes, recomputing the identity.

        Raises:
            SerializationError: If the data is not a well-formed record or is
                not the exact canonical encoding of that record
        """
        if not data:
            raise SerializationError("Empty subscription data")
        try:
            fields = msgpack.unpackb(data, raw=False, use_list=True)
        except Exception as e:
            raise SerializationError(f"Invalid msgpack data: {e}") from e

        if not isinstance(fields, list) or len(fields) != FIELD_COUNT:
            raise SerializationError(f"Subscription record must be a {FIELD_COUNT}-element array")

        (target, signature, subscriber, callback, selector, gas_limit, gas_price, deposit, active) = (
            fields
        )
        # bool is an int subclass; the active flag and gas limit must not be confused
        if type(gas_limit) is not int:
            raise SerializationError("Field 'gas_limit' must be an unsigned integer")
        if type(active) is not bool:
            raise SerializationError("Field 'active' must be a bool")

        try:
            target_address = Address(value=_expect_bytes(target, "target_contract"))
            event_signature = Hash32(value=_expect_bytes(signature, "event_signature"))
            subscriber_address = Address(value=_expect_bytes(subscriber, "subscriber_contract"))
            subscription = Subscription(
                id=self._identity.compute(target_address, event_signature, subscriber_address),
                target_contract=target_address,
                event_signature=event_signature,
                subscriber_contract=subscriber_address,
                callback_address=_expect_bytes(callback, "callback_address"),
                callback_selector=_expect_bytes(selector, "callback_selector"),
                gas_limit=gas_limit,
                gas_price=decode_uint(gas_price, "gas_price"),
                deposit_balance=decode_uint(deposit, "deposit_balance"),
                active=active,
            )
        except ValidationError as e:
            raise SerializationError(f"Invalid subscription record: {e}") from e

        # msgpack admits wider headers for the same values; only the packer's output is valid
        if self.encode(subscription) != data:
            raise SerializationError("Subscription record has a non-canonical encoding")
        return subscription
