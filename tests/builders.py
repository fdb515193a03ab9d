"""Test builders for creating test data following the Builder pattern.

These builders provide a fluent interface for creating subscriptions,
making tests more readable and maintainable.
"""

from chain_subscriptions.domain.models import Subscription
from chain_subscriptions.domain.services import SubscriptionIdentityService
from chain_subscriptions.domain.value_objects import Address, Hash32, Selector
from chain_subscriptions.infrastructure.keccak_hasher import KeccakHasher

TARGET = Address(value="0x" + "aa" * 20)
SUBSCRIBER = Address(value="0x" + "bb" * 20)
ORIGIN = Address(value="0x" + "cc" * 20)
OTHER_SUBSCRIBER = Address(value="0x" + "dd" * 20)
# keccak256("Transfer(address,address,uint256)")
TRANSFER_SIG = Hash32(value="0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef")
OTHER_SIG = Hash32(value="0x" + "11" * 32)
SELECTOR = Selector(value=bytes([0x01, 0x02, 0x03, 0x04]))


class SubscriptionBuilder:
    """Builder for creating Subscription objects in tests.

    The identity is always derived from the identity components, so built
    subscriptions satisfy the same invariant as stored ones.
    """

    def __init__(self):
        """Initialize with default values."""
        self._target = TARGET
        self._event_signature = TRANSFER_SIG
        self._subscriber = SUBSCRIBER
        self._callback = SUBSCRIBER
        self._selector = SELECTOR
        self._gas_limit = 100_000
        self._gas_price = 1_000
        self._deposit = 0
        self._active = True

    def with_target(self, target: Address) -> "SubscriptionBuilder":
        """Set the target contract."""
        self._target = target
        return self

    def with_event_signature(self, event_signature: Hash32) -> "SubscriptionBuilder":
        """Set the event signature."""
        self._event_signature = event_signature
        return self

    def with_subscriber(self, subscriber: Address) -> "SubscriptionBuilder":
        """Set the subscriber (and callback) contract."""
        self._subscriber = subscriber
        self._callback = subscriber
        return self

    def with_callback(self, callback: Address, selector: Selector) -> "SubscriptionBuilder":
        """Set the callback address and selector."""
        self._callback = callback
        self._selector = selector
        return self

    def with_gas(self, gas_limit: int, gas_price: int) -> "SubscriptionBuilder":
        """Set gas limit and gas price."""
        self._gas_limit = gas_limit
        self._gas_price = gas_price
        return self

    def with_deposit(self, deposit: int) -> "SubscriptionBuilder":
        """Set the deposit balance."""
        self._deposit = deposit
        return self

    def inactive(self) -> "SubscriptionBuilder":
        """Mark the subscription as cancelled."""
        self._active = False
        return self

    def build(self) -> Subscription:
        """Build the Subscription object."""
        identity = SubscriptionIdentityService(KeccakHasher())
        return Subscription(
            id=identity.compute(self._target, self._event_signature, self._subscriber),
            target_contract=self._target,
            event_signature=self._event_signature,
            subscriber_contract=self._subscriber,
            callback_address=self._callback,
            callback_selector=self._selector,
            gas_limit=self._gas_limit,
            gas_price=self._gas_price,
            deposit_balance=self._deposit,
            active=self._active,
        )
