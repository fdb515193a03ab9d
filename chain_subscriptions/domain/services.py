"""Domain services containing business logic.

Following Domain-Driven Design principles, these services encapsulate
logic that doesn't naturally belong to a single entity: deriving a
subscription identity, the lifecycle transition table, and the mapping
between structured subscription logs and the raw topics the registry
emits.
"""

from typing import ClassVar

from .enums import SubscriptionAction, SubscriptionLogType, SubscriptionState
from .models import LogEntry, SubscriptionLog
from .types import Hasher
from .value_objects import Address, Hash32


class SubscriptionIdentityService:
    """Domain service deriving subscription identities.

    The identity is ``keccak256(target || event_signature || subscriber)``.
    The input order is part of the protocol and must not change.
    """

    def __init__(self, hasher: Hasher):
        """Initialize with the hash primitive.

        Args:
            hasher: Object providing keccak256 over byte chunks
        """
        self._hasher = hasher

    def compute(self, target: Address, event_signature: Hash32, subscriber: Address) -> Hash32:
        """Compute the identity of a subscription.

        Args:
            target: Contract emitting the event
            event_signature: Keccak hash of the event signature
            subscriber: Contract that owns the subscription

        Returns:
            The subscription identity
        """
        digest = self._hasher.keccak256(target.value, event_signature.value, subscriber.value)
        return Hash32(value=digest)


class SubscriptionLifecycle:
    """Explicit transition table for a subscription identity.

    Every (state, action) pair has exactly one outcome. Transitions that
    leave the state unchanged are no-ops for the manager.
    """

    TRANSITIONS: ClassVar[dict[tuple[SubscriptionState, SubscriptionAction], SubscriptionState]] = {
        (SubscriptionState.UNREGISTERED, SubscriptionAction.SUBSCRIBE): SubscriptionState.ACTIVE,
        (SubscriptionState.ACTIVE, SubscriptionAction.SUBSCRIBE): SubscriptionState.ACTIVE,
        (SubscriptionState.CANCELLED, SubscriptionAction.SUBSCRIBE): SubscriptionState.ACTIVE,
        (
            SubscriptionState.UNREGISTERED,
            SubscriptionAction.UNSUBSCRIBE,
        ): SubscriptionState.UNREGISTERED,
        (SubscriptionState.ACTIVE, SubscriptionAction.UNSUBSCRIBE): SubscriptionState.CANCELLED,
        (SubscriptionState.CANCELLED, SubscriptionAction.UNSUBSCRIBE): SubscriptionState.CANCELLED,
    }

    @classmethod
    def next_state(cls, state: SubscriptionState, action: SubscriptionAction) -> SubscriptionState:
        """Look up the state reached by applying an action."""
        return cls.TRANSITIONS[(state, action)]

    @classmethod
    def is_noop(cls, state: SubscriptionState, action: SubscriptionAction) -> bool:
        """Check whether an action leaves the identity untouched."""
        return cls.next_state(state, action) == state


class SubscriptionLogTopics:
    """Kind topics of the logs emitted by the registry.

    Each kind is the ASCII event name right-aligned in 32 bytes. The
    topic layout is consensus-visible.
    """

    CREATED: ClassVar[Hash32] = Hash32.from_bytes(b"SubscriptionCreated")
    REMOVED: ClassVar[Hash32] = Hash32.from_bytes(b"SubscriptionRemoved")
    INSUFFICIENT_DEPOSIT: ClassVar[Hash32] = Hash32.from_bytes(b"InsufficientDeposit")

    @classmethod
    def created(
        cls,
        emitter: Address,
        subscription_id: Hash32,
        target: Address,
        subscriber: Address,
        event_signature: Hash32,
    ) -> LogEntry:
        """Build the log announcing a new subscription."""
        return LogEntry(
            address=emitter,
            topics=(cls.CREATED, subscription_id, target.to_hash(), subscriber.to_hash()),
            data=event_signature.value,
        )

    @classmethod
    def removed(cls, emitter: Address, subscription_id: Hash32) -> LogEntry:
        """Build the log announcing a cancelled subscription."""
        return LogEntry(address=emitter, topics=(cls.REMOVED, subscription_id))

    @classmethod
    def insufficient_deposit(cls, emitter: Address, subscription_id: Hash32) -> LogEntry:
        """Build the log for a subscription skipped for lack of funds."""
        return LogEntry(address=emitter, topics=(cls.INSUFFICIENT_DEPOSIT, subscription_id))


class SubscriptionLogDecoder:
    """Domain service mapping raw registry logs to SubscriptionLog records."""

    _KINDS: ClassVar[dict[Hash32, SubscriptionLogType]] = {
        SubscriptionLogTopics.CREATED: SubscriptionLogType.CREATED,
        SubscriptionLogTopics.REMOVED: SubscriptionLogType.DELETED,
        SubscriptionLogTopics.INSUFFICIENT_DEPOSIT: SubscriptionLogType.INSUFFICIENT_DEPOSIT,
    }

    def __init__(self, registry_address: Address):
        """Initialize the decoder.

        Args:
            registry_address: Address the registry emits its logs from
        """
        self._registry_address = registry_address

    def is_subscription_log(self, entry: LogEntry) -> bool:
        """Check whether a log was emitted by the registry with a known kind."""
        return (
            entry.address == self._registry_address
            and len(entry.topics) >= 2
            and entry.topics[0] in self._KINDS
        )

    def decode(self, entry: LogEntry, block_number: int) -> SubscriptionLog:
        """Convert a raw registry log into its structured form.

        Args:
            entry: The raw log
            block_number: Height of the block that contains the log

        Returns:
            The structured subscription log

        Raises:
            ValueError: If the log was not emitted by the registry or has an
                unknown kind
        """
        if not self.is_subscription_log(entry):
            raise ValueError(
                f"Log from {entry.address} with {len(entry.topics)} topics "
                "is not a subscription registry log"
            )
        return SubscriptionLog(
            subscription_id=entry.topics[1],
            event_type=self._KINDS[entry.topics[0]],
            block_number=block_number,
            data=entry.data,
        )
