"""In-memory implementation of the SubscriptionRegistryPort.

This is an infrastructure adapter for testing and single-process use.
Records are held in their canonical encoding, so every read returns a
fresh object and callers can never mutate stored state except through
``set``.
"""

from ..domain.models import LogEntry, Subscription
from ..domain.value_objects import Address, Hash32
from ..ports.registry import SubscriptionRegistryPort
from .codec import SubscriptionCodec


class InMemorySubscriptionRegistry(SubscriptionRegistryPort):
    """In-memory registry with an append-ordered event index."""

    def __init__(self, codec: SubscriptionCodec) -> None:
        """Initialize the in-memory storage.

        Args:
            codec: Canonical codec used to store and load records
        """
        self._codec = codec
        self._records: dict[bytes, bytes] = {}
        # Key is (target, event_signature); ids in first-insertion order
        self._index: dict[tuple[bytes, bytes], list[bytes]] = {}
        self._logs: list[LogEntry] = []

    def get(self, subscription_id: Hash32) -> Subscription | None:
        """Load a subscription by identity."""
        data = self._records.get(subscription_id.value)
        if data is None:
            return None
        return self._codec.decode(data)

    def set(self, subscription_id: Hash32, subscription: Subscription) -> None:
        """Store a subscription, indexing it on first insertion.

        Raises:
            ValueError: If subscription_id is not the record's own identity
        """
        if subscription.id != subscription_id:
            raise ValueError(
                f"Subscription {subscription.id} cannot be stored under identity {subscription_id}"
            )
        if subscription_id.value not in self._records:
            key = (subscription.target_contract.value, subscription.event_signature.value)
            self._index.setdefault(key, []).append(subscription_id.value)
        self._records[subscription_id.value] = self._codec.encode(subscription)

    def list_by_target_and_signature(
        self, target: Address, event_signature: Hash32
    ) -> list[Subscription]:
        """List subscriptions for an event in first-insertion order."""
        ids = self._index.get((target.value, event_signature.value), [])
        return [self._codec.decode(self._records[sub_id]) for sub_id in ids]

    def append_log(self, entry: LogEntry) -> None:
        """Record a log entry."""
        self._logs.append(entry)

    @property
    def logs(self) -> list[LogEntry]:
        """All appended log entries in order (useful for testing)."""
        return list(self._logs)

    def raw(self, subscription_id: Hash32) -> bytes | None:
        """Stored canonical bytes for an identity (useful for testing)."""
        return self._records.get(subscription_id.value)

    def clear(self) -> None:
        """Clear all records, index entries and logs (useful for testing)."""
        self._records.clear()
        self._index.clear()
        self._logs.clear()

    def __len__(self) -> int:
        return len(self._records)
