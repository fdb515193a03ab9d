"""Registry port interface for subscription records.

This module defines the storage contract the subscription manager consumes,
following hexagonal architecture principles. The registry is the sole owner
of subscription state; the enclosing execution framework may journal and
roll back everything written through it.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..domain.models import LogEntry, Subscription
from ..domain.value_objects import Address, Hash32


class SubscriptionRegistryPort(ABC):
    """Abstract registry for subscription records and registry logs.

    This is a port interface that must be implemented by infrastructure adapters.
    All operations are synchronous.
    """

    @abstractmethod
    def get(self, subscription_id: Hash32) -> Subscription | None:
        """Get a subscription by identity.

        Returns:
            A fresh Subscription instance, or None if no record exists
        """
        ...

    @abstractmethod
    def set(self, subscription_id: Hash32, subscription: Subscription) -> None:
        """Store a subscription, fully overwriting any existing record.

        Raises:
            ValueError: If subscription_id differs from subscription.id
        """
        ...

    @abstractmethod
    def list_by_target_and_signature(
        self, target: Address, event_signature: Hash32
    ) -> Sequence[Subscription]:
        """List all subscriptions for an event of a target contract.

        The order must be identical across repeated calls on unchanged
        state. Inactive records are included.
        """
        ...

    @abstractmethod
    def append_log(self, entry: LogEntry) -> None:
        """Append a log entry emitted by the registry."""
        ...
