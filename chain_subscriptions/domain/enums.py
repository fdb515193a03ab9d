"""Domain enums for type safety and consistency.

This module centralizes all enumeration types used across the package,
including the explicit lifecycle variant of a subscription identity and
the protocol rules that govern its transitions.
"""

from enum import Enum


class SubscriptionState(str, Enum):
    """Lifecycle state of a subscription identity.

    Derived from the registry: no record, an active record, or a
    soft-deleted record.
    """

    UNREGISTERED = "UNREGISTERED"  # No record has ever been stored
    ACTIVE = "ACTIVE"  # Record exists and receives callbacks
    CANCELLED = "CANCELLED"  # Record retained but deactivated


class SubscriptionAction(str, Enum):
    """Actions that drive the subscription lifecycle."""

    SUBSCRIBE = "subscribe"
    UNSUBSCRIBE = "unsubscribe"


class SubscriptionLogType(str, Enum):
    """Event-type taxonomy for downstream observers."""

    CREATED = "created"
    DELETED = "deleted"
    CALLBACK_SUCCESS = "callback_success"
    CALLBACK_FAILED = "callback_failed"
    INSUFFICIENT_DEPOSIT = "insufficient_deposit"


class ResubscribePolicy(str, Enum):
    """Protocol rule for re-registering a cancelled identity.

    Decides what happens to the residual deposit of the cancelled record
    when it is replaced by a fresh subscription.
    """

    PRESERVE_DEPOSIT = "preserve_deposit"  # Residual deposit carries over
    DISCARD_DEPOSIT = "discard_deposit"  # Legacy behaviour: reset to zero


class RefundPolicy(str, Enum):
    """Handling of a gas refund whose reported usage exceeds the gas limit."""

    REJECT = "reject"  # Raise GasRefundError, record untouched
    SATURATE = "saturate"  # Refund nothing
