"""Domain layer - Core business logic and entities."""

from .enums import (
    RefundPolicy,
    ResubscribePolicy,
    SubscriptionAction,
    SubscriptionLogType,
    SubscriptionState,
)
from .exceptions import (
    GasRefundError,
    InsufficientDepositError,
    InvalidSubscriptionError,
    SerializationError,
    SubscriptionError,
)
from .models import CallbackExecution, LogEntry, Subscription, SubscriptionLog
from .services import (
    SubscriptionIdentityService,
    SubscriptionLifecycle,
    SubscriptionLogDecoder,
    SubscriptionLogTopics,
)
from .types import Hasher
from .value_objects import Address, Hash32, Selector

__all__ = [
    # Value objects
    "Address",
    # Models
    "CallbackExecution",
    # Exceptions
    "GasRefundError",
    "Hash32",
    # Types
    "Hasher",
    "InsufficientDepositError",
    "InvalidSubscriptionError",
    "LogEntry",
    # Enums
    "RefundPolicy",
    "ResubscribePolicy",
    "Selector",
    "SerializationError",
    "Subscription",
    "SubscriptionAction",
    "SubscriptionError",
    # Services
    "SubscriptionIdentityService",
    "SubscriptionLifecycle",
    "SubscriptionLog",
    "SubscriptionLogDecoder",
    "SubscriptionLogTopics",
    "SubscriptionLogType",
    "SubscriptionState",
]
