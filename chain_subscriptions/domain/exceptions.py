"""Domain-specific exceptions following DDD principles."""


class SubscriptionError(Exception):
    """Base exception for all subscription registry errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidSubscriptionError(SubscriptionError):
    """Raised when an operation references an identity with no usable record."""

    def __init__(self, subscription_id: object, reason: str = "not found"):
        super().__init__(
            f"Invalid subscription '{subscription_id}': {reason}",
            details={"subscription_id": str(subscription_id), "reason": reason},
        )
        self.subscription_id = subscription_id


class InsufficientDepositError(SubscriptionError):
    """Raised when a withdrawal would drive the deposit balance negative."""

    def __init__(self, subscription_id: object, balance: int, requested: int):
        super().__init__(
            f"Insufficient deposit for subscription '{subscription_id}': "
            f"balance {balance}, requested {requested}",
            details={
                "subscription_id": str(subscription_id),
                "balance": balance,
                "requested": requested,
            },
        )
        self.subscription_id = subscription_id
        self.balance = balance
        self.requested = requested


class GasRefundError(SubscriptionError):
    """Raised when reported gas usage exceeds the subscription's gas limit."""

    def __init__(self, subscription_id: object, gas_limit: int, gas_used: int):
        super().__init__(
            f"Gas used ({gas_used}) exceeds gas limit ({gas_limit}) "
            f"for subscription '{subscription_id}'",
            details={
                "subscription_id": str(subscription_id),
                "gas_limit": gas_limit,
                "gas_used": gas_used,
            },
        )
        self.gas_limit = gas_limit
        self.gas_used = gas_used


class SerializationError(SubscriptionError):
    """Canonical encoding/decoding errors."""

    pass
