"""Domain models using Pydantic for validation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import SubscriptionLogType, SubscriptionState
from .exceptions import GasRefundError
from .value_objects import Address, Hash32, Selector

MAX_UINT64 = 2**64 - 1


def _coerce(model: type[Any], v: Any) -> Any:
    """Wrap raw bytes or hex strings into a value object."""
    if isinstance(v, str | bytes | bytearray):
        return model(value=v)
    return v


class Subscription(BaseModel):
    """An on-chain event subscription.

    Binds a subscriber contract to an event emitted by a target contract,
    with a bounded-gas callback paid for from a prepaid deposit. The record
    is never erased; cancellation only clears ``active``.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,  # deposit_balance can never go negative
    )

    # Identity
    id: Hash32 = Field(..., frozen=True, description="hash(target, event_signature, subscriber)")
    target_contract: Address = Field(..., frozen=True)
    event_signature: Hash32 = Field(..., frozen=True)
    subscriber_contract: Address = Field(..., frozen=True)

    # Callback
    callback_address: Address
    callback_selector: Selector

    # Accounting
    gas_limit: int = Field(..., ge=0, le=MAX_UINT64, strict=True)
    gas_price: int = Field(..., ge=0, strict=True)
    deposit_balance: int = Field(default=0, ge=0, strict=True)

    active: bool = Field(default=True, strict=True)

    @field_validator("target_contract", "subscriber_contract", "callback_address", mode="before")
    @classmethod
    def parse_address(cls, v: Any) -> Any:
        """Parse addresses from hex strings or raw bytes."""
        return _coerce(Address, v)

    @field_validator("id", "event_signature", mode="before")
    @classmethod
    def parse_hash(cls, v: Any) -> Any:
        """Parse 32-byte hashes from hex strings or raw bytes."""
        return _coerce(Hash32, v)

    @field_validator("callback_selector", mode="before")
    @classmethod
    def parse_selector(cls, v: Any) -> Any:
        """Parse the function selector from hex or raw bytes."""
        return _coerce(Selector, v)

    @property
    def state(self) -> SubscriptionState:
        """Lifecycle state of a stored record."""
        return SubscriptionState.ACTIVE if self.active else SubscriptionState.CANCELLED

    def gas_cost(self) -> int:
        """Total charge for one callback execution."""
        return self.gas_limit * self.gas_price

    def has_sufficient_deposit(self) -> bool:
        """Check if the deposit covers one callback."""
        return self.deposit_balance >= self.gas_cost()

    def deduct_gas(self) -> bool:
        """Charge one callback against the deposit.

        Returns:
            True if the cost was deducted, False if the deposit was
            insufficient (balance left untouched)
        """
        if not self.has_sufficient_deposit():
            return False
        self.deposit_balance = self.deposit_balance - self.gas_cost()
        return True

    def refund_gas(self, gas_used: int, saturate: bool = False) -> int:
        """Credit the unused part of a charged callback back to the deposit.

        Args:
            gas_used: Gas actually consumed by the callback
            saturate: Refund nothing instead of raising when gas_used
                exceeds gas_limit

        Returns:
            The amount credited

        Raises:
            GasRefundError: If gas_used exceeds gas_limit and saturate is False
        """
        if gas_used > self.gas_limit:
            if not saturate:
                raise GasRefundError(self.id, self.gas_limit, gas_used)
            return 0
        refund = (self.gas_limit - gas_used) * self.gas_price
        self.deposit_balance = self.deposit_balance + refund
        return refund

    def __str__(self) -> str:
        """String representation."""
        return f"Subscription({self.id} - {self.state.value}, balance={self.deposit_balance})"


class CallbackExecution(BaseModel):
    """A pending callback invocation authorized by a notification.

    Transient: handed to the callback executor and never persisted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    subscription_id: Hash32
    subscriber_address: Address
    callback_address: Address
    callback_data: bytes = Field(..., description="Selector followed by the raw event data")
    gas_limit: int = Field(..., ge=0, le=MAX_UINT64)
    gas_price: int = Field(..., ge=0)
    original_origin: Address = Field(..., description="tx.origin of the triggering transaction")


class LogEntry(BaseModel):
    """A raw log emitted by the subscription registry."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    address: Address
    topics: tuple[Hash32, ...] = Field(default_factory=tuple)
    data: bytes = Field(default=b"")


class SubscriptionLog(BaseModel):
    """Structured view of a subscription log for downstream observers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    subscription_id: Hash32
    event_type: SubscriptionLogType
    block_number: int = Field(..., ge=0)
    data: bytes = Field(default=b"", description="Auxiliary data, e.g. event signature")
