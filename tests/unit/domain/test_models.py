"""Tests for the Subscription entity and transient models."""

import pytest
from pydantic import ValidationError

from chain_subscriptions.domain.enums import SubscriptionLogType, SubscriptionState
from chain_subscriptions.domain.exceptions import GasRefundError
from chain_subscriptions.domain.models import (
    MAX_UINT64,
    CallbackExecution,
    LogEntry,
    SubscriptionLog,
)
from tests.builders import ORIGIN, SUBSCRIBER, TARGET, SubscriptionBuilder


class TestSubscriptionAccounting:
    """Test cases for gas and deposit arithmetic."""

    def test_gas_cost(self):
        """Test gas cost is the exact product of limit and price."""
        sub = SubscriptionBuilder().with_gas(100_000, 1_000).build()
        assert sub.gas_cost() == 100_000_000

    def test_gas_cost_unbounded(self):
        """Test gas cost never overflows a fixed width."""
        price = 10**40
        sub = SubscriptionBuilder().with_gas(MAX_UINT64, price).build()
        assert sub.gas_cost() == MAX_UINT64 * price
        assert sub.gas_cost() > 2**128

    def test_has_sufficient_deposit_boundary(self):
        """Test that a deposit equal to the cost is sufficient."""
        sub = SubscriptionBuilder().with_gas(10, 5).with_deposit(50).build()
        assert sub.has_sufficient_deposit()
        sub.deposit_balance = 49
        assert not sub.has_sufficient_deposit()

    def test_deduct_gas_success(self):
        """Test a successful deduction."""
        sub = SubscriptionBuilder().with_gas(10, 5).with_deposit(120).build()
        assert sub.deduct_gas() is True
        assert sub.deposit_balance == 70

    def test_deduct_gas_insufficient_leaves_balance(self):
        """Test that an insufficient deposit is not touched."""
        sub = SubscriptionBuilder().with_gas(10, 5).with_deposit(49).build()
        assert sub.deduct_gas() is False
        assert sub.deposit_balance == 49

    def test_refund_gas_exact(self):
        """Test refund of (limit - used) * price."""
        sub = SubscriptionBuilder().with_gas(100_000, 1_000).with_deposit(7).build()
        refund = sub.refund_gas(40_000)
        assert refund == 60_000 * 1_000
        assert sub.deposit_balance == 7 + 60_000_000

    def test_refund_gas_full_usage(self):
        """Test that using the whole limit refunds nothing."""
        sub = SubscriptionBuilder().with_gas(100, 3).with_deposit(5).build()
        assert sub.refund_gas(100) == 0
        assert sub.deposit_balance == 5

    def test_refund_gas_over_limit_raises(self):
        """Test that over-reported gas fails instead of wrapping around."""
        sub = SubscriptionBuilder().with_gas(100, 3).with_deposit(5).build()
        with pytest.raises(GasRefundError) as exc_info:
            sub.refund_gas(101)
        assert exc_info.value.gas_limit == 100
        assert exc_info.value.gas_used == 101
        assert sub.deposit_balance == 5

    def test_refund_gas_over_limit_saturates(self):
        """Test saturating refunds credit nothing."""
        sub = SubscriptionBuilder().with_gas(100, 3).with_deposit(5).build()
        assert sub.refund_gas(101, saturate=True) == 0
        assert sub.deposit_balance == 5


class TestSubscriptionInvariants:
    """Test cases for validation of the Subscription entity."""

    def test_defaults(self):
        """Test new subscriptions are active with zero deposit."""
        sub = SubscriptionBuilder().build()
        assert sub.active is True
        assert sub.deposit_balance == 0
        assert sub.state == SubscriptionState.ACTIVE

    def test_cancelled_state(self):
        """Test that inactive records report CANCELLED."""
        assert SubscriptionBuilder().inactive().build().state == SubscriptionState.CANCELLED

    def test_negative_balance_rejected(self):
        """Test that the deposit balance can never become negative."""
        sub = SubscriptionBuilder().with_deposit(10).build()
        with pytest.raises(ValidationError):
            sub.deposit_balance = -1
        assert sub.deposit_balance == 10

    def test_gas_limit_bounds(self):
        """Test that gas limit is an unsigned 64-bit integer."""
        with pytest.raises(ValidationError):
            SubscriptionBuilder().with_gas(MAX_UINT64 + 1, 1).build()
        with pytest.raises(ValidationError):
            SubscriptionBuilder().with_gas(-1, 1).build()

    def test_bool_not_accepted_as_integer(self):
        """Test strict integer fields."""
        sub = SubscriptionBuilder().build()
        with pytest.raises(ValidationError):
            sub.gas_price = True  # type: ignore

    def test_identity_components_are_frozen(self):
        """Test that identity fields cannot be reassigned."""
        sub = SubscriptionBuilder().build()
        with pytest.raises(ValidationError):
            sub.target_contract = SUBSCRIBER  # type: ignore
        with pytest.raises(ValidationError):
            sub.id = sub.event_signature  # type: ignore

    def test_accepts_hex_fields(self):
        """Test that hex strings are parsed into value objects."""
        built = SubscriptionBuilder().build()
        data = built.model_dump()
        data.update(
            id=built.id.hex(),
            target_contract=TARGET.hex(),
            callback_selector="0x01020304",
        )
        for key in ("event_signature", "subscriber_contract", "callback_address"):
            data[key] = getattr(built, key).value
        assert type(built).model_validate(data) == built


class TestTransientModels:
    """Test cases for CallbackExecution, LogEntry and SubscriptionLog."""

    def test_callback_execution_is_frozen(self):
        """Test that callback descriptors cannot be altered."""
        sub = SubscriptionBuilder().build()
        execution = CallbackExecution(
            subscription_id=sub.id,
            subscriber_address=sub.subscriber_contract,
            callback_address=sub.callback_address,
            callback_data=b"\x01\x02\x03\x04\xff",
            gas_limit=sub.gas_limit,
            gas_price=sub.gas_price,
            original_origin=ORIGIN,
        )
        with pytest.raises(ValidationError):
            execution.gas_limit = 1  # type: ignore

    def test_log_entry_defaults(self):
        """Test that a log entry defaults to no topics and empty data."""
        entry = LogEntry(address=TARGET)
        assert entry.topics == ()
        assert entry.data == b""

    def test_subscription_log(self):
        """Test the structured log shape."""
        sub = SubscriptionBuilder().build()
        log = SubscriptionLog(
            subscription_id=sub.id,
            event_type=SubscriptionLogType.CALLBACK_FAILED,
            block_number=12,
            data=b"out of gas",
        )
        assert log.event_type.value == "callback_failed"
        with pytest.raises(ValidationError):
            SubscriptionLog(
                subscription_id=sub.id,
                event_type=SubscriptionLogType.CREATED,
                block_number=-1,
            )
