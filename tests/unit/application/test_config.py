"""Tests for SubscriptionManagerConfig."""

import pytest
from pydantic import ValidationError

from chain_subscriptions.domain.enums import RefundPolicy, ResubscribePolicy
from chain_subscriptions.domain.value_objects import Address
from chain_subscriptions.application.config import (
    DEFAULT_REGISTRY_ADDRESS,
    SubscriptionManagerConfig,
)


class TestSubscriptionManagerConfig:
    """Test cases for manager configuration."""

    def test_defaults(self):
        """Test default protocol rules."""
        config = SubscriptionManagerConfig()
        assert config.registry_address == Address(value=DEFAULT_REGISTRY_ADDRESS)
        assert config.resubscribe_policy == ResubscribePolicy.PRESERVE_DEPOSIT
        assert config.refund_policy == RefundPolicy.REJECT
        assert config.logger_name == "chain_subscriptions"

    def test_parses_registry_address(self):
        """Test the registry address accepts hex, bytes and Address."""
        hex_address = "0x" + "12" * 20
        assert SubscriptionManagerConfig(registry_address=hex_address).registry_address == (
            hex_address
        )
        assert SubscriptionManagerConfig(registry_address=b"\x12" * 20).registry_address == (
            hex_address
        )
        address = Address(value=hex_address)
        assert SubscriptionManagerConfig(registry_address=address).registry_address == address

    def test_invalid_registry_address(self):
        """Test malformed addresses are rejected."""
        with pytest.raises(ValidationError):
            SubscriptionManagerConfig(registry_address="0x1234")
        with pytest.raises(ValidationError) as exc_info:
            SubscriptionManagerConfig(registry_address=1234)
        assert "Invalid registry address type" in str(exc_info.value)

    def test_policies_from_strings(self):
        """Test policies can be given by value."""
        config = SubscriptionManagerConfig(
            resubscribe_policy="discard_deposit", refund_policy="saturate"
        )
        assert config.resubscribe_policy == ResubscribePolicy.DISCARD_DEPOSIT
        assert config.refund_policy == RefundPolicy.SATURATE

    def test_extra_fields_forbidden(self):
        """Test unknown settings are rejected."""
        with pytest.raises(ValidationError):
            SubscriptionManagerConfig(unknown_setting=True)

    def test_validate_assignment(self):
        """Test assignments are validated."""
        config = SubscriptionManagerConfig()
        with pytest.raises(ValidationError):
            config.refund_policy = "sometimes"
        with pytest.raises(ValidationError):
            config.logger_name = "   "
