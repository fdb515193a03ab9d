"""Protocol configuration for the subscription manager."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain.enums import RefundPolicy, ResubscribePolicy
from ..domain.value_objects import Address

DEFAULT_REGISTRY_ADDRESS = "0x0000000000000000000000000000000000008082"


class SubscriptionManagerConfig(BaseModel):
    """Strongly-typed configuration for the subscription manager.

    The registry address and both policies are protocol rules: every node
    re-executing the same state transition must use identical values.
    """

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    registry_address: Address = Field(
        default_factory=lambda: Address(value=DEFAULT_REGISTRY_ADDRESS),
        description="Address the registry emits its logs from",
    )
    resubscribe_policy: ResubscribePolicy = Field(
        default=ResubscribePolicy.PRESERVE_DEPOSIT,
        description="Whether re-subscribing a cancelled identity keeps its residual deposit",
    )
    refund_policy: RefundPolicy = Field(
        default=RefundPolicy.REJECT,
        description="Handling of refunds reporting more gas than the gas limit",
    )
    logger_name: str = Field(
        default="chain_subscriptions",
        min_length=1,
        description="Name of the operational logger",
    )

    @field_validator("registry_address", mode="before")
    @classmethod
    def parse_registry_address(cls, v: Any) -> Address:
        """Parse the registry address from hex, bytes or an Address."""
        if isinstance(v, Address):
            return v
        if isinstance(v, str | bytes):
            return Address(value=v)
        raise ValueError(f"Invalid registry address type: {type(v)}")
