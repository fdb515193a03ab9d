"""Application layer - Use case orchestration."""

from .config import DEFAULT_REGISTRY_ADDRESS, SubscriptionManagerConfig
from .subscription_manager import SubscriptionManager

__all__ = ["DEFAULT_REGISTRY_ADDRESS", "SubscriptionManager", "SubscriptionManagerConfig"]
