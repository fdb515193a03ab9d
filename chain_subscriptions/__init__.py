"""chain-subscriptions - On-chain event subscription registry with gas accounting."""

from .application.subscription_manager import SubscriptionManager
from .infrastructure.factories import SubscriptionManagerFactory

__all__ = ["SubscriptionManager", "SubscriptionManagerFactory"]
__version__ = "0.1.0"
