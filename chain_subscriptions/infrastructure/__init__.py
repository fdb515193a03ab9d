"""Infrastructure layer - Adapters for ports and default wiring."""

from .codec import SubscriptionCodec
from .in_memory_metrics import InMemoryMetrics
from .in_memory_registry import InMemorySubscriptionRegistry
from .keccak_hasher import KeccakHasher
from .simple_logger import SimpleLogger

__all__ = [
    "InMemoryMetrics",
    "InMemorySubscriptionRegistry",
    "KeccakHasher",
    "SimpleLogger",
    "SubscriptionCodec",
]
