"""Factory for wiring a subscription manager with default adapters."""

from __future__ import annotations

import logging

from ..application.config import SubscriptionManagerConfig
from ..application.subscription_manager import SubscriptionManager
from ..domain.services import SubscriptionIdentityService
from ..ports.logger import LoggerPort
from ..ports.metrics import MetricsPort
from ..ports.registry import SubscriptionRegistryPort
from .codec import SubscriptionCodec
from .in_memory_metrics import InMemoryMetrics
from .in_memory_registry import InMemorySubscriptionRegistry
from .keccak_hasher import KeccakHasher
from .simple_logger import SimpleLogger


class SubscriptionManagerFactory:
    """Factory for creating subscription managers with consistent wiring.

    Any collaborator not supplied is replaced by its default adapter:
    Keccak-256 identities, an in-memory registry, a SimpleLogger and
    in-memory metrics.
    """

    @staticmethod
    def create_identity_service() -> SubscriptionIdentityService:
        """Create an identity service backed by Keccak-256."""
        return SubscriptionIdentityService(KeccakHasher())

    @staticmethod
    def create_registry(
        identity_service: SubscriptionIdentityService | None = None,
    ) -> InMemorySubscriptionRegistry:
        """Create an in-memory registry using the canonical codec."""
        identity = identity_service or SubscriptionManagerFactory.create_identity_service()
        return InMemorySubscriptionRegistry(SubscriptionCodec(identity))

    @staticmethod
    def create(
        config: SubscriptionManagerConfig | None = None,
        registry: SubscriptionRegistryPort | None = None,
        logger: LoggerPort | None = None,
        metrics: MetricsPort | None = None,
        log_level: int = logging.INFO,
    ) -> SubscriptionManager:
        """Create a fully wired subscription manager.

        Args:
            config: Protocol configuration (defaults apply if omitted)
            registry: Registry adapter (in-memory if omitted)
            logger: Operational logger (SimpleLogger if omitted)
            metrics: Metrics collector (InMemoryMetrics if omitted)
            log_level: Level for the default logger

        Returns:
            Configured SubscriptionManager instance
        """
        config = config or SubscriptionManagerConfig()
        identity = SubscriptionManagerFactory.create_identity_service()
        return SubscriptionManager(
            registry=registry or SubscriptionManagerFactory.create_registry(identity),
            identity_service=identity,
            config=config,
            logger=logger or SimpleLogger(name=config.logger_name, level=log_level),
            metrics=metrics or InMemoryMetrics(),
        )
