"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest

from chain_subscriptions.application.config import SubscriptionManagerConfig
from chain_subscriptions.application.subscription_manager import SubscriptionManager
from chain_subscriptions.domain.services import SubscriptionIdentityService
from chain_subscriptions.infrastructure.codec import SubscriptionCodec
from chain_subscriptions.infrastructure.in_memory_metrics import InMemoryMetrics
from chain_subscriptions.infrastructure.in_memory_registry import InMemorySubscriptionRegistry
from chain_subscriptions.infrastructure.keccak_hasher import KeccakHasher
from chain_subscriptions.ports.logger import LoggerPort


@pytest.fixture
def hasher():
    """Create the Keccak-256 hasher."""
    return KeccakHasher()


@pytest.fixture
def identity_service(hasher):
    """Create an identity service backed by Keccak-256."""
    return SubscriptionIdentityService(hasher)


@pytest.fixture
def codec(identity_service):
    """Create the canonical subscription codec."""
    return SubscriptionCodec(identity_service)


@pytest.fixture
def registry(codec):
    """Create a fresh in-memory registry for each test."""
    return InMemorySubscriptionRegistry(codec)


@pytest.fixture
def metrics():
    """Create an in-memory metrics collector."""
    return InMemoryMetrics()


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing."""
    mock = MagicMock(spec=LoggerPort)
    mock.info = MagicMock()
    mock.warning = MagicMock()
    mock.error = MagicMock()
    mock.debug = MagicMock()
    return mock


@pytest.fixture
def config():
    """Create the default manager configuration."""
    return SubscriptionManagerConfig()


@pytest.fixture
def manager(registry, identity_service, config, mock_logger, metrics):
    """Create a subscription manager over the in-memory registry."""
    return SubscriptionManager(
        registry=registry,
        identity_service=identity_service,
        config=config,
        logger=mock_logger,
        metrics=metrics,
    )
