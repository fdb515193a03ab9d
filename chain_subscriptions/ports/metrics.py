"""Metrics port - Abstract interface for metrics collection.

This port defines the contract for metrics collection in the hexagonal architecture.
It allows the application layer to count registry activity without depending
on specific metrics implementation details. Metrics are off-chain observability
only and never influence state.
"""

from abc import ABC, abstractmethod


class MetricsPort(ABC):
    """Abstract interface for metrics collection."""

    @abstractmethod
    def increment(self, name: str, value: int = 1) -> None:
        """Increment a counter metric.

        Args:
            name: The metric name (e.g., "callbacks.authorized")
            value: The increment value (default: 1)
        """
        ...

    @abstractmethod
    def gauge(self, name: str, value: float) -> None:
        """Set a gauge metric.

        Args:
            name: The metric name
            value: The gauge value
        """
        ...

    @abstractmethod
    def record(self, name: str, value: float) -> None:
        """Record a value for summary statistics.

        Args:
            name: The metric name (e.g., "notify.fanout")
            value: The value to record
        """
        ...
