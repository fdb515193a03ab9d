"""Ports layer - Abstract interfaces for external collaborators."""

from .logger import LoggerPort
from .metrics import MetricsPort
from .registry import SubscriptionRegistryPort

__all__ = ["LoggerPort", "MetricsPort", "SubscriptionRegistryPort"]
