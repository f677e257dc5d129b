"""Ports: subscription parameter store and configuration provider."""

from __future__ import annotations

from typing import Protocol


class ParameterStorePort(Protocol):
    """Port for reading the parameter bags of subscriptions and nodes."""

    def get_subscription_parameters(self, subscription: int) -> dict[str, str]:
        """Return the effective parameters of a subscription (node values included)."""
        ...

    def get_node_parameters(self, node: str) -> dict[str, str]:
        """Return the parameters configured on a node."""
        ...


class ConfigurationPort(Protocol):
    """Port for reading global configuration values such as the API URL."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the configured value for ``key``, or ``default``."""
        ...
