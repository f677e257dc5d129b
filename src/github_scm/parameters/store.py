"""Parameter stores: YAML file on disk, or in-memory mappings.

File layout::

    nodes:
      service:scm:github:acme:
        service:scm:github:user: acme
    subscriptions:
      1:
        node: service:scm:github:acme
        parameters:
          service:scm:github:repository: widgets

A subscription's effective parameters are its node's parameters overlaid
by its own.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml

from github_scm.errors import NodeNotFoundError, ParameterStoreError, SubscriptionNotFoundError

logger = logging.getLogger(__name__)


class InMemoryParameterStore:
    """Adapter for ParameterStorePort over plain mappings."""

    def __init__(
        self,
        nodes: Mapping[str, Mapping[str, object]] | None = None,
        subscriptions: Mapping[object, Mapping[str, object]] | None = None,
    ) -> None:
        self._nodes = {str(node): _stringify(values) for node, values in (nodes or {}).items()}
        self._subscriptions = {
            str(sub_id): dict(entry) for sub_id, entry in (subscriptions or {}).items()
        }

    def get_node_parameters(self, node: str) -> dict[str, str]:
        if node not in self._nodes:
            raise NodeNotFoundError(f"Node '{node}' not found.")
        return dict(self._nodes[node])

    def get_subscription_parameters(self, subscription: int) -> dict[str, str]:
        entry = self._subscriptions.get(str(subscription))
        if entry is None:
            raise SubscriptionNotFoundError(f"Subscription {subscription} not found.")

        node = entry.get("node")
        merged: dict[str, str] = {}
        if node:
            merged.update(self.get_node_parameters(str(node)))
        own = entry.get("parameters") or {}
        if not isinstance(own, Mapping):
            raise ParameterStoreError(
                f"Invalid parameters for subscription {subscription}: expected a mapping."
            )
        merged.update(_stringify(own))
        return merged


class YamlParameterStore:
    """Adapter for ParameterStorePort backed by a YAML file.

    The file is re-read on every lookup: this core holds no state
    between invocations.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def get_node_parameters(self, node: str) -> dict[str, str]:
        return self._load().get_node_parameters(node)

    def get_subscription_parameters(self, subscription: int) -> dict[str, str]:
        return self._load().get_subscription_parameters(subscription)

    def _load(self) -> InMemoryParameterStore:
        if not self.path.exists():
            raise ParameterStoreError(f"Parameter file not found: {self.path}")
        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ParameterStoreError(f"Invalid YAML in {self.path}: {exc}") from exc
        except OSError as exc:
            raise ParameterStoreError(f"Cannot read {self.path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ParameterStoreError(f"Invalid format in {self.path}: expected a YAML mapping.")
        nodes = data.get("nodes") or {}
        subscriptions = data.get("subscriptions") or {}
        if not isinstance(nodes, dict) or not isinstance(subscriptions, dict):
            raise ParameterStoreError(
                f"Invalid format in {self.path}: 'nodes' and 'subscriptions' must be mappings."
            )
        for sub_id, entry in subscriptions.items():
            if not isinstance(entry, dict):
                raise ParameterStoreError(
                    f"Invalid format in {self.path}: subscription {sub_id} must be a mapping."
                )
        logger.debug(
            "Loaded %d node(s) and %d subscription(s) from %s",
            len(nodes),
            len(subscriptions),
            self.path,
        )
        return InMemoryParameterStore(nodes=nodes, subscriptions=subscriptions)


def _stringify(values: Mapping[str, object]) -> dict[str, str]:
    """Coerce parameter values to strings (YAML loads ``repository: 0`` as an int)."""
    if not isinstance(values, Mapping):
        raise ParameterStoreError("Invalid parameters: expected a mapping.")
    return {str(key): str(value) for key, value in values.items() if value is not None}
