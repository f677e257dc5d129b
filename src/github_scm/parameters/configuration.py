"""Configuration providers: environment variables or a plain mapping."""

from __future__ import annotations

import os
from collections.abc import Mapping

from github_scm.parameters.keys import KEY

_ENV_PREFIX = "GITHUB_SCM_"


def env_name(key: str) -> str:
    """Map ``service:scm:github:api-url`` to ``GITHUB_SCM_API_URL``."""
    suffix = key.removeprefix(f"{KEY}:")
    return _ENV_PREFIX + suffix.upper().replace("-", "_").replace(":", "_")


class EnvConfiguration:
    """Adapter for ConfigurationPort reading ``GITHUB_SCM_*`` environment variables."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str, default: str | None = None) -> str | None:
        value = self._environ.get(env_name(key), "").strip()
        return value or default


class MappingConfiguration:
    """Adapter for ConfigurationPort over a dict keyed by configuration key."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str, default: str | None = None) -> str | None:
        value = self._values.get(key)
        return value if value else default
