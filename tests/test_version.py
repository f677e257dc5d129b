"""Tests for runtime package version resolution."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version

import github_scm


class TestRuntimeVersion:
    """Version resolution should reflect installed package metadata."""

    def test_module_version_matches_installed_distribution(self):
        assert github_scm.__version__ == distribution_version("github-scm-plugin")

    def test_resolve_version_uses_fallback_when_metadata_missing(self, monkeypatch):
        def _raise_package_not_found(_: str) -> str:
            raise PackageNotFoundError

        monkeypatch.setattr(github_scm, "_distribution_version", _raise_package_not_found)

        assert github_scm._resolve_version() == "0.0.0+local"
