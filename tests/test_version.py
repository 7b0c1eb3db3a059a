"""Tests for runtime.version.resolve_project_version."""

from __future__ import annotations

import pytest

from photo_grid.runtime import version as runtime_version


def test_version_is_non_empty_string() -> None:
    version = runtime_version.resolve_project_version()
    assert isinstance(version, str)
    assert version


def test_falls_back_to_pyproject(monkeypatch: pytest.MonkeyPatch) -> None:
    def not_installed(_name: str) -> str:
        raise runtime_version.importlib_metadata.PackageNotFoundError

    monkeypatch.setattr(
        runtime_version.importlib_metadata, "version", not_installed,
    )
    assert runtime_version.resolve_project_version() == "0.1.0"


def test_installed_metadata_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        runtime_version.importlib_metadata, "version", lambda _name: "9.9.9",
    )
    assert runtime_version.resolve_project_version() == "9.9.9"
