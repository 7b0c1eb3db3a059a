"""Helpers for reporting the package version."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from pathlib import Path

import tomlkit

from photo_grid.logging_utils import logger

_DISTRIBUTION = "photo-grid"
_FALLBACK_VERSION = "0.0.0"


def resolve_project_version() -> str:
    """
    Return the installed version, or the one in a source checkout.

    An editable or regular install answers through package metadata. When
    running straight from ``src/`` the nearest ``pyproject.toml`` is read
    instead, and "0.0.0" is returned if neither is available.
    """
    try:
        return importlib_metadata.version(_DISTRIBUTION)
    except importlib_metadata.PackageNotFoundError:
        pass

    for parent in Path(__file__).resolve().parents:
        pyproject_path = parent / "pyproject.toml"
        if not pyproject_path.is_file():
            continue
        try:
            doc = tomlkit.parse(pyproject_path.read_text(encoding="utf-8"))
        except OSError as exc:
            logger.warning("Error reading %s: %s", pyproject_path, exc)
            break
        version = doc.get("project", {}).get("version")
        if isinstance(version, str) and version.strip():
            return version.strip()
        break

    return _FALLBACK_VERSION
