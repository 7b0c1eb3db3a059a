"""
Test configuration and shared fixtures for photo_grid.

This module defines reusable pytest fixtures for item lists, config
objects and item files. These fixtures support all test modules in the
test suite.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from photo_grid.config import PhotoGridConfig
from photo_grid.logging_utils import logger
from photo_grid.type_defs import ItemSpec

# Mixed landscape, portrait and square sizes used for property checks
MIXED_SIZES: list[tuple[int, int]] = [
    (300, 200), (250, 300), (400, 250), (150, 150), (600, 400),
    (350, 200), (200, 300), (500, 350), (300, 300), (450, 200),
    (640, 480), (480, 640), (800, 200), (120, 360), (333, 222),
]


@pytest.fixture
def mixed_specs() -> list[ItemSpec]:
    """Fifteen items with assorted aspect ratios."""
    return [ItemSpec(f"img-{i}", w, h) for i, (w, h) in enumerate(MIXED_SIZES)]


@pytest.fixture
def make_specs() -> Callable[..., list[ItemSpec]]:
    """Build item specs from (width, height) pairs with sequential ids."""

    def _build(*sizes: tuple[int, int]) -> list[ItemSpec]:
        return [ItemSpec(f"0-{i}", w, h) for i, (w, h) in enumerate(sizes)]

    return _build


@pytest.fixture
def make_config() -> Callable[..., PhotoGridConfig]:
    """Build PhotoGridConfig instances with optional section overrides."""

    def _build(**sections: dict[str, Any]) -> PhotoGridConfig:
        return PhotoGridConfig.model_validate(
            {name: dict(values) for name, values in sections.items()},
        )

    return _build


@pytest.fixture
def items_json(tmp_path: Path) -> Path:
    """Write a small JSON item list and return its path."""
    path = tmp_path / "items.json"
    path.write_text(json.dumps([
        {"id": "a", "width": 300, "height": 200},
        {"id": "b", "width": 400, "height": 200},
        {"id": "c", "width": 150, "height": 100},
    ]), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the photo_grid logger so caplog works."""
    monkeypatch.setattr(logger, "propagate", True)
