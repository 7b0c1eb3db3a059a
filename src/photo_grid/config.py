"""
Configuration schema and loader for the photo grid.

Defines Pydantic models for each config section and a TOML-based loader
with validation support.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, Field

from photo_grid.config_defaults import (
    DEFAULT_CONTAINER_WIDTH,
    DEFAULT_DEMO_SIZE,
    DEFAULT_PADDING,
    DEFAULT_PREVIEW_BACKGROUND,
    DEFAULT_PREVIEW_SHOW_LABELS,
    DEFAULT_QUIET_INTERVAL_MS,
)
from photo_grid.constants import PADDING_MAX
from photo_grid.type_defs import GridSize


class GridConfig(BaseModel):
    """Container geometry for a layout pass."""

    container_width: int = Field(DEFAULT_CONTAINER_WIDTH, gt=0)
    padding: int = Field(DEFAULT_PADDING, ge=0, le=PADDING_MAX)


class ReflowConfig(BaseModel):
    """Debounce settings for layout triggers."""

    quiet_interval_ms: int = Field(DEFAULT_QUIET_INTERVAL_MS, ge=0)


class DemoConfig(BaseModel):
    """Placeholder image generation for the demo run."""

    size: GridSize = Field(DEFAULT_DEMO_SIZE)
    seed: int | None = Field(None, ge=0)


class PreviewConfig(BaseModel):
    """Appearance of the rendered preview sheet."""

    background: str = Field(
        DEFAULT_PREVIEW_BACKGROUND,
        pattern=r"^#?[0-9a-fA-F]{6}$",
    )
    show_labels: bool = DEFAULT_PREVIEW_SHOW_LABELS


class PhotoGridConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml.
    """

    grid: GridConfig = Field(
        default_factory=lambda: GridConfig.model_validate({}),
    )
    reflow: ReflowConfig = Field(
        default_factory=lambda: ReflowConfig.model_validate({}),
    )
    demo: DemoConfig = Field(
        default_factory=lambda: DemoConfig.model_validate({}),
    )
    preview: PreviewConfig = Field(
        default_factory=lambda: PreviewConfig.model_validate({}),
    )


# CLI destination -> (section, field)
_CLI_OVERRIDES: dict[str, tuple[str, str]] = {
    "width": ("grid", "container_width"),
    "padding": ("grid", "padding"),
    "quiet_interval": ("reflow", "quiet_interval_ms"),
    "demo": ("demo", "size"),
    "seed": ("demo", "seed"),
    "background": ("preview", "background"),
}


def build_config_from_cli(
    cli_args: dict[str, Any],
    base_config: PhotoGridConfig | None = None,
) -> PhotoGridConfig:
    """
    Overlay explicitly given CLI values onto a base config.

    Arguments left at ``None`` keep the value from ``base_config`` (or the
    defaults). The merged result is validated again as a whole.
    """
    data = (base_config or PhotoGridConfig()).model_dump()
    for dest, (section, key) in _CLI_OVERRIDES.items():
        value = cli_args.get(dest)
        if value is not None:
            data[section][key] = value
    if cli_args.get("no_labels"):
        data["preview"]["show_labels"] = False
    return PhotoGridConfig.model_validate(data)


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str | Path) -> PhotoGridConfig:
        """Load and validate a photo grid configuration from TOML."""
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return PhotoGridConfig.model_validate(doc.unwrap())
