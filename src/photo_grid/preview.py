"""
Preview sheets for a computed layout.

Plays the part of the page renderer: every item becomes a flat
placeholder box of its display size, followed by its trailing margin,
and rows are stacked with ``padding`` between them. No image files are
read.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from itertools import groupby
from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw, ImageFont

from photo_grid.constants import (
    COLOR_BLACK,
    COLOR_MODE_RGB,
    COLOR_WHITE,
    PREVIEW_LABEL_INSET,
    PREVIEW_TILE_COLORS,
)
from photo_grid.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from photo_grid.type_defs import ItemResult

_RGB = tuple[int, int, int]


@dataclass(frozen=True)
class Placement:
    """Where one item lands on the preview sheet."""

    result: ItemResult
    x: int
    y: int

    @property
    def box(self) -> tuple[int, int, int, int]:
        """Inclusive pixel box for ``ImageDraw.rectangle``."""
        return (
            self.x,
            self.y,
            self.x + self.result.display_width - 1,
            self.y + self.result.display_height - 1,
        )


def place_results(
    results: Sequence[ItemResult],
    padding: int,
) -> tuple[list[Placement], int]:
    """
    Position results row by row.

    Returns the placements and the total sheet height. A row is as tall
    as its tallest item.
    """
    placements: list[Placement] = []
    y = 0
    first_row = True
    for _, row_iter in groupby(results, key=lambda r: r.row_id):
        row = list(row_iter)
        if not first_row:
            y += padding
        first_row = False
        x = 0
        for result in row:
            placements.append(Placement(result, x, y))
            x += result.display_width + result.margin_right(padding)
        y += max(r.display_height for r in row)
    return placements, y


@lru_cache(maxsize=1)
def _label_font() -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    return ImageFont.load_default()


def render_preview(  # noqa: PLR0913
    results: Sequence[ItemResult],
    container_width: int,
    padding: int,
    *,
    background: _RGB = COLOR_WHITE,
    show_labels: bool = True,
) -> Image.Image:
    """Draw the layout as colored boxes on a ``container_width`` canvas."""
    placements, height = place_results(results, padding)
    canvas = Image.new(
        COLOR_MODE_RGB, (container_width, max(height, 1)), background,
    )
    draw = ImageDraw.Draw(canvas)
    for index, placement in enumerate(placements):
        result = placement.result
        if result.display_width <= 0 or result.display_height <= 0:
            continue
        fill = PREVIEW_TILE_COLORS[index % len(PREVIEW_TILE_COLORS)]
        draw.rectangle(placement.box, fill=fill)
        if show_labels:
            draw.text(
                (placement.x + PREVIEW_LABEL_INSET,
                 placement.y + PREVIEW_LABEL_INSET),
                str(result.id),
                font=_label_font(),
                fill=COLOR_BLACK,
            )
    return canvas


def save_preview(  # noqa: PLR0913
    out_path: Path,
    results: Sequence[ItemResult],
    container_width: int,
    padding: int,
    *,
    background: _RGB = COLOR_WHITE,
    show_labels: bool = True,
) -> Path:
    """Render a preview and save it as PNG. Return the saved path."""
    out_path = Path(out_path)
    if out_path.suffix.lower() != ".png":
        out_path = out_path.with_suffix(".png")
    out_path.parent.mkdir(parents=True, exist_ok=True)

    sheet = render_preview(
        results,
        container_width,
        padding,
        background=background,
        show_labels=show_labels,
    )
    sheet.save(out_path)
    logger.info("Preview saved to: %s", out_path)
    return out_path
