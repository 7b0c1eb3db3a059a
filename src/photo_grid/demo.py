"""
Demo harness: random placeholder images and a simulated page load.

``simulate_page_load`` replays what happens in a browser. The grid is
laid out once while no image has loaded yet (every size is 0x0). Then
the images finish loading in random order, each load firing the debounced
reflow trigger. Time is driven by a ``ManualClock`` so a seeded run is
fully reproducible.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from photo_grid.constants import (
    DEMO_BASE_SIZE,
    DEMO_ITEM_COUNT,
    DEMO_SIZE_STEP,
    DEMO_SIZE_STEPS,
)
from photo_grid.items_io import default_item_id
from photo_grid.layout import LayoutEngine, round_half_up
from photo_grid.logging_utils import logger
from photo_grid.reflow import ManualClock, ReflowScheduler
from photo_grid.surface import InMemorySurface
from photo_grid.type_defs import GridSize, ItemResult, ItemSpec

if TYPE_CHECKING:  # pragma: no cover
    from photo_grid.config import PhotoGridConfig

# Loads arrive up to this many quiet intervals apart
_MAX_LOAD_GAP = 1.5

DEMO_CONTAINER_ID = "demo"


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Return a NumPy Generator, seeded when ``seed`` is given."""
    return np.random.default_rng(seed)


def random_item_specs(
    size: GridSize,
    rng: np.random.Generator,
    container_index: int = 0,
) -> list[ItemSpec]:
    """
    Generate placeholder image sizes for the demo page.

    Each dimension is the base size for ``size`` plus a multiple of 50
    pixels between 0 and 250.
    """
    base = DEMO_BASE_SIZE[size]

    def dimension() -> int:
        steps = round_half_up(DEMO_SIZE_STEPS * rng.random())
        return base + DEMO_SIZE_STEP * steps

    specs = []
    for index in range(DEMO_ITEM_COUNT[size]):
        width = dimension()
        height = dimension()
        specs.append(
            ItemSpec(default_item_id(index, container_index), width, height),
        )
    return specs


@dataclass(slots=True)
class DemoRun:
    """Outcome of a simulated page load."""

    specs: list[ItemSpec]
    results: list[ItemResult]
    surface: InMemorySurface
    layout_passes: int
    reflows: int


def simulate_page_load(
    specs: list[ItemSpec],
    *,
    container_width: int,
    padding: int,
    quiet_interval_ms: int,
    rng: np.random.Generator,
) -> DemoRun:
    """Lay out ``specs`` the way the page would while images load."""
    surface = InMemorySurface()
    surface.set_container(
        DEMO_CONTAINER_ID,
        container_width,
        padding,
        [ItemSpec(spec.id) for spec in specs],
    )
    engine = LayoutEngine(surface)
    clock = ManualClock()
    scheduler = ReflowScheduler(
        engine.refresh,
        quiet_interval_ms=quiet_interval_ms,
        timer_factory=clock,
    )

    # Initial arrangement happens before any image has a size
    engine.refresh()

    quiet = quiet_interval_ms / 1000
    for index in rng.permutation(len(specs)):
        spec = specs[int(index)]
        surface.set_item_size(
            DEMO_CONTAINER_ID,
            spec.id,
            spec.natural_width,
            spec.natural_height,
        )
        scheduler.notify_layout_invalidated()
        clock.advance(rng.random() * quiet * _MAX_LOAD_GAP)

    # Let the last quiet window elapse
    clock.advance(quiet)

    logger.info(
        "Demo: %d images loaded, %d debounced reflows",
        len(specs), scheduler.invocations,
    )
    return DemoRun(
        specs=specs,
        results=surface.applied[DEMO_CONTAINER_ID],
        surface=surface,
        layout_passes=surface.apply_count,
        reflows=scheduler.invocations,
    )


def run_demo(config: PhotoGridConfig) -> DemoRun:
    """Generate placeholder images per ``config`` and simulate loading."""
    rng = make_rng(config.demo.seed)
    specs = random_item_specs(config.demo.size, rng)
    return simulate_page_load(
        specs,
        container_width=config.grid.container_width,
        padding=config.grid.padding,
        quiet_interval_ms=config.reflow.quiet_interval_ms,
        rng=rng,
    )
