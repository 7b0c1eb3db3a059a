"""Drive grid construction from a flat item list, one container at a time."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from photo_grid.layout.model import Grid
from photo_grid.logging_utils import logger
from photo_grid.type_defs import ItemSpec

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Sequence

    from photo_grid.type_defs import ContainerSnapshot, ItemId, ItemResult

    ItemInput = ItemSpec | tuple[ItemId, int, int]


class GridSurface(Protocol):
    """The page-side collaborator that owns containers and their images."""

    def measure(self) -> Sequence[ContainerSnapshot]:
        """Report every container with its current width and items."""
        ...

    def apply(
        self,
        container_id: str,
        results: Sequence[ItemResult],
    ) -> None:
        """Apply finished placements to one container."""
        ...


def _as_spec(entry: ItemInput) -> ItemSpec:
    if isinstance(entry, ItemSpec):
        return entry
    item_id, natural_width, natural_height = entry
    return ItemSpec(item_id, natural_width, natural_height)


class LayoutEngine:
    """
    Pack items into justified rows.

    ``arrange`` is a pure computation. ``refresh`` additionally reads
    containers from the injected surface and hands the results back to
    it, which is what the reflow scheduler calls.
    """

    def __init__(self, surface: GridSurface | None = None) -> None:
        self.surface = surface

    def arrange(
        self,
        container_width: int,
        padding: int,
        items: Iterable[ItemInput],
    ) -> list[ItemResult]:
        """
        Lay out ``items`` in order and return their final placements.

        Rows are filled greedily: the item that makes a row full stays in
        it and the row is rendered before the next one starts. The last
        row is rendered whether it is full or not.
        """
        grid = Grid(container_width, padding)
        row = grid.create_row()

        for entry in items:
            spec = _as_spec(entry)
            row.create_item(spec.id, spec.natural_width, spec.natural_height)
            if row.is_full():
                row.render()
                row = grid.create_row()

        row.render()

        results = [item.to_result() for item in grid.items]
        logger.debug(
            "Arranged %d items into %d rows at width %d",
            len(results), len({r.row_id for r in results}), container_width,
        )
        return results

    def refresh(self) -> int:
        """Re-layout every container on the surface. Return how many."""
        if self.surface is None:
            msg = "LayoutEngine.refresh requires a surface"
            raise RuntimeError(msg)

        containers = self.surface.measure()
        for container in containers:
            results = self.arrange(
                container.width, container.padding, container.items,
            )
            self.surface.apply(container.container_id, results)
        return len(containers)


def arrange(
    container_width: int,
    padding: int,
    items: Iterable[ItemInput],
) -> list[ItemResult]:
    """Run a one-off layout pass without a surface."""
    return LayoutEngine().arrange(container_width, padding, items)
