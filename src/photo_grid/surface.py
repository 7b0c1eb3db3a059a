"""
In-process stand-in for the page that hosts photo grid containers.

``InMemorySurface`` implements the ``GridSurface`` protocol: it keeps the
current width, padding and item sizes of each container, validates every
change, and records the placements the engine applies. The demo harness
and the tests drive it the way a browser would drive the real page.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from photo_grid.runtime.validation import (
    validate_container_width,
    validate_item_specs,
    validate_layout_request,
)
from photo_grid.type_defs import ContainerSnapshot, ItemSpec

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Sequence

    from photo_grid.type_defs import ItemId, ItemResult


@dataclass(slots=True)
class InMemorySurface:
    """Containers keyed by id, plus the last results applied to each."""

    containers: dict[str, ContainerSnapshot] = field(default_factory=dict)
    applied: dict[str, list[ItemResult]] = field(default_factory=dict)
    apply_count: int = 0

    def set_container(
        self,
        container_id: str,
        width: int,
        padding: int,
        items: Iterable[ItemSpec],
    ) -> None:
        """Add or replace a container."""
        specs = tuple(items)
        validate_layout_request(width, padding, specs)
        self.containers[container_id] = ContainerSnapshot(
            container_id, width, padding, specs,
        )

    def resize(self, container_id: str, width: int) -> None:
        """Change a container's width, as a window resize would."""
        validate_container_width(width)
        container = self.containers[container_id]
        self.containers[container_id] = replace(container, width=width)

    def set_item_size(
        self,
        container_id: str,
        item_id: ItemId,
        natural_width: int,
        natural_height: int,
    ) -> None:
        """Record an image's natural size once it has loaded."""
        container = self.containers[container_id]
        if not any(spec.id == item_id for spec in container.items):
            msg = f"Unknown item {item_id!r} in container {container_id!r}"
            raise KeyError(msg)
        updated = ItemSpec(item_id, natural_width, natural_height)
        validate_item_specs([updated])
        items = tuple(
            updated if spec.id == item_id else spec
            for spec in container.items
        )
        self.containers[container_id] = replace(container, items=items)

    def measure(self) -> Sequence[ContainerSnapshot]:
        """Return a snapshot of every container."""
        return list(self.containers.values())

    def apply(
        self,
        container_id: str,
        results: Sequence[ItemResult],
    ) -> None:
        """Store the placements for ``container_id``."""
        self.applied[container_id] = list(results)
        self.apply_count += 1
