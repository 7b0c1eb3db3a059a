"""
Defines shared types for the photo grid.

Input specs and output results are plain frozen dataclasses so they can
cross the boundary to any collaborator (surface, JSON writer, preview)
without dragging layout internals along.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

GridSize = Literal["small", "large"]
ItemId = str | int


@dataclass(frozen=True, slots=True)
class ItemSpec:
    """An image as reported by the page: id plus natural pixel size."""

    id: ItemId
    natural_width: int = 0
    natural_height: int = 0


@dataclass(frozen=True, slots=True)
class ItemResult:
    """Finalized placement of one item."""

    id: ItemId
    row_id: int
    display_width: int
    display_height: int
    is_row_terminal: bool = False

    def margin_right(self, padding: int) -> int:
        """Trailing margin to apply after this item."""
        return 0 if self.is_row_terminal else padding


@dataclass(frozen=True, slots=True)
class ContainerSnapshot:
    """Everything a layout pass needs to know about one container."""

    container_id: str
    width: int
    padding: int
    items: tuple[ItemSpec, ...] = ()
