"""
Row, grid and item primitives for the justified photo layout.

A row is filled greedily. Whenever an item shorter than the current row
arrives, the whole row shrinks to that height so no image is ever shown
larger than its natural size. Once a row is complete, ``Row.render``
scales it down so the images plus the gaps between them span the
container exactly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from photo_grid.logging_utils import logger
from photo_grid.type_defs import ItemId, ItemResult


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (not to even)."""
    return math.floor(value + 0.5)


@dataclass(slots=True)
class Item:
    """A single image: natural size in, display size out."""

    id: ItemId
    natural_width: int = 0
    natural_height: int = 0
    display_width: int = 0
    display_height: int = 0
    is_row_terminal: bool = False
    row_id: int = 0

    @property
    def has_known_size(self) -> bool:
        """Return True once both natural dimensions have been measured."""
        return bool(self.natural_width and self.natural_height)

    @property
    def aspect(self) -> float:
        """Natural width over height. Only meaningful for known sizes."""
        return self.natural_width / self.natural_height

    def fit_to_height(self, height: int) -> None:
        """Scale the display size to ``height`` keeping the aspect ratio."""
        if not self.has_known_size:
            return
        self.display_width = round_half_up(self.aspect * height)
        self.display_height = height

    def to_result(self) -> ItemResult:
        """Freeze the current placement for collaborators."""
        return ItemResult(
            id=self.id,
            row_id=self.row_id,
            display_width=self.display_width,
            display_height=self.display_height,
            is_row_terminal=self.is_row_terminal,
        )


@dataclass(slots=True)
class Row:
    """One line of items sharing a common height."""

    row_id: int
    container_width: int
    padding: int = 1
    height: int = 0
    used_width: int = 0
    items: list[Item] = field(default_factory=list)

    def create_item(
        self,
        item_id: ItemId,
        natural_width: int,
        natural_height: int,
    ) -> None:
        """
        Place an item at the end of the row.

        The first item sets the row height. A later item that is shorter
        than the row pulls the row down to its own height. Any other item
        is scaled to the current row height. Items with an unknown
        dimension keep a zero display size until a later pass.
        """
        item = Item(
            item_id,
            natural_width=natural_width,
            natural_height=natural_height,
            row_id=self.row_id,
        )

        if not self.height or (
            natural_height and natural_height < self.height
        ):
            self.adjust_row_height(natural_height)
            if item.has_known_size:
                # Natural size is already the fit for the new row height
                item.display_width = natural_width
                item.display_height = natural_height
        else:
            item.fit_to_height(self.height)

        if not item.has_known_size:
            logger.debug(
                "Item %s has no natural size yet (%dx%d)",
                item_id, natural_width, natural_height,
            )

        self.items.append(item)
        self.used_width += item.display_width

    def adjust_row_height(self, new_height: int) -> None:
        """Set the row height and refit every measured item to it."""
        self.height = new_height
        for item in self.items:
            item.fit_to_height(new_height)
        self.recalculate_used_width()

    def recalculate_used_width(self) -> int:
        """Recompute ``used_width`` from the items' display widths."""
        self.used_width = sum(item.display_width for item in self.items)
        return self.used_width

    def get_available_width(self) -> int:
        """Width in pixels still free for additional items."""
        return self.container_width - self.used_width

    def is_full(self) -> bool:
        """Return True when the row has no space left."""
        return self.get_available_width() <= 0

    def render(self) -> None:
        """
        Finalize display sizes so the row fills the container width.

        Rows wider than the space left after inter-item padding are
        scaled down and the last item absorbs the rounding drift. Rows
        that fall short are left at their fitted size and none of their
        items is flagged as terminal.

        The terminal width never goes below zero. When the rounded widths
        of the other items already overrun the container (very thin
        items, or gaps wider than the container), the terminal item is
        set to 0 and the row ends up wider than the container.
        """
        if not self.items:
            return

        target_width = (
            self.container_width - (len(self.items) - 1) * self.padding
        )
        if 0 < self.used_width and target_width < self.used_width:
            adjustment = max(target_width, 0) / self.used_width
        else:
            # Filling the row would mean enlarging the images
            adjustment = 1
        self.height = round_half_up(self.height * adjustment)

        if adjustment == 1:
            logger.debug(
                "Row %d left unstretched (%d of %d px used)",
                self.row_id, self.used_width, self.container_width,
            )
            return

        logger.debug(
            "Row %d scaled by %.4f to height %d",
            self.row_id, adjustment, self.height,
        )
        actual_used_width = 0
        last = len(self.items) - 1
        for index, item in enumerate(self.items):
            item.display_height = self.height
            if index < last:
                item.display_width = round_half_up(
                    item.display_width * adjustment,
                )
                actual_used_width += item.display_width + self.padding
            else:
                remaining = self.container_width - actual_used_width
                if remaining < 0:
                    logger.debug(
                        "Row %d overruns the container by %d px",
                        self.row_id, -remaining,
                    )
                item.display_width = max(remaining, 0)
                item.is_row_terminal = True


@dataclass(slots=True)
class Grid:
    """All rows laid out for one container during one pass."""

    container_width: int
    padding: int = 1
    rows: list[Row] = field(default_factory=list)

    def create_row(self) -> Row:
        """Append and return a new empty row."""
        # The id is the position in the grid, so it stays sequential
        row = Row(len(self.rows), self.container_width, self.padding)
        self.rows.append(row)
        return row

    @property
    def items(self) -> list[Item]:
        """Every item across all rows, in placement order."""
        return [item for row in self.rows for item in row.items]
