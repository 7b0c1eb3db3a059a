"""
Tests for LayoutEngine.arrange and LayoutEngine.refresh.

Includes the reference scenarios (oversized single image, under-filled
row, unmeasured image) and property checks over a mixed item list:
aspect preservation, exact row width for stretched rows, and greedy
row boundaries.
"""

from __future__ import annotations

from itertools import groupby

import pytest

from photo_grid.layout import LayoutEngine, arrange
from photo_grid.surface import InMemorySurface
from photo_grid.type_defs import ItemResult, ItemSpec

CONTAINER_WIDTH = 700
PADDING = 5


def _rows(results: list[ItemResult]) -> list[list[ItemResult]]:
    return [list(g) for _, g in groupby(results, key=lambda r: r.row_id)]


class TestScenarios:
    """Tests for the reference layouts."""

    def test_single_oversized_image(self) -> None:
        """Test a 600x400 image in a 400px container shrinks to 400x267."""
        (result,) = arrange(400, 0, [("a", 600, 400)])
        assert result.display_width == 400  # noqa: PLR2004
        assert result.display_height == 267  # noqa: PLR2004
        assert result.is_row_terminal is True
        assert result.row_id == 0

    def test_underfilled_row_is_left_alone(self) -> None:
        """Test two 300x200 images in 630px with 5px padding stay unscaled."""
        results = arrange(630, 5, [("a", 300, 200), ("b", 300, 200)])
        assert [(r.display_width, r.display_height) for r in results] == [
            (300, 200), (300, 200)]
        assert {r.row_id for r in results} == {0}
        assert not any(r.is_row_terminal for r in results)
        # The trailing margin follows the flag, so the last item keeps one
        assert results[-1].margin_right(5) == 5  # noqa: PLR2004

    def test_unmeasured_image_then_measured(self) -> None:
        """Test a 0x0 image is accepted and laid out once its size is known."""
        engine = LayoutEngine()
        (pending,) = engine.arrange(400, 0, [("a", 0, 0)])
        assert (pending.display_width, pending.display_height) == (0, 0)
        assert pending.is_row_terminal is False

        (loaded,) = engine.arrange(400, 0, [("a", 600, 400)])
        assert (loaded.display_width, loaded.display_height) == (400, 267)
        assert loaded.is_row_terminal is True

    def test_unmeasured_image_before_measured_one(self) -> None:
        """Test a leading unmeasured image does not disturb the next one."""
        results = arrange(1000, 0, [("u", 0, 0), ("a", 300, 200)])
        assert [(r.display_width, r.display_height) for r in results] == [
            (0, 0), (300, 200)]


class TestArrange:
    """Tests for one-off layout passes."""

    def test_known_layout(self) -> None:
        """Test a two-row layout against hand-computed sizes."""
        results = arrange(500, 4, [
            ItemSpec("a", 300, 200),
            ItemSpec("b", 400, 200),
            ItemSpec("c", 150, 100),
        ])
        assert results == [
            ItemResult("a", 0, 213, 142, is_row_terminal=False),
            ItemResult("b", 0, 283, 142, is_row_terminal=True),
            ItemResult("c", 1, 150, 100, is_row_terminal=False),
        ]

    def test_accepts_tuples_and_specs(self) -> None:
        """Test plain tuples and ItemSpec give the same layout."""
        from_specs = arrange(500, 4, [ItemSpec("a", 300, 200)])
        from_tuples = arrange(500, 4, [("a", 300, 200)])
        assert from_specs == from_tuples

    def test_empty_input(self) -> None:
        """Test no items produce no results."""
        assert arrange(500, 4, []) == []

    def test_preserves_input_order(self, mixed_specs: list[ItemSpec]) -> None:
        """Test results come back in input order."""
        results = arrange(CONTAINER_WIDTH, PADDING, mixed_specs)
        assert [r.id for r in results] == [s.id for s in mixed_specs]

    def test_row_ids_are_sequential(self, mixed_specs: list[ItemSpec]) -> None:
        """Test row ids count up from zero without gaps."""
        results = arrange(CONTAINER_WIDTH, PADDING, mixed_specs)
        row_ids = [row[0].row_id for row in _rows(results)]
        assert row_ids == list(range(len(row_ids)))
        assert len(row_ids) > 1

    def test_aspect_ratio_is_preserved(
        self, mixed_specs: list[ItemSpec],
    ) -> None:
        """Test non-terminal items keep their aspect within rounding."""
        results = arrange(CONTAINER_WIDTH, PADDING, mixed_specs)
        for spec, result in zip(mixed_specs, results, strict=True):
            if result.is_row_terminal:
                continue
            aspect = spec.natural_width / spec.natural_height
            error = abs(result.display_width - aspect * result.display_height)
            assert error <= 1 + aspect / 2, (spec, result)

    def test_stretched_rows_fill_container(
        self, mixed_specs: list[ItemSpec],
    ) -> None:
        """Test every stretched row spans the container exactly."""
        results = arrange(CONTAINER_WIDTH, PADDING, mixed_specs)
        stretched = [row for row in _rows(results) if row[-1].is_row_terminal]
        assert stretched
        for row in stretched:
            total = sum(r.display_width for r in row)
            assert total + (len(row) - 1) * PADDING == CONTAINER_WIDTH
            assert len({r.display_height for r in row}) == 1

    def test_only_last_item_of_row_is_terminal(
        self, mixed_specs: list[ItemSpec],
    ) -> None:
        """Test the terminal flag never lands mid-row."""
        results = arrange(CONTAINER_WIDTH, PADDING, mixed_specs)
        for row in _rows(results):
            assert not any(r.is_row_terminal for r in row[:-1])

    def test_rows_break_where_natural_width_fills(self) -> None:
        """Test the item that fills a row stays in it; the next starts a row."""
        results = arrange(600, 0, [
            ("a", 200, 100), ("b", 200, 100), ("c", 200, 100),
            ("d", 200, 100),
        ])
        assert [r.row_id for r in results] == [0, 0, 0, 1]
        assert [r.display_width for r in results[:3]] == [200, 200, 200]
        # Exactly full needs no scaling, so nothing is flagged
        assert not any(r.is_row_terminal for r in results)

    def test_overrun_row_keeps_terminal_at_zero(self) -> None:
        """Test a row whose rounded widths overrun gets a 0px terminal."""
        results = arrange(12, 2, [
            ("a", 3, 10), ("b", 3, 10), ("c", 5, 10), ("d", 1, 10),
        ])
        assert [r.display_width for r in results] == [2, 2, 3, 0]
        assert results[-1].is_row_terminal is True
        assert all(r.display_width >= 0 for r in results)

    def test_logs_pass_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test each pass logs its item and row counts."""
        caplog.set_level("DEBUG", logger="photo_grid")
        arrange(400, 0, [("a", 600, 400)])
        assert "Arranged 1 items into 1 rows at width 400" in caplog.text


class TestRefresh:
    """Tests for layout passes driven by a surface."""

    def test_refresh_requires_surface(self) -> None:
        """Test refresh without a surface raises RuntimeError."""
        with pytest.raises(RuntimeError, match="requires a surface"):
            LayoutEngine().refresh()

    def test_refresh_lays_out_every_container(self) -> None:
        """Test each container is measured, arranged and applied."""
        surface = InMemorySurface()
        surface.set_container("left", 400, 0, [ItemSpec("a", 600, 400)])
        surface.set_container("right", 630, 5, [
            ItemSpec("b", 300, 200), ItemSpec("c", 300, 200),
        ])
        engine = LayoutEngine(surface)

        assert engine.refresh() == 2  # noqa: PLR2004
        assert surface.apply_count == 2  # noqa: PLR2004
        assert surface.applied["left"] == arrange(400, 0, [("a", 600, 400)])
        assert [r.id for r in surface.applied["right"]] == ["b", "c"]

    def test_refresh_picks_up_resize(self) -> None:
        """Test a resized container is laid out at its new width."""
        surface = InMemorySurface()
        surface.set_container("main", 400, 0, [ItemSpec("a", 600, 400)])
        engine = LayoutEngine(surface)
        engine.refresh()
        surface.resize("main", 300)
        engine.refresh()
        (result,) = surface.applied["main"]
        assert (result.display_width, result.display_height) == (300, 200)
