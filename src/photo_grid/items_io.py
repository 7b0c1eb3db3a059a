"""
Reading item lists and writing layout results.

Item files are JSON (a list of ``{"id", "width", "height"}`` objects or
``[id, width, height]`` triples) or TOML with an ``[[items]]`` array of
tables. Missing ids are derived from the position as ``"0-<index>"``, the
same container-index/item-index scheme the page uses for its elements.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit

from photo_grid.constants import JSON_INDENT
from photo_grid.logging_utils import logger
from photo_grid.type_defs import ItemSpec

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from photo_grid.type_defs import ItemResult

_TRIPLE_LENGTH = 3


def default_item_id(item_index: int, container_index: int = 0) -> str:
    """Return the positional id used when an item carries none."""
    return f"{container_index}-{item_index}"


def _is_pixel_count(value: Any) -> bool:
    # JSON true/false decode to bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def _spec_from_entry(index: int, entry: Any) -> ItemSpec:
    if isinstance(entry, dict):
        item_id = entry.get("id", default_item_id(index))
        width = entry.get("width", 0)
        height = entry.get("height", 0)
    elif isinstance(entry, list | tuple) and len(entry) == _TRIPLE_LENGTH:
        item_id, width, height = entry
    else:
        msg = f"Item {index} must be an object or an [id, width, height] list"
        raise ValueError(msg)

    if not _is_pixel_count(width) or not _is_pixel_count(height):
        msg = f"Item {index} width and height must be integers"
        raise ValueError(msg)
    return ItemSpec(item_id, width, height)


def parse_item_entries(entries: Sequence[Any]) -> list[ItemSpec]:
    """Convert decoded JSON/TOML entries into item specs."""
    return [_spec_from_entry(i, entry) for i, entry in enumerate(entries)]


def load_item_specs(path: str | Path) -> list[ItemSpec]:
    """Load an ordered item list from a ``.json`` or ``.toml`` file."""
    items_path = Path(path)
    if not items_path.is_file():
        msg = f"Items file not found: {path}"
        raise FileNotFoundError(msg)

    text = items_path.read_text(encoding="utf-8")
    if items_path.suffix.lower() == ".toml":
        entries = tomlkit.parse(text).unwrap().get("items", [])
    else:
        entries = json.loads(text)
        if isinstance(entries, dict):
            entries = entries.get("items", [])

    if not isinstance(entries, list):
        msg = f"Items file {path} must contain a list of items"
        raise ValueError(msg)

    specs = parse_item_entries(entries)
    logger.info("Loaded %d items from %s", len(specs), items_path)
    return specs


def results_to_records(
    results: Sequence[ItemResult],
    padding: int,
) -> list[dict[str, Any]]:
    """Flatten results into JSON-friendly dicts, margins included."""
    return [
        {
            "id": r.id,
            "row_id": r.row_id,
            "display_width": r.display_width,
            "display_height": r.display_height,
            "is_row_terminal": r.is_row_terminal,
            "margin_right": r.margin_right(padding),
        }
        for r in results
    ]


def dump_results(results: Sequence[ItemResult], padding: int) -> str:
    """Serialize results to a JSON document."""
    return json.dumps(results_to_records(results, padding), indent=JSON_INDENT)


def write_results(
    path: str | Path,
    results: Sequence[ItemResult],
    padding: int,
) -> Path:
    """Write results as JSON to ``path`` and return it."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(dump_results(results, padding) + "\n",
                        encoding="utf-8")
    logger.info("Layout written to: %s", out_path)
    return out_path
