"""
Input validation for layout requests.

The layout core trusts its inputs, so collaborators run these checks
before submitting a container. Each helper raises ``ValueError`` with a
message suitable for showing to a user.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from photo_grid.constants import PADDING_MAX

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable

    from photo_grid.type_defs import ItemSpec

_HEX_RGB_LENGTH = 6


def validate_container_width(width: int) -> None:
    """Container width must be a positive pixel count."""
    if width <= 0:
        msg = f"Container width must be positive, got {width}"
        raise ValueError(msg)


def validate_padding(padding: int) -> None:
    """Padding must lie within the range the options form allows."""
    if padding < 0 or padding > PADDING_MAX:
        msg = f"Padding must be between 0 and {PADDING_MAX}, got {padding}"
        raise ValueError(msg)


def validate_item_specs(items: Iterable[ItemSpec]) -> None:
    """Reject negative natural dimensions; zero means not yet measured."""
    for spec in items:
        if spec.natural_width < 0 or spec.natural_height < 0:
            msg = (
                f"Item {spec.id!r} has negative dimensions "
                f"{spec.natural_width}x{spec.natural_height}"
            )
            raise ValueError(msg)


def validate_layout_request(
    width: int,
    padding: int,
    items: Iterable[ItemSpec],
) -> None:
    """Run every check for one container."""
    validate_container_width(width)
    validate_padding(padding)
    validate_item_specs(items)


def positive_int(text: str) -> int:
    """Argparse-style validator that enforces a strictly positive integer."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise ValueError(msg) from exc
    if value <= 0:
        msg = "must be positive"
        raise ValueError(msg)
    return value


def non_negative_int(text: str) -> int:
    """Argparse-style validator that accepts zero and positive integers."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise ValueError(msg) from exc
    if value < 0:
        msg = "must not be negative"
        raise ValueError(msg)
    return value


def parse_hex_color(text: str) -> tuple[int, int, int]:
    """Parse ``#rrggbb`` strings into RGB triples."""
    stripped = text.strip().lstrip("#")
    if len(stripped) != _HEX_RGB_LENGTH:
        msg = "color must look like #rrggbb"
        raise ValueError(msg)
    try:
        return (
            int(stripped[0:2], 16),
            int(stripped[2:4], 16),
            int(stripped[4:6], 16),
        )
    except ValueError as exc:
        msg = "color contains invalid hex digits"
        raise ValueError(msg) from exc
