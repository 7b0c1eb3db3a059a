"""Runtime helpers for input validation and version reporting."""

from .validation import (
    non_negative_int,
    parse_hex_color,
    positive_int,
    validate_container_width,
    validate_item_specs,
    validate_layout_request,
    validate_padding,
)
from .version import resolve_project_version

__all__ = [
    "non_negative_int",
    "parse_hex_color",
    "positive_int",
    "resolve_project_version",
    "validate_container_width",
    "validate_item_specs",
    "validate_layout_request",
    "validate_padding",
]
