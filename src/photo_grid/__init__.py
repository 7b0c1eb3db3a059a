"""Public package exports for the justified photo grid."""

from __future__ import annotations

from .layout import LayoutEngine, arrange
from .reflow import ManualClock, ReflowScheduler
from .surface import InMemorySurface
from .type_defs import ContainerSnapshot, ItemResult, ItemSpec

__all__ = [
    "ContainerSnapshot",
    "InMemorySurface",
    "ItemResult",
    "ItemSpec",
    "LayoutEngine",
    "ManualClock",
    "ReflowScheduler",
    "arrange",
]
