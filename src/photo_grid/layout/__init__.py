"""
Justified layout primitives and the engine that drives them.

The package exposes the most commonly used entry points directly.
"""

from __future__ import annotations

from . import engine, model
from .engine import GridSurface, LayoutEngine, arrange
from .model import Grid, Item, Row, round_half_up

__all__ = [
    "Grid",
    "GridSurface",
    "Item",
    "LayoutEngine",
    "Row",
    "arrange",
    "engine",
    "model",
    "round_half_up",
]
