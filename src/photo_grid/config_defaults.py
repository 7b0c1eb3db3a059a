"""Shared default values for user-facing configuration settings."""
from photo_grid.type_defs import GridSize

# Grid
DEFAULT_CONTAINER_WIDTH = 960
DEFAULT_PADDING = 1

# Reflow
DEFAULT_QUIET_INTERVAL_MS = 100

# Demo
DEFAULT_DEMO_SIZE: GridSize = "small"

# Preview
DEFAULT_PREVIEW_BACKGROUND = "#ffffff"
DEFAULT_PREVIEW_SHOW_LABELS = True
