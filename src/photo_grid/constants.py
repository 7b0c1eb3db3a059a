"""
Constants used internally by the photo grid.

These are implementation-level values that should not be overridden
via config files or CLI arguments.
"""

# The options form accepts at most two digits for padding
PADDING_MAX = 99

# Demo placeholder generation, keyed by grid size
DEMO_BASE_SIZE = {"small": 150, "large": 500}
DEMO_ITEM_COUNT = {"small": 30, "large": 15}
DEMO_SIZE_STEP = 50
DEMO_SIZE_STEPS = 5

# Preview rendering
COLOR_MODE_RGB = "RGB"
COLOR_BLACK = (0, 0, 0)
COLOR_WHITE = (255, 255, 255)
PREVIEW_TILE_COLORS = (
    (93, 125, 160),
    (160, 118, 93),
    (110, 150, 104),
    (151, 104, 150),
    (176, 160, 92),
    (92, 160, 158),
)
PREVIEW_LABEL_INSET = 4

# Results serialization
JSON_INDENT = 2
