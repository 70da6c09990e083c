"""Shared constants."""

# Preview defaults
DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 5
DEFAULT_TEXT = "cellalign"
DEFAULT_HORIZONTAL = "center"
DEFAULT_VERTICAL = "middle"

# Preview cells
BORDER_CHAR = "#"
EMPTY_CHAR = "."
FILL_CHAR = "@"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
