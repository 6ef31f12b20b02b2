"""Global configuration and constants for the time chart pipeline."""

from __future__ import annotations

import os
from typing import Final

# Layout (character cells)
Y_AXIS_LABEL_WIDTH: Final = 12
X_AXIS_LABEL_HEIGHT: Final = 3  # axis row + time row + date row
TOP_PADDING: Final = 1  # legend row
MIN_VIEW_WIDTH: Final = 20
MIN_VIEW_HEIGHT: Final = 8
MIN_PLOT_WIDTH: Final = 4
MIN_PLOT_HEIGHT: Final = 2
MAX_Y_LABELS: Final = 8
X_LABEL_SLOT_WIDTH: Final = 20  # approx. cells consumed by one time label incl. spacing
LEGEND_NAME_MAX: Final = 20
LEGEND_NAME_KEEP: Final = 17

# Value range
Y_PADDING_RATIO: Final = 0.05
FLAT_RANGE_EPSILON: Final = 1e-10

# Column detection / pivoting
TIME_SAMPLE_SIZE: Final = 5
NULL_SPLIT_TOKEN: Final = "(null)"

# Environment overrides
LOG_LEVEL: Final = os.environ.get("TERMCHART_LOG_LEVEL", "WARNING")
PALETTE_OVERRIDE: Final = os.environ.get("TERMCHART_PALETTE", "")
