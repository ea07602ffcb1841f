# ============================================================================
# config.py - Constants and configuration
# ============================================================================

import os

# Sign tolerance used by the orientation test when none is given
DEFAULT_TOLERANCE = 1.0e-8

# Any negative tolerance selects auto-tolerance
AUTO_TOLERANCE = -1.0

# Explorer scene
SCENE_WIDTH = 800
SCENE_HEIGHT = 600
GRID_SIZE = 40
POINT_RADIUS = 4

# Fixed tolerance slider picks 10^-k for k in this range
TOLERANCE_EXPONENT_MIN = 0
TOLERANCE_EXPONENT_MAX = 12
TOLERANCE_EXPONENT_DEFAULT = 8

# Color schemes
COLORS = {
    'ring': (65, 130, 255),
    'ring_fill': (50, 100, 240, 50),
    'point': (30, 41, 59),
    'point_light': (70, 80, 100),
    'pruned': (220, 38, 38),
    'label': (150, 160, 180),
}

DEBUG = os.environ.get("BOUNDARY_PRUNER_DEBUG", "") not in ("", "0")
