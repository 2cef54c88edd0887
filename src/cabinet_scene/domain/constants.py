"""Construction constants, in inches.

Standard 3/4" sheet goods for the carcass and 1/4" for the back.
"""

from __future__ import annotations

PANEL_THICKNESS = 0.75
BACK_THICKNESS = 0.25

# Side panels stop short of the rear so the back seats in the rabbet
RABBET_ALLOWANCE = 0.75

DEFAULT_TOE_KICK_HEIGHT = 4.5
DEFAULT_TOE_KICK_DEPTH = 3.0

# Shelves
SHELF_SIDE_INSET = 0.125
SHELF_FRONT_SETBACK = 0.5
DRAWER_BASE_SHELF_SETBACK = 1.0
SHELF_REAR_CLEARANCE = 0.5

DEFAULT_BASE_SHELVES = 1
DEFAULT_WALL_SHELVES = 2
DEFAULT_TALL_SHELVES = 4

NAILER_HEIGHT = 3.0

# Drawer fronts
DEFAULT_DRAWER_COUNT = 3
DRAWER_GAP = 0.125
MIN_DRAWER_GAP = 0.0625
MIN_DRAWER_FRONT_HEIGHT = 2.0

# Slack allowed when checking parts against the envelope
ENVELOPE_TOLERANCE = 1e-6
