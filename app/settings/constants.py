"""
constants.py - Centralized constants for the diagram editor.

This file is the SINGLE SOURCE OF TRUTH for:
- DEFAULT_GRID_SIZE: Used for snapping components and waypoints
- PORT_OFFSET: Distance from a component center to each of its ports
- HISTORY_CAPACITY: Maximum number of history snapshots kept
- Zoom limits and export defaults
"""

# Grid settings
DEFAULT_GRID_SIZE = 50          # Diagram units between grid lines

# Port geometry
PORT_OFFSET = 20.0              # Center-to-port distance (component body ~40 units)
PORT_POSITIONS = ("left", "right", "top", "bottom")

# History settings
HISTORY_CAPACITY = 50           # Snapshots kept, including the initial empty state

# Zoom settings
ZOOM_FACTOR = 1.1               # Multiplier per wheel step
ZOOM_MIN = 0.1                  # Minimum zoom level (10%)
ZOOM_MAX = 5.0                  # Maximum zoom level (500%)

# Quick-add placement (staggered layout for toolbar-added components)
QUICK_ADD_ORIGIN = (200.0, 200.0)
QUICK_ADD_STEP = 100.0
QUICK_ADD_ROW_WIDTH = 400.0
QUICK_ADD_PER_ROW = 4

# Export service
DEFAULT_API_BASE_URL = "http://localhost:8080"
REQUEST_TIMEOUT = 30.0          # Seconds before an export request is abandoned
DEFAULT_EXPORT_SCALE = 50.0     # Diagram units per TikZ unit
