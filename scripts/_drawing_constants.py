"""Shared drawing constants for SVG rendering."""

# -- Namespaces ---------------------------------------------------------------
SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

# -- Canvas -------------------------------------------------------------------
# Normalized drawings are mapped onto a fixed logical width; the height
# follows the drawing's aspect ratio.
CANVAS_W = 1000.0

# Used when bounds are disabled or degenerate (empty / zero-area drawings).
DEFAULT_VIEWBOX = (0.0, 0.0, 100.0, 100.0)

# Fixed decimal places for entity coordinates
COORD_PRECISION = 3

# -- Entity rendering ---------------------------------------------------------
HELIX_SEGMENTS_PER_TURN = 16
POINT_MARKER_RADIUS = 1.0
DEFAULT_TEXT_HEIGHT = 1.0

ARROW_MARKER_ID = "arrowhead"
ARROW_MARKER_W = 10
ARROW_MARKER_H = 7

# -- Render option defaults ---------------------------------------------------
DEFAULT_PADDING = 0.1
DEFAULT_BACKGROUND = "white"
NO_BACKGROUND = "none"
DEFAULT_STROKE_WIDTH = 1.0
DEFAULT_COLOR = "black"
