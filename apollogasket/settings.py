# apollogasket global settings

# Square canvas edge, in pixels. Seed circles are laid out relative to it.
CANVAS_SIZE = 960.0

# Tangency/duplicate tolerance as a fraction of the canvas edge
TOLERANCE_RATIO = 1e-3
# Candidates smaller than MIN_RADIUS_FACTOR * tolerance are dropped
MIN_RADIUS_FACTOR = 2.0

# Viewer (visual only)
FRAME_RATE = 60         # Hz
BACKGROUND_COLOR = "#ffffff"
STROKE_COLOR = "#000000"
STROKE_WIDTH = 1.0      # px
WINDOW_TITLE = "Apollonian Gasket"
