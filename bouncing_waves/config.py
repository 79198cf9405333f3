"""
Configuration constants for the bouncing waves animation.
"""

# --- Frame ---
BUFFER_SIZE = 80  # Horizontal samples in the height field
FPS = 100
FRAMES = 1000
RENDER_MODE = "2d"  # "2d" (bar profile) or "line" (single graded line)

# --- Palette ---
# Character gradient (from empty to full)
PALETTE = " .:-=+*#%@"
N_PALETTE = len(PALETTE)
BAR_GLYPH = "#"

# --- Wave X ---
WAVELENGTH_X = 0.8
MAX_HEIGHT_X = 0.5
START_X = 0.0
SPEED_X = 1.0

# --- Wave Y ---
WAVELENGTH_Y = 1.2
MAX_HEIGHT_Y = 0.4
START_Y = 1.0
SPEED_Y = -0.5
