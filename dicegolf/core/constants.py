"""
Dice Golf - Course and Game Constants

Shared constants for course dimensions, noise sampling, terrain bands,
placement regions and dice rules used across the engine and tools.
"""

# ============================================================================
# Course Dimensions
# ============================================================================
COURSE_WIDTH = 16  # cells
COURSE_HEIGHT = 26  # cells
TILE_SIZE = 32  # pixels per cell, presentation only

# ============================================================================
# Noise Sampling
# ============================================================================
NOISE_OCTAVES = 4
NOISE_PERSISTENCE = 0.5  # amplitude multiplier per octave
NOISE_LACUNARITY = 2  # frequency multiplier per octave
HEIGHT_SCALE = 250
TERRAIN_SCALE = 15  # finer than HEIGHT_SCALE

# ============================================================================
# Placement Regions (fractions of course height/width)
# ============================================================================
HOLE_MAX_Y_FRACTION = 0.5  # hole: y < height * 0.5
HOLE_MIN_X_FRACTION = 0.5  # hole: x > width / 2
TEE_MIN_Y_FRACTION = 0.85  # ball: y > height * 0.85
TEE_MIN_X = 0  # ball: x > 0

# ============================================================================
# Dice
# ============================================================================
DICE_SIDES = 6
FAIRWAY_MODIFIER = 1
SAND_MODIFIER = -1
PUTTER_DISTANCE = 1

# Strokes shown against this limit; never enforced
STROKE_LIMIT = 6
