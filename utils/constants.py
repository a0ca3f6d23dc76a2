"""Block geometry, scaling constants and the zigzag scan table."""

import numpy as np

BLOCK_SIZE = 8
BLOCK_AREA = BLOCK_SIZE * BLOCK_SIZE

PIXEL_MAX = 255

# Coefficient amplitude adjustments around the selection stage
COEFF_SCALE_UP = 64.0
COEFF_SCALE_DOWN = 4.0

# One past the largest sample: truncating value * 256 maps every
# normalized level k / 255 back onto k.
DENORM_SCALE = 256.0

# Block positions ordered from lowest to highest spatial frequency
ZIGZAG_ORDER = np.array([
     0,  1,  8, 16,  9,  2,  3, 10,
    17, 24, 32, 25, 18, 11,  4,  5,
    12, 19, 26, 33, 40, 48, 41, 34,
    27, 20, 13,  6,  7, 14, 21, 28,
    35, 42, 49, 56, 57, 50, 43, 36,
    29, 22, 15, 23, 30, 37, 44, 51,
    58, 59, 52, 45, 38, 31, 39, 46,
    53, 60, 61, 54, 47, 55, 62, 63,
])
