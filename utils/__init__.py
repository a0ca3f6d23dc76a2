"""Shared utilities."""

from .constants import BLOCK_SIZE, BLOCK_AREA, ZIGZAG_ORDER
from .errors import (
    FilterError, InvalidDimensionError, InvalidSampleTypeError, InvalidParameterError, ImageIOError
)
from .metrics import compute_mse, compute_distortion, Timer
from .test_images import (
    generate_quadrant_checkerboard, generate_textured_quadrants, generate_gradient, generate_noise
)
from .image_io import load_grayscale, save_grayscale

__all__ = [
    'BLOCK_SIZE',
    'BLOCK_AREA',
    'ZIGZAG_ORDER',
    'FilterError',
    'InvalidDimensionError',
    'InvalidSampleTypeError',
    'InvalidParameterError',
    'ImageIOError',
    'compute_mse',
    'compute_distortion',
    'Timer',
    'generate_quadrant_checkerboard',
    'generate_textured_quadrants',
    'generate_gradient',
    'generate_noise',
    'load_grayscale',
    'save_grayscale',
]
