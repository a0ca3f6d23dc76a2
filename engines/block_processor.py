"""Block processing: validation, splitting, merging, sample scaling."""

import numpy as np

from utils.constants import BLOCK_SIZE, BLOCK_AREA, PIXEL_MAX, DENORM_SCALE
from utils.errors import InvalidDimensionError, InvalidSampleTypeError


def validate_dimensions(image: np.ndarray) -> None:
    """Reject buffers that are not 2-D uint8 with sides divisible by 8."""
    if image.ndim != 2:
        raise InvalidDimensionError(f"Expected a 2-D grayscale image, got shape {image.shape}")
    if image.dtype != np.uint8:
        raise InvalidSampleTypeError(f"Expected uint8 samples, got {image.dtype}")
    h, w = image.shape
    if h == 0 or w == 0 or h % BLOCK_SIZE or w % BLOCK_SIZE:
        raise InvalidDimensionError(
            f"Image size {w}x{h} is not a multiple of {BLOCK_SIZE}"
        )


def split_into_blocks(channel: np.ndarray) -> np.ndarray:
    """Split HxW channel into an (H/8, W/8, 64) grid of row-major blocks."""
    h, w = channel.shape
    grid = channel.reshape(h // BLOCK_SIZE, BLOCK_SIZE, w // BLOCK_SIZE, BLOCK_SIZE).swapaxes(1, 2)
    return grid.reshape(h // BLOCK_SIZE, w // BLOCK_SIZE, BLOCK_AREA).copy()


def merge_blocks(grid: np.ndarray) -> np.ndarray:
    """Merge an (H/8, W/8, 64) grid back into an HxW channel."""
    rows, cols, _ = grid.shape
    blocks = grid.reshape(rows, cols, BLOCK_SIZE, BLOCK_SIZE).swapaxes(1, 2)
    return blocks.reshape(rows * BLOCK_SIZE, cols * BLOCK_SIZE).copy()


def normalize(samples: np.ndarray) -> np.ndarray:
    """8-bit samples to [0.0, 1.0]."""
    return samples.astype(np.float64) / PIXEL_MAX


def denormalize(values: np.ndarray) -> np.ndarray:
    """[0.0, 1.0] back to 8-bit by truncation, clipped to the byte range."""
    scaled = np.clip(values * DENORM_SCALE, 0, PIXEL_MAX)
    return np.trunc(scaled).astype(np.uint8)
