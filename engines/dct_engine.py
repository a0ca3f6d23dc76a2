"""Separable 8x8 DCT on row-major coefficient vectors."""

import numpy as np
from scipy.fft import dctn, idctn

from utils.constants import BLOCK_SIZE, COEFF_SCALE_UP, COEFF_SCALE_DOWN

# SciPy's unnormalized DCT-II carries a factor of 2 per axis
FORWARD_NORM = 4.0
INVERSE_NORM = 4.0


def _as_blocks(values: np.ndarray) -> np.ndarray:
    """View (..., 64) or (..., 8, 8) input as (..., 8, 8) float64."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.shape[-2:] == (BLOCK_SIZE, BLOCK_SIZE):
        return arr
    return arr.reshape(arr.shape[:-1] + (BLOCK_SIZE, BLOCK_SIZE))


def forward(block: np.ndarray) -> np.ndarray:
    """
    2D DCT-II over the rows and columns of each block.

    Unit-gain kernel: element 0 equals the sum of the 64 samples.
    Output has the same shape as the input.
    """
    shape = np.shape(block)
    coeffs = dctn(_as_blocks(block), type=2, axes=(-2, -1)) / FORWARD_NORM
    return coeffs.reshape(shape)


def inverse(coeffs: np.ndarray) -> np.ndarray:
    """Inverse of ``forward`` up to a factor of 16 (undone by the scaling stage)."""
    shape = np.shape(coeffs)
    spatial = idctn(_as_blocks(coeffs), type=2, axes=(-2, -1)) / INVERSE_NORM
    return spatial.reshape(shape)


def scale_up(coeffs: np.ndarray) -> np.ndarray:
    return coeffs * COEFF_SCALE_UP


def scale_down(coeffs: np.ndarray) -> np.ndarray:
    return coeffs / COEFF_SCALE_DOWN


def encode_block(block: np.ndarray) -> np.ndarray:
    """DCT then amplitude scale-up, ready for coefficient selection."""
    return scale_up(forward(block))


def decode_block(coeffs: np.ndarray) -> np.ndarray:
    """Scale-down then inverse DCT."""
    return inverse(scale_down(coeffs))
