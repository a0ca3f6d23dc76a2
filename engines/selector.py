"""Coefficient selection policies applied between forward and inverse DCT."""

import numpy as np

from models.filter_params import FilterParams, Policy
from utils.constants import BLOCK_SIZE, BLOCK_AREA, ZIGZAG_ORDER

_ROWS, _COLS = np.divmod(np.arange(BLOCK_AREA), BLOCK_SIZE)

# Positions on or below the anti-diagonal r + c == 8
ZONAL_MASK = (_ROWS + _COLS) >= BLOCK_SIZE


def fraction_bound(percent: int) -> int:
    """Index of the last removed entry for a percentage: floor(64 * T / 100), at most 63."""
    return min(BLOCK_AREA * percent // 100, BLOCK_AREA - 1)


def _zero_where(coeffs: np.ndarray, mask: np.ndarray) -> np.ndarray:
    out = np.array(coeffs, dtype=np.float64, copy=True)
    out[mask] = 0.0
    return out


def keep_all(coeffs: np.ndarray) -> np.ndarray:
    return np.array(coeffs, dtype=np.float64, copy=True)


def zonal(coeffs: np.ndarray) -> np.ndarray:
    """Keep the upper-left triangle (row + col < 8), zero everything else."""
    coeffs = np.asarray(coeffs, dtype=np.float64)
    return _zero_where(coeffs, np.broadcast_to(ZONAL_MASK, coeffs.shape))


def threshold(coeffs: np.ndarray, t: int) -> np.ndarray:
    """Zero coefficients whose magnitude is strictly below ``t``."""
    coeffs = np.asarray(coeffs, dtype=np.float64)
    return _zero_where(coeffs, np.abs(coeffs) < t)


def _zero_matching_magnitudes(coeffs: np.ndarray, removed: np.ndarray) -> np.ndarray:
    """Zero every coefficient whose magnitude equals one of ``removed`` (per block)."""
    mags = np.abs(coeffs)
    mask = (mags[..., :, None] == removed[..., None, :]).any(axis=-1)
    return _zero_where(coeffs, mask)


def smallest_fraction(coeffs: np.ndarray, percent: int) -> np.ndarray:
    """
    Zero the ``floor(64 * T / 100) + 1`` smallest-magnitude coefficients.

    Coefficients sharing a magnitude with a removed one are removed too, so
    duplicate magnitudes at the cutoff are all removed together and more than
    ``bound + 1`` entries can be zeroed.
    """
    coeffs = np.asarray(coeffs, dtype=np.float64)
    bound = fraction_bound(percent)
    smallest = np.sort(np.abs(coeffs), axis=-1)[..., :bound + 1]
    return _zero_matching_magnitudes(coeffs, smallest)


def zigzag_fraction(coeffs: np.ndarray, percent: int) -> np.ndarray:
    """
    Zero coefficients matching the highest-frequency tail of the zigzag scan.

    The scan is reversed and the magnitudes of its first ``bound + 1``
    entries are removed wherever they occur in the block, with the same
    duplicate-magnitude behavior as ``smallest_fraction``.
    """
    coeffs = np.asarray(coeffs, dtype=np.float64)
    bound = fraction_bound(percent)
    tail = np.abs(coeffs[..., ZIGZAG_ORDER[::-1]])[..., :bound + 1]
    return _zero_matching_magnitudes(coeffs, tail)


def select(params: FilterParams, coeffs: np.ndarray) -> np.ndarray:
    """Apply the policy in ``params`` to one block (64,) or a stack (..., 64)."""
    policy = params.policy
    if policy is Policy.NONE:
        return keep_all(coeffs)
    if policy is Policy.ZONAL:
        return zonal(coeffs)
    if policy is Policy.THRESHOLD:
        return threshold(coeffs, params.parameter)
    if policy is Policy.SMALLEST_FRACTION:
        return smallest_fraction(coeffs, params.parameter)
    if policy is Policy.ZIGZAG_FRACTION:
        return zigzag_fraction(coeffs, params.parameter)
    raise ValueError(f"Unknown policy: {policy}")
