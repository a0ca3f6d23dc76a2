"""Metrics: MSE, PSNR, runtime."""

import time
import numpy as np
from skimage.metrics import mean_squared_error, peak_signal_noise_ratio

from models.filter_result import DistortionReport
from utils.constants import PIXEL_MAX


def compute_mse(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """Mean squared error over all pixel pairs, in float64."""
    if original.shape != reconstructed.shape:
        raise ValueError(
            f"Shape mismatch: {original.shape} vs {reconstructed.shape}"
        )
    return float(mean_squared_error(original, reconstructed))


def compute_distortion(original: np.ndarray, reconstructed: np.ndarray) -> DistortionReport:
    """
    MSE and PSNR between two 8-bit buffers.

    A zero MSE leaves PSNR undefined; it is reported through the
    ``lossless`` flag with ``psnr=None`` instead of an infinity.
    """
    mse = compute_mse(original, reconstructed)
    if mse == 0.0:
        return DistortionReport(mse=0.0, psnr=None, lossless=True)

    psnr = peak_signal_noise_ratio(original, reconstructed, data_range=PIXEL_MAX)
    return DistortionReport(mse=mse, psnr=float(psnr), lossless=False)


class Timer:
    """Simple timer for filter runtime."""

    def __init__(self):
        self.elapsed_ms = 0.0

    def measure(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.elapsed_ms += (time.perf_counter() - start) * 1000.0
        return result
