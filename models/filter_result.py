"""Filter result with distortion metrics."""

from dataclasses import dataclass
from typing import Optional
import numpy as np


@dataclass(frozen=True)
class DistortionReport:
    """MSE/PSNR between an original and a reconstructed buffer."""

    mse: float
    psnr: Optional[float]
    lossless: bool = False

    def format(self) -> str:
        if self.lossless:
            return "MSE: 0, PSNR: n/a (no distortion)"
        return f"MSE: {self.mse:.4f}, PSNR: {self.psnr:.2f} dB"


@dataclass
class FilterResult:
    """Results from the block filter pipeline."""

    original_image: np.ndarray
    reconstructed_image: np.ndarray

    distortion: DistortionReport

    # Coefficients removed by the selection policy
    zeroed_coeffs: int
    total_coeffs: int

    # Runtime
    filter_time_ms: float

    @property
    def zeroed_ratio(self) -> float:
        return self.zeroed_coeffs / max(self.total_coeffs, 1)
