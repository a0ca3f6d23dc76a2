"""Grayscale image I/O using OpenCV."""

import cv2
import numpy as np

from utils.errors import ImageIOError


def load_grayscale(path: str) -> np.ndarray:
    """Load image as single-channel uint8."""
    img = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)
    if img is None:
        raise ImageIOError(f"Could not load image from {path}")
    return img


def save_grayscale(image: np.ndarray, path: str) -> None:
    """Save single-channel uint8 image; format follows the extension."""
    try:
        ok = cv2.imwrite(str(path), image)
    except cv2.error as e:
        raise ImageIOError(f"Could not save image to {path}: {e}") from e
    if not ok:
        raise ImageIOError(f"Could not save image to {path}")
