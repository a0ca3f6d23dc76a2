"""Tests for MSE/PSNR reporting."""

import numpy as np
import pytest
from utils.metrics import compute_mse, compute_distortion, Timer


def test_mse_no_uint8_overflow():
    """Differences are squared in float, not wrapped in uint8."""
    a = np.zeros((8, 8), dtype=np.uint8)
    b = np.full((8, 8), 255, dtype=np.uint8)
    assert compute_mse(a, b) == 255.0 ** 2


def test_psnr_formula():
    a = np.zeros((8, 8), dtype=np.uint8)
    b = np.ones((8, 8), dtype=np.uint8)
    report = compute_distortion(a, b)
    assert report.mse == 1.0
    assert np.isclose(report.psnr, 10 * np.log10(255.0 ** 2 / 1.0))
    assert not report.lossless


def test_psnr_partial_difference():
    a = np.zeros((8, 8), dtype=np.uint8)
    b = a.copy()
    b[0, :4] = 16
    report = compute_distortion(a, b)
    assert np.isclose(report.mse, 4 * 256 / 64)
    assert np.isclose(report.psnr, 10 * np.log10(255.0 ** 2 / report.mse))


def test_identical_images_report_no_distortion():
    image = np.random.default_rng(0).integers(0, 256, (16, 16), dtype=np.uint8)
    report = compute_distortion(image, image.copy())
    assert report.lossless
    assert report.mse == 0.0
    assert report.psnr is None
    assert "no distortion" in report.format()


def test_format_numeric():
    a = np.zeros((8, 8), dtype=np.uint8)
    b = np.ones((8, 8), dtype=np.uint8)
    text = compute_distortion(a, b).format()
    assert text.startswith("MSE: 1.0000")
    assert "PSNR: 48.13 dB" in text


def test_shape_mismatch():
    with pytest.raises(ValueError):
        compute_mse(np.zeros((8, 8), dtype=np.uint8), np.zeros((8, 16), dtype=np.uint8))


def test_timer_accumulates():
    timer = Timer()
    assert timer.measure(sum, [1, 2, 3]) == 6
    assert timer.elapsed_ms >= 0.0
