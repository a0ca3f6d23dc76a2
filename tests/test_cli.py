"""Tests for the command-line runner."""

import cv2
import numpy as np
from main import run_cli
from utils.image_io import load_grayscale


def test_usage(capsys):
    assert run_cli(['--help']) == 0
    assert "Usage" in capsys.readouterr().out


def test_synthetic_run(tmp_path, capsys):
    dst = tmp_path / "out.png"
    assert run_cli(['zonal', '--synthetic', str(dst)]) == 0
    out = capsys.readouterr().out
    assert "PSNR:" in out
    assert "Saved:" in out
    assert load_grayscale(str(dst)).shape == (256, 256)


def test_lossless_run_reports_no_distortion(tmp_path, capsys):
    src = tmp_path / "src.png"
    dst = tmp_path / "dst.png"
    cv2.imwrite(str(src), np.full((16, 16), 90, dtype=np.uint8))
    assert run_cli(['none', str(src), str(dst), '--workers', '2']) == 0
    assert "no distortion" in capsys.readouterr().out


def test_threshold_parameter(tmp_path, capsys):
    src = tmp_path / "src.png"
    dst = tmp_path / "dst.png"
    cv2.imwrite(str(src), np.random.default_rng(0).integers(0, 256, (16, 16), dtype=np.uint8))
    assert run_cli(['threshold', str(src), str(dst), '30']) == 0
    assert "T=30" in capsys.readouterr().out


def test_bad_policy(tmp_path, capsys):
    assert run_cli(['blur', '--synthetic', str(tmp_path / "out.png")]) == 1
    assert "Unknown policy" in capsys.readouterr().err


def test_out_of_range_parameter(tmp_path, capsys):
    dst = tmp_path / "out.png"
    assert run_cli(['fraction', '--synthetic', str(dst), '101']) == 1
    assert not dst.exists()


def test_invalid_dimensions_no_output(tmp_path, capsys):
    src = tmp_path / "odd.png"
    dst = tmp_path / "out.png"
    cv2.imwrite(str(src), np.zeros((8, 10), dtype=np.uint8))
    assert run_cli(['zonal', str(src), str(dst)]) == 1
    assert "multiple of 8" in capsys.readouterr().err
    assert not dst.exists()


def test_missing_source(tmp_path, capsys):
    assert run_cli(['zonal', str(tmp_path / "nope.png"), str(tmp_path / "out.png")]) == 1
    assert "Could not load" in capsys.readouterr().err


def test_parameter_for_parameterless_policy(tmp_path, capsys):
    dst = tmp_path / "out.png"
    assert run_cli(['zonal', '--synthetic', str(dst), '999']) == 1
    assert "takes no parameter" in capsys.readouterr().err
    assert not dst.exists()


def test_file_run_writes_destination_and_reports_removed(tmp_path, capsys):
    src = tmp_path / "src.png"
    dst = tmp_path / "dst.png"
    image = np.full((16, 16), 90, dtype=np.uint8)
    cv2.imwrite(str(src), image)
    assert run_cli(['none', str(src), str(dst)]) == 0
    out = capsys.readouterr().out
    assert "Image: 16x16" in out
    assert "Zeroed:    0/256" in out
    assert np.array_equal(load_grayscale(str(dst)), image)
