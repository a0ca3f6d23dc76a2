"""Main block filter pipeline."""

from concurrent.futures import ThreadPoolExecutor
from typing import Tuple

import numpy as np

from models.filter_params import FilterParams
from models.filter_result import FilterResult
from engines.block_processor import (
    validate_dimensions, split_into_blocks, merge_blocks, normalize, denormalize
)
from engines.dct_engine import encode_block, decode_block
from engines.selector import select
from utils.image_io import load_grayscale, save_grayscale
from utils.metrics import compute_distortion, Timer


def _filter_row(row: np.ndarray, params: FilterParams) -> Tuple[np.ndarray, np.ndarray]:
    """Filter one block-row of shape (W/8, 64); returns (removed mask, samples)."""
    coeffs = encode_block(row)
    selected = select(params, coeffs)
    removed = (selected == 0.0) & (coeffs != 0.0)
    return removed, decode_block(selected)


def filter_blocks(
    grid: np.ndarray,
    params: FilterParams,
    workers: int = 1
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Run encode -> select -> decode on every block of a normalized grid.

    Blocks are independent. With ``workers > 1`` block-rows are spread over
    a thread pool and joined before returning; the output matches the
    sequential run exactly since every row goes through the same code path.

    Returns (mask of coefficients the policy zeroed, reconstructed samples),
    both shaped like ``grid``. Coefficients that were already zero after the
    forward transform are not part of the mask.
    """
    if workers > 1 and grid.shape[0] > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            rows = list(pool.map(lambda row: _filter_row(row, params), grid))
    else:
        rows = [_filter_row(row, params) for row in grid]

    removed = np.stack([r for r, _ in rows])
    spatial = np.stack([s for _, s in rows])
    return removed, spatial


def filter_image(image: np.ndarray, params: FilterParams) -> FilterResult:
    """Run the full block DCT filter on a uint8 grayscale image."""
    image = np.asarray(image)
    validate_dimensions(image)
    timer = Timer()

    grid = split_into_blocks(normalize(image))
    removed, spatial = timer.measure(filter_blocks, grid, params, params.workers)
    reconstructed = merge_blocks(denormalize(spatial))

    distortion = compute_distortion(image, reconstructed)

    return FilterResult(
        original_image=image,
        reconstructed_image=reconstructed,
        distortion=distortion,
        zeroed_coeffs=int(np.count_nonzero(removed)),
        total_coeffs=int(removed.size),
        filter_time_ms=timer.elapsed_ms,
    )


def filter_file(src: str, dst: str, params: FilterParams) -> FilterResult:
    """Load ``src``, filter it, write the reconstruction to ``dst``."""
    image = load_grayscale(src)
    result = filter_image(image, params)
    save_grayscale(result.reconstructed_image, dst)
    return result
