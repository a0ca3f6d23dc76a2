"""DSP engines - block transform, coefficient selection, pipeline."""

from .block_processor import validate_dimensions, split_into_blocks, merge_blocks, normalize, denormalize
from .dct_engine import forward, inverse, scale_up, scale_down, encode_block, decode_block
from .selector import select, keep_all, zonal, threshold, smallest_fraction, zigzag_fraction, fraction_bound
from utils.constants import ZIGZAG_ORDER
from .pipeline import filter_blocks, filter_image, filter_file

__all__ = [
    'validate_dimensions',
    'split_into_blocks',
    'merge_blocks',
    'normalize',
    'denormalize',
    'forward',
    'inverse',
    'scale_up',
    'scale_down',
    'encode_block',
    'decode_block',
    'select',
    'keep_all',
    'zonal',
    'threshold',
    'smallest_fraction',
    'zigzag_fraction',
    'fraction_bound',
    'ZIGZAG_ORDER',
    'filter_blocks',
    'filter_image',
    'filter_file',
]
