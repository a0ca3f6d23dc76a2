"""Exceptions raised by the filtering pipeline."""


class FilterError(Exception):
    """Base class for all pipeline failures."""


class InvalidDimensionError(FilterError, ValueError):
    """Image is not 2-D or its sides are not multiples of the block size."""


class InvalidParameterError(FilterError, ValueError):
    """Unknown policy or a policy parameter outside its domain."""


class ImageIOError(FilterError, OSError):
    """Source image unreadable or destination unwritable."""


class InvalidSampleTypeError(FilterError, TypeError):
    """Image samples are not 8-bit unsigned integers."""
