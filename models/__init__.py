"""Data models for filter parameters and results."""

from .filter_params import FilterParams, Policy
from .filter_result import DistortionReport, FilterResult

__all__ = ['FilterParams', 'Policy', 'DistortionReport', 'FilterResult']
