"""Filter parameters."""

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Optional

from utils.errors import InvalidParameterError


class Policy(Enum):
    """Coefficient selection policies."""

    NONE = 'none'
    ZONAL = 'zonal'
    THRESHOLD = 'threshold'
    SMALLEST_FRACTION = 'fraction'
    ZIGZAG_FRACTION = 'zigzag'


# Inclusive parameter domain per policy; None means the policy takes no parameter
PARAMETER_RANGES = {
    Policy.NONE: None,
    Policy.ZONAL: None,
    Policy.THRESHOLD: (0, 255),
    Policy.SMALLEST_FRACTION: (0, 100),
    Policy.ZIGZAG_FRACTION: (0, 100),
}

DEFAULT_PARAMETERS = {
    Policy.THRESHOLD: 128,
    Policy.SMALLEST_FRACTION: 50,
    Policy.ZIGZAG_FRACTION: 50,
}


@dataclass(frozen=True)
class FilterParams:
    """Block filter parameters: selection policy, its threshold, worker count."""

    policy: Policy = Policy.ZONAL
    parameter: Optional[int] = None
    workers: int = 1

    def __post_init__(self):
        if not isinstance(self.policy, Policy):
            raise InvalidParameterError(f"Unknown policy: {self.policy!r}")
        if isinstance(self.workers, bool) or not isinstance(self.workers, Integral) or self.workers < 1:
            raise InvalidParameterError(f"Workers must be a positive integer, got {self.workers!r}")

        bounds = PARAMETER_RANGES[self.policy]
        if bounds is None:
            if self.parameter is not None:
                raise InvalidParameterError(
                    f"Policy {self.policy.value} takes no parameter, got {self.parameter!r}"
                )
            return
        if self.parameter is None:
            object.__setattr__(self, 'parameter', DEFAULT_PARAMETERS[self.policy])
            return
        if isinstance(self.parameter, bool) or not isinstance(self.parameter, Integral):
            raise InvalidParameterError(
                f"Parameter for {self.policy.value} must be an integer, got {self.parameter!r}"
            )
        low, high = bounds
        if not (low <= self.parameter <= high):
            raise InvalidParameterError(
                f"Parameter for {self.policy.value} must be {low}-{high}, got {self.parameter}"
            )

    @classmethod
    def from_name(cls, name: str, parameter: Optional[int] = None, workers: int = 1) -> 'FilterParams':
        """Build parameters from a policy tag such as 'zonal' or 'zigzag'."""
        try:
            policy = Policy(name.strip().lower())
        except ValueError:
            choices = ', '.join(p.value for p in Policy)
            raise InvalidParameterError(f"Unknown policy '{name}', expected one of: {choices}") from None
        return cls(policy=policy, parameter=parameter, workers=workers)
