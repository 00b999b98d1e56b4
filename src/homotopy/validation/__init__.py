"""
Предикаты валидации и сравнение гомотопий на сетке.
"""

from homotopy.validation.checks import (
    check,
    check2,
    check3,
    check4,
    check_n,
    values_equal,
)
from homotopy.validation.sampling import (
    DEFAULT_SAMPLING,
    SamplingConfig,
    agree,
    sample_unit_interval,
    values_close,
)

__all__ = [
    # Checks
    "check",
    "check2",
    "check3",
    "check4",
    "check_n",
    "values_equal",
    # Sampling
    "DEFAULT_SAMPLING",
    "SamplingConfig",
    "agree",
    "sample_unit_interval",
    "values_close",
]
