"""Utility libraries for odeproblems."""

from odeproblems.lib.arrays import (
    copy_state,
    exactly_equal,
    is_finite,
    max_abs_diff,
    shape_of,
    square_zeros_like,
    zeros_like,
)
from odeproblems.lib.precision import big, big_array, make_context
from odeproblems.lib.random import make_generator, uniform

__all__ = [
    "big",
    "big_array",
    "copy_state",
    "exactly_equal",
    "is_finite",
    "make_context",
    "make_generator",
    "max_abs_diff",
    "shape_of",
    "square_zeros_like",
    "uniform",
    "zeros_like",
]
