"""Container-agnostic helpers for states.

Problems in the catalog use three kinds of state: plain scalars, float64
tensors and numpy object arrays of mpmath numbers. These helpers give the
problem and check code a single way to allocate, measure and compare them.
"""

from __future__ import annotations

import math
from typing import Any

import mpmath
import numpy as np
import torch
from torch import Tensor


def zeros_like(u: Any) -> Tensor | np.ndarray:
    """
    Allocate a zero-filled output buffer shaped like ``u``.

    Raises:
        TypeError: If ``u`` is a scalar, which cannot be written in place.
    """
    if isinstance(u, Tensor):
        return torch.zeros_like(u)
    if isinstance(u, np.ndarray):
        return np.zeros_like(u)
    raise TypeError(
        f"Cannot allocate an output buffer for a {type(u).__name__} state; "
        "scalar states are only supported by out-of-place functions."
    )


def square_zeros_like(u: Any) -> Tensor | np.ndarray:
    """Allocate an ``(n, n)`` zero buffer, ``n = numel(u)``, with the dtype of ``u``."""
    n = numel(u)
    if isinstance(u, Tensor):
        return u.new_zeros((n, n))
    if isinstance(u, np.ndarray):
        return np.zeros((n, n), dtype=u.dtype)
    raise TypeError(
        f"Cannot allocate a Jacobian buffer for a {type(u).__name__} state; "
        "scalar states are only supported by out-of-place functions."
    )


def shape_of(u: Any) -> tuple[int, ...]:
    """Shape of a state; ``()`` for scalars."""
    if isinstance(u, Tensor):
        return tuple(u.shape)
    if isinstance(u, np.ndarray):
        return u.shape
    return ()


def numel(u: Any) -> int:
    return math.prod(shape_of(u))


def copy_state(u: Any) -> Any:
    """
    Independent copy of a state. Scalars (floats and mpmath numbers) are
    immutable and returned as is.
    """
    if isinstance(u, Tensor):
        return u.clone()
    if isinstance(u, np.ndarray):
        return u.copy()
    return u


def _elements(u: Any) -> list[Any]:
    if isinstance(u, np.ndarray):
        return list(u.flat)
    if isinstance(u, Tensor):
        return u.reshape(-1).tolist()
    return [u]


def is_finite(u: Any) -> bool:
    """True when no element of ``u`` is NaN or infinite."""
    if isinstance(u, Tensor):
        return bool(torch.isfinite(u).all())
    return not any(mpmath.isnan(v) or mpmath.isinf(v) for v in _elements(u))


def exactly_equal(a: Any, b: Any) -> bool:
    """Bitwise-style equality of two states: same shape, equal elements."""
    if isinstance(a, Tensor) and isinstance(b, Tensor):
        return a.shape == b.shape and torch.equal(a, b)
    if shape_of(a) != shape_of(b):
        return False
    return all(x == y for x, y in zip(_elements(a), _elements(b), strict=True))


def max_abs_diff(a: Any, b: Any) -> float:
    """Largest elementwise absolute difference, as a float."""
    if shape_of(a) != shape_of(b):
        raise ValueError(f"Shape mismatch: {shape_of(a)} vs {shape_of(b)}.")
    if isinstance(a, Tensor) and isinstance(b, Tensor):
        return (a - b).abs().max().item() if a.numel() else 0.0
    return float(max((abs(x - y) for x, y in zip(_elements(a), _elements(b))), default=0.0))
