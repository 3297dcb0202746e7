"""Arbitrary-precision helpers built on mpmath.

Big-float problems carry their own ``MPContext`` so that building them never
touches the global ``mpmath.mp`` precision. Numbers created by a context keep
computing at that context's precision, including when mixed with plain floats.

States are numpy object arrays of mpmath numbers: they index, slice and
broadcast like any numpy array while every element stays arbitrary precision.
"""

from __future__ import annotations

from typing import Any

from mpmath.ctx_mp import MPContext
import numpy as np
from torch import Tensor

from odeproblems.core.config import PrecisionConfig


def make_context(config: PrecisionConfig | None = None) -> MPContext:
    """Create an isolated mpmath context with the configured precision."""
    config = config or PrecisionConfig()
    ctx = MPContext()
    ctx.prec = config.prec_bits
    return ctx


DEFAULT_CONTEXT = make_context()


def big(value: Any, ctx: MPContext = DEFAULT_CONTEXT) -> Any:
    """
    Convert a value to an mpmath number of ``ctx``.

    Strings are parsed at full precision, so ``big("1.01")`` differs from
    ``big(1.01)``, which is exactly the binary64 value nearest to 1.01.
    """
    return ctx.mpf(value)


def big_array(values: Any, ctx: MPContext = DEFAULT_CONTEXT) -> np.ndarray:
    """
    Convert a nested sequence, numpy array or tensor to an object array of
    mpmath numbers of ``ctx``, preserving its shape.
    """
    if isinstance(values, Tensor):
        values = values.detach().cpu().numpy()
    src = np.asarray(values, dtype=object)
    out = np.empty(src.shape, dtype=object)
    for idx, v in np.ndenumerate(src):
        out[idx] = ctx.mpf(v)
    return out

