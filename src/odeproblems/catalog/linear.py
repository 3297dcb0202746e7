"""Linear test equation ``u' = αu`` with ``α = 1.01`` and ``u(t) = u0 e^{αt}``.

The family covers a scalar, a 4x2 matrix, a 100x100 matrix and an out-of-place
4x2 variant in float64, plus scalar and 4x2 variants in arbitrary precision.
Random initial states come from one generator, seeded with ``LINEAR_SEED`` by
default, and are drawn in catalog order.
"""

from __future__ import annotations

import math

import numpy as np
import torch
from torch import Tensor

from odeproblems.core import ODEFunction, ODEProblem, Params, PrecisionConfig, RandomConfig
from odeproblems.lib.arrays import shape_of
from odeproblems.lib.precision import big, big_array, make_context
from odeproblems.lib.random import make_generator, uniform

ALPHA = 1.01
LINEAR_SEED = 100

_DESCRIPTION = "Linear ODE du/dt = αu, α = 1.01, with solution u(t) = u0·exp(αt)."


def linear(u: float | Tensor, p: Params | None, t: float) -> float | Tensor:
    return ALPHA * u


def linear_analytic(u0: float | Tensor, p: Params | None, t: float) -> float | Tensor:
    return u0 * math.exp(ALPHA * t)


def linear_inplace(du: Tensor, u: Tensor, p: Params | None, t: float) -> None:
    torch.mul(u, ALPHA, out=du)


def _shape_label(u: Tensor | np.ndarray) -> str:
    return "x".join(map(str, shape_of(u))) or "scalar"


def make_linear(u0: float = 0.5) -> ODEProblem:
    """Scalar float64 linear problem on ``[0, 1]``."""
    return ODEProblem(
        name="prob_ode_linear",
        f=ODEFunction(rhs=linear, inplace=False, analytic=linear_analytic),
        u0=u0,
        tspan=(0.0, 1.0),
        description=_DESCRIPTION,
    )


def make_2d_linear(
    u0: Tensor,
    *,
    name: str = "prob_ode_2Dlinear",
    inplace: bool = True,
) -> ODEProblem:
    """
    Matrix-valued linear problem on ``[0, 1]``.

    Args:
        u0: Initial state of any shape; the equation acts elementwise.
        name: Catalog name.
        inplace: Use the in-place right-hand side (default) or the
            out-of-place one.
    """
    rhs = linear_inplace if inplace else linear
    return ODEProblem(
        name=name,
        f=ODEFunction(rhs=rhs, inplace=inplace, analytic=linear_analytic),
        u0=u0,
        tspan=(0.0, 1.0),
        description=f"{_shape_label(u0)} {_DESCRIPTION}",
    )


def make_bigfloat_linear(precision: PrecisionConfig | None = None) -> ODEProblem:
    """Scalar linear problem with ``α`` and ``u0 = 0.5`` as mpmath numbers."""
    ctx = make_context(precision)
    alpha = big("1.01", ctx)

    def linear_big(u, p, t):
        return alpha * u

    def linear_big_analytic(u0, p, t):
        return u0 * ctx.exp(alpha * t)

    return ODEProblem(
        name="prob_ode_bigfloatlinear",
        f=ODEFunction(rhs=linear_big, inplace=False, analytic=linear_big_analytic),
        u0=big("0.5", ctx),
        tspan=(0.0, 1.0),
        description=f"{_DESCRIPTION} Arbitrary precision ({ctx.prec} bits).",
    )


def make_bigfloat_2d_linear(
    u0: Tensor | np.ndarray,
    precision: PrecisionConfig | None = None,
) -> ODEProblem:
    """In-place matrix linear problem whose state holds mpmath numbers."""
    ctx = make_context(precision)
    alpha = big("1.01", ctx)

    def linear_big_inplace(du: np.ndarray, u: np.ndarray, p, t) -> None:
        du[...] = alpha * u

    def linear_big_analytic(u0: np.ndarray, p, t) -> np.ndarray:
        return u0 * ctx.exp(alpha * t)

    state = big_array(u0, ctx)
    return ODEProblem(
        name="prob_ode_bigfloat2Dlinear",
        f=ODEFunction(rhs=linear_big_inplace, inplace=True, analytic=linear_big_analytic),
        u0=state,
        tspan=(0.0, 1.0),
        description=(
            f"{_shape_label(state)} {_DESCRIPTION} "
            f"Arbitrary precision ({ctx.prec} bits)."
        ),
    )


def make_random_linear(
    random: RandomConfig | None = None,
    precision: PrecisionConfig | None = None,
) -> tuple[ODEProblem, ODEProblem, ODEProblem, ODEProblem]:
    """
    Build the four seeded linear problems from one generator.

    States are drawn in catalog order: 4x2, 100x100, 4x2 out-of-place, then
    4x2 halved for the arbitrary-precision variant.

    Returns:
        ``(prob_ode_2Dlinear, prob_ode_large2Dlinear, prob_ode_2Dlinear_notinplace,
        prob_ode_bigfloat2Dlinear)`` built from ``random``.
    """
    generator = make_generator(random or RandomConfig(seed=LINEAR_SEED))
    linear_2d = make_2d_linear(uniform(4, 2, generator=generator))
    large_linear_2d = make_2d_linear(
        uniform(100, 100, generator=generator),
        name="prob_ode_large2Dlinear",
    )
    linear_2d_notinplace = make_2d_linear(
        uniform(4, 2, generator=generator),
        name="prob_ode_2Dlinear_notinplace",
        inplace=False,
    )
    bigfloat_linear_2d = make_bigfloat_2d_linear(
        uniform(4, 2, generator=generator) / 2, precision
    )
    return linear_2d, large_linear_2d, linear_2d_notinplace, bigfloat_linear_2d


prob_ode_linear = make_linear()
prob_ode_bigfloatlinear = make_bigfloat_linear()
(
    prob_ode_2Dlinear,
    prob_ode_large2Dlinear,
    prob_ode_2Dlinear_notinplace,
    prob_ode_bigfloat2Dlinear,
) = make_random_linear()
