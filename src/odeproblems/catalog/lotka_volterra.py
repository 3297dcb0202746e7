"""Lotka-Volterra predator-prey equations."""

from __future__ import annotations

from collections.abc import Mapping

import torch
from torch import Tensor

from odeproblems.core import ODEFunction, ODEProblem, Params

A_KEY = "a"
B_KEY = "b"
C_KEY = "c"
D_KEY = "d"

DEFAULT_PARAMS: Mapping[str, float] = {A_KEY: 1.5, B_KEY: 1.0, C_KEY: 3.0, D_KEY: 1.0}


def lotka_volterra(du: Tensor, u: Tensor, p: Params, t: float) -> None:
    """dx/dt = a·x - b·x·y, dy/dt = -c·y + d·x·y."""
    x, y = u[0], u[1]
    du[0] = p[A_KEY] * x - p[B_KEY] * x * y
    du[1] = -p[C_KEY] * y + p[D_KEY] * x * y


def lotka_volterra_jac(J: Tensor, u: Tensor, p: Params, t: float) -> None:
    x, y = u[0], u[1]
    J[0, 0] = p[A_KEY] - p[B_KEY] * y
    J[0, 1] = -p[B_KEY] * x
    J[1, 0] = p[D_KEY] * y
    J[1, 1] = -p[C_KEY] + p[D_KEY] * x


def make_lotka_volterra(
    u0: Tensor | None = None,
    params: Mapping[str, float] | None = None,
) -> ODEProblem:
    """Lotka-Volterra on ``[0, 1]``, by default from ``x = y = 1``."""
    return ODEProblem(
        name="prob_ode_lotkavoltera",
        f=ODEFunction(rhs=lotka_volterra, inplace=True, jac=lotka_volterra_jac),
        u0=u0 if u0 is not None else torch.tensor([1.0, 1.0], dtype=torch.float64),
        tspan=(0.0, 1.0),
        p={**DEFAULT_PARAMS, **(params or {})},
        description="Lotka-Volterra equations dx/dt = ax - bxy, dy/dt = -cy + dxy.",
    )


prob_ode_lotkavoltera = make_lotka_volterra()
