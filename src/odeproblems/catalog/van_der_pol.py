"""Van der Pol oscillator, in non-stiff (μ = 1) and stiff (μ = 10⁶) settings.

The state is ordered ``[y, x]``: index 0 is the velocity ``y = dx/dt`` and
index 1 the position ``x``. Both catalog entries start from ``[0, √3]``.
"""

from __future__ import annotations

import math

import torch
from torch import Tensor

from odeproblems.core import ODEFunction, ODEProblem, Params

MU_KEY = "mu"

MU_NONSTIFF = 1.0
MU_STIFF = 1e6


def van_der_pol(du: Tensor, u: Tensor, p: Params, t: float) -> None:
    """dy/dt = μ(1 - x²)y - x, dx/dt = y."""
    y, x = u[0], u[1]
    mu = p[MU_KEY]
    du[0] = mu * (1 - x**2) * y - x
    du[1] = y


def van_der_pol_jac(J: Tensor, u: Tensor, p: Params, t: float) -> None:
    y, x = u[0], u[1]
    mu = p[MU_KEY]
    J[0, 0] = mu * (1 - x**2)
    J[0, 1] = -2 * mu * x * y - 1
    J[1, 0] = 1.0
    J[1, 1] = 0.0


def make_van_der_pol(mu: float = MU_NONSTIFF, *, name: str = "prob_ode_vanderpol") -> ODEProblem:
    """Van der Pol on ``[0, 1]`` from ``[y, x] = [0, √3]``."""
    regime = "Stiff" if mu > 1e3 else "Non-stiff"
    return ODEProblem(
        name=name,
        f=ODEFunction(rhs=van_der_pol, inplace=True, jac=van_der_pol_jac),
        u0=torch.tensor([0.0, math.sqrt(3)], dtype=torch.float64),
        tspan=(0.0, 1.0),
        p={MU_KEY: mu},
        description=(
            f"Van der Pol equations dx/dt = y, dy/dt = μ(1-x²)y - x with μ={mu:g}. "
            f"{regime} parameters."
        ),
    )


prob_ode_vanderpol = make_van_der_pol(MU_NONSTIFF)
prob_ode_vanderpol_stiff = make_van_der_pol(MU_STIFF, name="prob_ode_vanderpol_stiff")
