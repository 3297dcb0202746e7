"""FitzHugh-Nagumo model of an excitable neuron.

All constants are fixed, so the problem carries no parameter mapping.
"""

from __future__ import annotations

import torch
from torch import Tensor

from odeproblems.core import ODEFunction, ODEProblem, Params

A = 0.7
B = 0.8
TAU_INV = 1 / 12.5
I_EXT = 0.5


def fitzhugh_nagumo(du: Tensor, u: Tensor, p: Params | None, t: float) -> None:
    v, w = u[0], u[1]
    du[0] = v - v**3 / 3 - w + I_EXT
    du[1] = TAU_INV * (v + A - B * w)


def fitzhugh_nagumo_jac(J: Tensor, u: Tensor, p: Params | None, t: float) -> None:
    v = u[0]
    J[0, 0] = 1 - v**2
    J[0, 1] = -1.0
    J[1, 0] = TAU_INV
    J[1, 1] = -TAU_INV * B


def make_fitzhugh_nagumo(u0: Tensor | None = None) -> ODEProblem:
    """FitzHugh-Nagumo on ``[0, 1]``, by default from ``v = w = 1``."""
    return ODEProblem(
        name="prob_ode_fitzhughnagumo",
        f=ODEFunction(rhs=fitzhugh_nagumo, inplace=True, jac=fitzhugh_nagumo_jac),
        u0=u0 if u0 is not None else torch.tensor([1.0, 1.0], dtype=torch.float64),
        tspan=(0.0, 1.0),
        description=(
            "FitzHugh-Nagumo dv/dt = v - v³/3 - w + I, τ dw/dt = v + a - bw "
            f"with a={A}, b={B}, 1/τ={TAU_INV}, I={I_EXT}."
        ),
    )


prob_ode_fitzhughnagumo = make_fitzhugh_nagumo()
