"""Euler's rigid body equations.

See Soetaert, *Solving Differential Equations in R*, or Hairer, Nørsett,
Wanner, *Solving Ordinary Differential Equations I*, p. 244.
"""

from __future__ import annotations

from collections.abc import Mapping

import torch
from torch import Tensor

from odeproblems.core import ODEFunction, ODEProblem, Params

I1_KEY = "I1"
I2_KEY = "I2"
I3_KEY = "I3"

DEFAULT_PARAMS: Mapping[str, float] = {I1_KEY: -2.0, I2_KEY: 1.25, I3_KEY: -0.5}


def rigid_body(du: Tensor, u: Tensor, p: Params, t: float) -> None:
    y1, y2, y3 = u[0], u[1], u[2]
    du[0] = p[I1_KEY] * y2 * y3
    du[1] = p[I2_KEY] * y1 * y3
    du[2] = p[I3_KEY] * y1 * y2


def rigid_body_jac(J: Tensor, u: Tensor, p: Params, t: float) -> None:
    y1, y2, y3 = u[0], u[1], u[2]
    I1, I2, I3 = p[I1_KEY], p[I2_KEY], p[I3_KEY]
    J[0, 0] = 0.0
    J[0, 1] = I1 * y3
    J[0, 2] = I1 * y2
    J[1, 0] = I2 * y3
    J[1, 1] = 0.0
    J[1, 2] = I2 * y1
    J[2, 0] = I3 * y2
    J[2, 1] = I3 * y1
    J[2, 2] = 0.0


def make_rigid_body(params: Mapping[str, float] | None = None) -> ODEProblem:
    """Rigid body on ``[0, 20]`` from ``[1, 0, 0.9]``."""
    return ODEProblem(
        name="prob_ode_rigidbody",
        f=ODEFunction(rhs=rigid_body, inplace=True, jac=rigid_body_jac),
        u0=torch.tensor([1.0, 0.0, 0.9], dtype=torch.float64),
        tspan=(0.0, 20.0),
        p={**DEFAULT_PARAMS, **(params or {})},
        description=(
            "Rigid body equations dy1 = I1y2y3, dy2 = I2y1y3, dy3 = I3y1y2 "
            "with I1=-2, I2=1.25, I3=-0.5."
        ),
    )


prob_ode_rigidbody = make_rigid_body()
