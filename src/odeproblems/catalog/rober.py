"""Robertson chemical kinetics, a classic stiff benchmark.

See Hairer, Nørsett, Wanner, *Solving Ordinary Differential Equations I*,
p. 129. Usually integrated on ``[0, 1e11]``.
"""

from __future__ import annotations

from collections.abc import Mapping

import torch
from torch import Tensor

from odeproblems.core import ODEFunction, ODEProblem, Params

K1_KEY = "k1"
K2_KEY = "k2"
K3_KEY = "k3"

DEFAULT_PARAMS: Mapping[str, float] = {K1_KEY: 0.04, K2_KEY: 3e7, K3_KEY: 1e4}


def rober(du: Tensor, u: Tensor, p: Params, t: float) -> None:
    y1, y2, y3 = u[0], u[1], u[2]
    k1, k2, k3 = p[K1_KEY], p[K2_KEY], p[K3_KEY]
    du[0] = -k1 * y1 + k3 * y2 * y3
    du[1] = k1 * y1 - k2 * y2**2 - k3 * y2 * y3
    du[2] = k2 * y2**2


def rober_jac(J: Tensor, u: Tensor, p: Params, t: float) -> None:
    y1, y2, y3 = u[0], u[1], u[2]
    k1, k2, k3 = p[K1_KEY], p[K2_KEY], p[K3_KEY]
    J[0, 0] = -k1
    J[0, 1] = k3 * y3
    J[0, 2] = k3 * y2
    J[1, 0] = k1
    J[1, 1] = -2 * k2 * y2 - k3 * y3
    J[1, 2] = -k3 * y2
    J[2, 0] = 0.0
    J[2, 1] = 2 * k2 * y2
    J[2, 2] = 0.0


def make_rober(params: Mapping[str, float] | None = None) -> ODEProblem:
    return ODEProblem(
        name="prob_ode_rober",
        f=ODEFunction(rhs=rober, inplace=True, jac=rober_jac),
        u0=torch.tensor([1.0, 0.0, 0.0], dtype=torch.float64),
        tspan=(0.0, 1e11),
        p={**DEFAULT_PARAMS, **(params or {})},
        description=(
            "Robertson reactions dy1 = -k1y1 + k3y2y3, dy2 = k1y1 - k2y2² - k3y2y3, "
            "dy3 = k2y2² with k1=0.04, k2=3e7, k3=1e4."
        ),
    )


prob_ode_rober = make_rober()
