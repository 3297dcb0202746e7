"""Pleiades problem: seven bodies in the plane under gravitation.

Hairer, Nørsett, Wanner, *Solving Ordinary Differential Equations I*, p. 244::

    xi'' = Σ_{j≠i} mj (xj - xi) / rij
    yi'' = Σ_{j≠i} mj (yj - yi) / rij
    rij  = ((xi - xj)² + (yi - yj)²)^(3/2)

Body ``i`` (1-based) has mass ``i``. Usually integrated on ``[0, 3]``.

The flat 28-component state is laid out as::

    [0:7]   x positions      [7:14]  y positions
    [14:21] x velocities     [21:28] y velocities

Coincident bodies divide by zero; that is left to the solver's step control.
"""

from __future__ import annotations

import torch
from torch import Tensor

from odeproblems.core import ODEFunction, ODEProblem, Params

N_BODIES = 7

X = slice(0, 7)
Y = slice(7, 14)
VX = slice(14, 21)
VY = slice(21, 28)

MASSES = torch.arange(1, N_BODIES + 1, dtype=torch.float64)

X0 = [3.0, 3.0, -1.0, -3.0, 2.0, -2.0, 2.0]
Y0 = [3.0, -3.0, 2.0, 0.0, 0.0, -4.0, 4.0]
VX0 = [0.0, 0.0, 0.0, 0.0, 0.0, 1.75, -1.5]
VY0 = [0.0, 0.0, 0.0, -1.25, 1.0, 0.0, 0.0]


def pleiades(du: Tensor, u: Tensor, p: Params | None, t: float) -> None:
    x, y = u[X], u[Y]
    du[X] = u[VX]
    du[Y] = u[VY]

    # dx[i, j] = xj - xi
    dx = x.unsqueeze(0) - x.unsqueeze(1)
    dy = y.unsqueeze(0) - y.unsqueeze(1)
    r = (dx**2 + dy**2) ** 1.5
    self_pairs = torch.eye(N_BODIES, dtype=torch.bool, device=u.device)
    r = torch.where(self_pairs, torch.ones_like(r), r)

    m = MASSES.to(dtype=u.dtype, device=u.device)
    du[VX] = (m * dx / r).sum(dim=1)
    du[VY] = (m * dy / r).sum(dim=1)


def make_pleiades() -> ODEProblem:
    return ODEProblem(
        name="prob_ode_pleiades",
        f=ODEFunction(rhs=pleiades, inplace=True),
        u0=torch.tensor(X0 + Y0 + VX0 + VY0, dtype=torch.float64),
        tspan=(0.0, 3.0),
        description="Pleiades problem: 7 bodies in the plane, body i has mass i.",
    )


prob_ode_pleiades = make_pleiades()
