"""Restricted three-body problem (Arenstorf orbit) in arbitrary precision.

As written by Hairer, Nørsett, Wanner, *Solving Ordinary Differential
Equations I*, p. 129::

    y1'' = y1 + 2y2' - μ'(y1 + μ)/D1 - μ(y1 - μ')/D2
    y2'' = y2 - 2y1' - μ'y2/D1 - μy2/D2
    D1 = ((y1 + μ)² + y2²)^(3/2),  D2 = ((y1 - μ')² + y2²)^(3/2)

with ``μ = 0.012277471`` and ``μ' = 1 - μ``. The solution is periodic with
period ``T = 17.0652165601579625588917206249``, the end of ``tspan``.

State layout: ``0 = y1``, ``1 = y2``, ``2 = y1'``, ``3 = y2'``. Constants, state
and time span are mpmath numbers; binary64 would lose the long-horizon
accuracy this benchmark is about.
"""

from __future__ import annotations

import numpy as np

from odeproblems.core import ODEFunction, ODEProblem, PrecisionConfig
from odeproblems.lib.precision import big, big_array, make_context

MU = "0.012277471"
PERIOD = "17.0652165601579625588917206249"
Y2_PRIME_0 = "-2.00158510637908252240537862224"

Y1 = 0
Y2 = 1
DY1 = 2
DY2 = 3


def make_three_body(precision: PrecisionConfig | None = None) -> ODEProblem:
    ctx = make_context(precision)
    mu = big(MU, ctx)
    mu_prime = 1 - mu

    def three_body(du: np.ndarray, u: np.ndarray, p, t) -> None:
        y1, y2, dy1, dy2 = u[Y1], u[Y2], u[DY1], u[DY2]
        D1 = ((y1 + mu) ** 2 + y2**2) ** 1.5
        D2 = ((y1 - mu_prime) ** 2 + y2**2) ** 1.5
        du[Y1] = dy1
        du[Y2] = dy2
        du[DY1] = y1 + 2 * dy2 - mu_prime * (y1 + mu) / D1 - mu * (y1 - mu_prime) / D2
        du[DY2] = y2 - 2 * dy1 - mu_prime * y2 / D1 - mu * y2 / D2

    return ODEProblem(
        name="prob_ode_threebody",
        f=ODEFunction(rhs=three_body, inplace=True),
        u0=big_array([0.994, 0.0, 0.0, Y2_PRIME_0], ctx),
        tspan=(big("0.0", ctx), big(PERIOD, ctx)),
        description=(
            f"Restricted three-body problem (Hairer), μ={MU}, periodic on [0, T], "
            f"T={PERIOD}. Arbitrary precision ({ctx.prec} bits)."
        ),
    )


prob_ode_threebody = make_three_body()
