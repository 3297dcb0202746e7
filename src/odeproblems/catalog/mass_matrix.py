"""Linear system with a constant mass matrix: ``M u' = A u``.

``M = diag(0.5, 0.5, 0.5, 0.5)`` and ``A`` is a random 4x4 matrix, so the
solution is ``u(t) = expm(M⁻¹ A t) u0``. ``A`` and then ``u0`` are drawn from a
generator seeded with ``RandomConfig.seed``.
"""

from __future__ import annotations

import torch
from torch import Tensor

from odeproblems.core import ODEFunction, ODEProblem, Params, RandomConfig
from odeproblems.lib.random import make_generator, uniform

N = 4
MASS_DIAGONAL = 0.5


def make_mm_linear(random: RandomConfig | None = None) -> tuple[ODEProblem, Tensor]:
    """
    Build the mass-matrix linear problem.

    Returns:
        The problem and the random matrix ``A`` it applies.
    """
    generator = make_generator(random)
    A = uniform(N, N, generator=generator)
    M = torch.diag(torch.full((N,), MASS_DIAGONAL, dtype=torch.float64))
    M_inv_A = torch.linalg.inv(M) @ A

    def mm_linear(du: Tensor, u: Tensor, p: Params | None, t: float) -> None:
        torch.mv(A, u, out=du)

    def mm_linear_analytic(u0: Tensor, p: Params | None, t: float) -> Tensor:
        return torch.linalg.matrix_exp(M_inv_A * t) @ u0

    problem = ODEProblem(
        name="prob_ode_mm_linear",
        f=ODEFunction(rhs=mm_linear, inplace=True, analytic=mm_linear_analytic),
        u0=uniform(N, generator=generator),
        tspan=(0.0, 1.0),
        mass_matrix=M,
        description="Linear DAE M du/dt = Au, M = 0.5·I, A random 4x4 (seeded).",
    )
    return problem, A


prob_ode_mm_linear, _A = make_mm_linear()
MM_A = _A.clone()
MM_LINEAR = torch.diag(torch.full((N,), MASS_DIAGONAL, dtype=torch.float64))
