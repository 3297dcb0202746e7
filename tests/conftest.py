"""Shared fixtures for the odeproblems test suite."""

import pytest
import torch
from torch import Tensor

from odeproblems.catalog import ProblemName
from odeproblems.core import ODEFunction, ODEProblem


def decay(u: Tensor, p: dict[str, float] | None, t: float) -> Tensor:
    """du/dt = -k u (exponential decay)."""
    return -p["k"] * u


def decay_analytic(u0: Tensor, p: dict[str, float] | None, t: float) -> Tensor:
    return u0 * torch.exp(torch.tensor(-p["k"] * t, dtype=u0.dtype))


def decay_inplace(du: Tensor, u: Tensor, p: dict[str, float] | None, t: float) -> None:
    torch.mul(u, -p["k"], out=du)


@pytest.fixture
def decay_problem() -> ODEProblem:
    return ODEProblem(
        name="decay",
        f=ODEFunction(rhs=decay, inplace=False, analytic=decay_analytic),
        u0=torch.tensor([1.0, 2.0], dtype=torch.float64),
        tspan=(0.0, 5.0),
        p={"k": 0.5},
    )


@pytest.fixture
def decay_inplace_problem() -> ODEProblem:
    return ODEProblem(
        name="decay_inplace",
        f=ODEFunction(rhs=decay_inplace, inplace=True),
        u0=torch.tensor([1.0, 2.0], dtype=torch.float64),
        tspan=(0.0, 5.0),
        p={"k": 0.5},
    )


@pytest.fixture(params=list(ProblemName), ids=lambda n: n.value)
def catalog_problem(request: pytest.FixtureRequest) -> ODEProblem:
    """Every problem of the catalog, one at a time."""
    return request.param.problem
