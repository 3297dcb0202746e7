"""Name-based lookup over the catalog."""

from __future__ import annotations

from enum import Enum

from odeproblems.catalog.fitzhugh_nagumo import prob_ode_fitzhughnagumo
from odeproblems.catalog.linear import (
    prob_ode_2Dlinear,
    prob_ode_2Dlinear_notinplace,
    prob_ode_bigfloat2Dlinear,
    prob_ode_bigfloatlinear,
    prob_ode_large2Dlinear,
    prob_ode_linear,
)
from odeproblems.catalog.lotka_volterra import prob_ode_lotkavoltera
from odeproblems.catalog.mass_matrix import prob_ode_mm_linear
from odeproblems.catalog.pleiades import prob_ode_pleiades
from odeproblems.catalog.rigid_body import prob_ode_rigidbody
from odeproblems.catalog.rober import prob_ode_rober
from odeproblems.catalog.three_body import prob_ode_threebody
from odeproblems.catalog.van_der_pol import prob_ode_vanderpol, prob_ode_vanderpol_stiff
from odeproblems.core import ODEProblem


class ProblemName(str, Enum):
    """Names of the catalog problems."""

    LINEAR = "prob_ode_linear"
    BIGFLOAT_LINEAR = "prob_ode_bigfloatlinear"
    LINEAR_2D = "prob_ode_2Dlinear"
    LARGE_LINEAR_2D = "prob_ode_large2Dlinear"
    LINEAR_2D_NOTINPLACE = "prob_ode_2Dlinear_notinplace"
    BIGFLOAT_LINEAR_2D = "prob_ode_bigfloat2Dlinear"
    LOTKA_VOLTERRA = "prob_ode_lotkavoltera"
    FITZHUGH_NAGUMO = "prob_ode_fitzhughnagumo"
    VAN_DER_POL = "prob_ode_vanderpol"
    VAN_DER_POL_STIFF = "prob_ode_vanderpol_stiff"
    ROBER = "prob_ode_rober"
    THREE_BODY = "prob_ode_threebody"
    RIGID_BODY = "prob_ode_rigidbody"
    PLEIADES = "prob_ode_pleiades"
    MM_LINEAR = "prob_ode_mm_linear"

    @property
    def label(self) -> str:
        labels: dict[ProblemName, str] = {
            ProblemName.LINEAR: "Linear ODE",
            ProblemName.BIGFLOAT_LINEAR: "Linear ODE (BigFloat)",
            ProblemName.LINEAR_2D: "4x2 Linear ODE",
            ProblemName.LARGE_LINEAR_2D: "100x100 Linear ODE",
            ProblemName.LINEAR_2D_NOTINPLACE: "4x2 Linear ODE (out-of-place)",
            ProblemName.BIGFLOAT_LINEAR_2D: "4x2 Linear ODE (BigFloat)",
            ProblemName.LOTKA_VOLTERRA: "Lotka-Volterra",
            ProblemName.FITZHUGH_NAGUMO: "FitzHugh-Nagumo",
            ProblemName.VAN_DER_POL: "Van der Pol",
            ProblemName.VAN_DER_POL_STIFF: "Van der Pol (stiff)",
            ProblemName.ROBER: "Robertson Kinetics",
            ProblemName.THREE_BODY: "Restricted Three-Body",
            ProblemName.RIGID_BODY: "Rigid Body",
            ProblemName.PLEIADES: "Pleiades",
            ProblemName.MM_LINEAR: "Mass-Matrix Linear System",
        }
        return labels[self]

    @property
    def description(self) -> str:
        return _PROBLEMS[self].description

    @property
    def problem(self) -> ODEProblem:
        return _PROBLEMS[self].copy()


_PROBLEMS: dict[ProblemName, ODEProblem] = {
    ProblemName.LINEAR: prob_ode_linear,
    ProblemName.BIGFLOAT_LINEAR: prob_ode_bigfloatlinear,
    ProblemName.LINEAR_2D: prob_ode_2Dlinear,
    ProblemName.LARGE_LINEAR_2D: prob_ode_large2Dlinear,
    ProblemName.LINEAR_2D_NOTINPLACE: prob_ode_2Dlinear_notinplace,
    ProblemName.BIGFLOAT_LINEAR_2D: prob_ode_bigfloat2Dlinear,
    ProblemName.LOTKA_VOLTERRA: prob_ode_lotkavoltera,
    ProblemName.FITZHUGH_NAGUMO: prob_ode_fitzhughnagumo,
    ProblemName.VAN_DER_POL: prob_ode_vanderpol,
    ProblemName.VAN_DER_POL_STIFF: prob_ode_vanderpol_stiff,
    ProblemName.ROBER: prob_ode_rober,
    ProblemName.THREE_BODY: prob_ode_threebody,
    ProblemName.RIGID_BODY: prob_ode_rigidbody,
    ProblemName.PLEIADES: prob_ode_pleiades,
    ProblemName.MM_LINEAR: prob_ode_mm_linear,
}


def get_problem(name: str | ProblemName) -> ODEProblem:
    """
    Look up a catalog problem by name.

    The returned problem owns its ``u0`` and ``mass_matrix``, so callers may
    integrate in place without touching the catalog.

    Raises:
        KeyError: If ``name`` is not a catalog problem.
    """
    try:
        member = ProblemName(name)
    except ValueError:
        valid = ", ".join(n.value for n in ProblemName)
        raise KeyError(f"Unknown problem {name!r}. Valid names: {valid}.") from None
    return _PROBLEMS[member].copy()


def list_problems() -> list[ODEProblem]:
    """Copies of all catalog problems, in catalog order."""
    return [problem.copy() for problem in _PROBLEMS.values()]
