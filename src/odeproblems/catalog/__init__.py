"""Catalog of ready-made benchmark ODE problems."""

from odeproblems.catalog.fitzhugh_nagumo import make_fitzhugh_nagumo, prob_ode_fitzhughnagumo
from odeproblems.catalog.linear import (
    make_2d_linear,
    make_bigfloat_2d_linear,
    make_bigfloat_linear,
    make_linear,
    make_random_linear,
    prob_ode_2Dlinear,
    prob_ode_2Dlinear_notinplace,
    prob_ode_bigfloat2Dlinear,
    prob_ode_bigfloatlinear,
    prob_ode_large2Dlinear,
    prob_ode_linear,
)
from odeproblems.catalog.lotka_volterra import A_KEY as LV_A_KEY
from odeproblems.catalog.lotka_volterra import B_KEY as LV_B_KEY
from odeproblems.catalog.lotka_volterra import C_KEY as LV_C_KEY
from odeproblems.catalog.lotka_volterra import D_KEY as LV_D_KEY
from odeproblems.catalog.lotka_volterra import make_lotka_volterra, prob_ode_lotkavoltera
from odeproblems.catalog.mass_matrix import MM_A, MM_LINEAR, make_mm_linear, prob_ode_mm_linear
from odeproblems.catalog.pleiades import make_pleiades, prob_ode_pleiades
from odeproblems.catalog.registry import ProblemName, get_problem, list_problems
from odeproblems.catalog.rigid_body import (
    I1_KEY,
    I2_KEY,
    I3_KEY,
    make_rigid_body,
    prob_ode_rigidbody,
)
from odeproblems.catalog.rober import K1_KEY, K2_KEY, K3_KEY, make_rober, prob_ode_rober
from odeproblems.catalog.three_body import make_three_body, prob_ode_threebody
from odeproblems.catalog.van_der_pol import (
    MU_KEY,
    make_van_der_pol,
    prob_ode_vanderpol,
    prob_ode_vanderpol_stiff,
)

__all__ = [
    "I1_KEY",
    "I2_KEY",
    "I3_KEY",
    "K1_KEY",
    "K2_KEY",
    "K3_KEY",
    "LV_A_KEY",
    "LV_B_KEY",
    "LV_C_KEY",
    "LV_D_KEY",
    "MM_A",
    "MM_LINEAR",
    "MU_KEY",
    "ProblemName",
    "get_problem",
    "list_problems",
    "make_2d_linear",
    "make_bigfloat_2d_linear",
    "make_bigfloat_linear",
    "make_fitzhugh_nagumo",
    "make_linear",
    "make_random_linear",
    "make_lotka_volterra",
    "make_mm_linear",
    "make_pleiades",
    "make_rigid_body",
    "make_rober",
    "make_three_body",
    "make_van_der_pol",
    "prob_ode_2Dlinear",
    "prob_ode_2Dlinear_notinplace",
    "prob_ode_bigfloat2Dlinear",
    "prob_ode_bigfloatlinear",
    "prob_ode_fitzhughnagumo",
    "prob_ode_large2Dlinear",
    "prob_ode_linear",
    "prob_ode_lotkavoltera",
    "prob_ode_mm_linear",
    "prob_ode_pleiades",
    "prob_ode_rigidbody",
    "prob_ode_rober",
    "prob_ode_threebody",
    "prob_ode_vanderpol",
    "prob_ode_vanderpol_stiff",
]
