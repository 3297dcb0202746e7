"""Tests for odeproblems.core.checks — self-consistency reports."""

import torch

from odeproblems.core import ODEFunction, ODEProblem, check_problem


class TestCheckProblem:
    def test_catalog_problem_passes(self, catalog_problem: ODEProblem):
        report = check_problem(catalog_problem)
        assert report.passed, report.failures

    def test_report_fields(self, decay_problem: ODEProblem):
        report = check_problem(decay_problem)
        assert report.name == "decay"
        assert report.expected_shape == (2,)
        assert report.derivative_shape == (2,)
        assert report.derivative_finite
        assert report.analytic_exact is True
        assert report.analytic_error == 0.0
        assert report.jacobian_shape_ok is None

    def test_no_analytic_leaves_fields_empty(self, decay_inplace_problem: ODEProblem):
        report = check_problem(decay_inplace_problem)
        assert report.analytic_exact is None
        assert report.analytic_error is None
        assert report.passed

    def test_inconsistent_analytic_fails(self, decay_problem: ODEProblem):
        broken = ODEFunction(
            rhs=decay_problem.f.rhs,
            inplace=False,
            analytic=lambda u0, p, t: u0 + 1e-3,
        )
        report = check_problem(decay_problem.remake(f=broken))
        assert report.analytic_exact is False
        assert report.analytic_error is not None
        assert abs(report.analytic_error - 1e-3) < 1e-12
        assert not report.passed
        assert any("analytic" in f for f in report.failures)

    def test_wrong_shape_fails(self, decay_problem: ODEProblem):
        broken = ODEFunction(rhs=lambda u, p, t: u.sum(), inplace=False)
        report = check_problem(decay_problem.remake(f=broken))
        assert not report.passed
        assert any("shape" in f for f in report.failures)

    def test_non_finite_fails(self, decay_problem: ODEProblem):
        broken = ODEFunction(rhs=lambda u, p, t: u / 0.0, inplace=False)
        report = check_problem(decay_problem.remake(f=broken))
        assert not report.derivative_finite
        assert not report.passed

    def test_jacobian_shape_checked(self, decay_problem: ODEProblem):
        f = ODEFunction(
            rhs=decay_problem.f.rhs,
            inplace=False,
            jac=lambda u, p, t: torch.zeros(2, 3, dtype=torch.float64),
        )
        report = check_problem(decay_problem.remake(f=f))
        assert report.jacobian_shape_ok is False
        assert not report.passed

    def test_log_callback(self, decay_problem: ODEProblem):
        logged: dict[str, float] = {}
        check_problem(decay_problem, log=lambda k, v: logged.__setitem__(k, v))
        assert logged == {
            "check/decay/derivative_finite": 1.0,
            "check/decay/analytic_error": 0.0,
            "check/decay/passed": 1.0,
        }
