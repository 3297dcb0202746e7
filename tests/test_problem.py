"""Tests for odeproblems.core.problem — ODEFunction and ODEProblem."""

import dataclasses

import pytest
import torch

from odeproblems.core import ODEFunction, ODEProblem


class TestODEProblemValidation:
    def test_reversed_tspan_raises(self, decay_problem: ODEProblem):
        with pytest.raises(ValueError, match="t0 < t1"):
            decay_problem.remake(tspan=(1.0, 0.0))

    def test_empty_tspan_raises(self, decay_problem: ODEProblem):
        with pytest.raises(ValueError, match="t0 < t1"):
            decay_problem.remake(tspan=(2.0, 2.0))

    def test_non_square_mass_matrix_raises(self, decay_problem: ODEProblem):
        with pytest.raises(ValueError, match="square"):
            decay_problem.remake(mass_matrix=torch.ones(2, 3, dtype=torch.float64))

    def test_mass_matrix_size_mismatch_raises(self, decay_problem: ODEProblem):
        with pytest.raises(ValueError, match="does not match"):
            decay_problem.remake(mass_matrix=torch.eye(3, dtype=torch.float64))

    def test_matching_mass_matrix_accepted(self, decay_problem: ODEProblem):
        prob = decay_problem.remake(mass_matrix=torch.eye(2, dtype=torch.float64))
        assert prob.mass_matrix is not None

    def test_frozen(self, decay_problem: ODEProblem):
        with pytest.raises(dataclasses.FrozenInstanceError):
            decay_problem.u0 = torch.zeros(2)  # type: ignore[misc]

    def test_params_are_read_only(self, decay_problem: ODEProblem):
        assert decay_problem.p is not None
        with pytest.raises(TypeError):
            decay_problem.p["k"] = 2.0  # type: ignore[index]

    def test_params_are_copied(self):
        params = {"k": 0.5}
        prob = ODEProblem(
            name="decay",
            f=ODEFunction(rhs=lambda u, p, t: -u, inplace=False),
            u0=1.0,
            tspan=(0.0, 1.0),
            p=params,
        )
        params["k"] = 10.0
        assert prob.p is not None
        assert prob.p["k"] == 0.5


class TestODEProblemProperties:
    def test_accessors(self, decay_problem: ODEProblem):
        assert decay_problem.rhs is decay_problem.f.rhs
        assert decay_problem.analytic is decay_problem.f.analytic
        assert decay_problem.t0 == 0.0
        assert decay_problem.t1 == 5.0
        assert not decay_problem.inplace
        assert decay_problem.has_analytic
        assert not decay_problem.has_jacobian

    def test_repr(self, decay_problem: ODEProblem):
        text = repr(decay_problem)
        assert "decay" in text
        assert "out-of-place" in text


class TestEvaluateDerivative:
    def test_out_of_place(self, decay_problem: ODEProblem):
        du = decay_problem.evaluate_derivative(decay_problem.u0, decay_problem.p, 0.0)
        assert torch.equal(du, torch.tensor([-0.5, -1.0], dtype=torch.float64))

    def test_out_of_place_rejects_buffer(self, decay_problem: ODEProblem):
        with pytest.raises(TypeError, match="out-of-place"):
            decay_problem.evaluate_derivative(
                decay_problem.u0, decay_problem.p, 0.0, out=torch.empty(2)
            )

    def test_inplace_allocates_buffer(self, decay_inplace_problem: ODEProblem):
        prob = decay_inplace_problem
        du = prob.evaluate_derivative(prob.u0, prob.p, 0.0)
        assert torch.equal(du, torch.tensor([-0.5, -1.0], dtype=torch.float64))

    def test_inplace_writes_into_buffer(self, decay_inplace_problem: ODEProblem):
        prob = decay_inplace_problem
        out = torch.full((2,), float("nan"), dtype=torch.float64)
        result = prob.evaluate_derivative(prob.u0, prob.p, 0.0, out=out)
        assert result is out
        assert torch.equal(out, torch.tensor([-0.5, -1.0], dtype=torch.float64))

    def test_raw_inplace_rhs_requires_buffer(self, decay_inplace_problem: ODEProblem):
        prob = decay_inplace_problem
        with pytest.raises(TypeError):
            prob.rhs(prob.u0, prob.p, 0.0)  # type: ignore[call-arg]

    def test_explicit_params_override(self, decay_problem: ODEProblem):
        du = decay_problem.evaluate_derivative(decay_problem.u0, {"k": 2.0}, 0.0)
        assert torch.equal(du, torch.tensor([-2.0, -4.0], dtype=torch.float64))


class TestEvaluateAnalytic:
    def test_initial_point(self, decay_problem: ODEProblem):
        u = decay_problem.evaluate_analytic(decay_problem.u0, decay_problem.p, 0.0)
        assert u is not None
        assert torch.equal(u, decay_problem.u0)

    def test_later_time(self, decay_problem: ODEProblem):
        u = decay_problem.evaluate_analytic(decay_problem.u0, decay_problem.p, 2.0)
        assert u is not None
        expected = decay_problem.u0 * torch.exp(torch.tensor(-1.0, dtype=torch.float64))
        torch.testing.assert_close(u, expected)

    def test_missing_returns_none(self, decay_inplace_problem: ODEProblem):
        prob = decay_inplace_problem
        assert prob.evaluate_analytic(prob.u0, prob.p, 1.0) is None


class TestEvaluateJacobian:
    def test_missing_returns_none(self, decay_problem: ODEProblem):
        assert decay_problem.evaluate_jacobian(decay_problem.u0, decay_problem.p, 0.0) is None

    def test_out_of_place_jacobian(self):
        prob = ODEProblem(
            name="decay_jac",
            f=ODEFunction(
                rhs=lambda u, p, t: -u,
                inplace=False,
                jac=lambda u, p, t: -torch.eye(u.numel(), dtype=u.dtype),
            ),
            u0=torch.ones(3, dtype=torch.float64),
            tspan=(0.0, 1.0),
        )
        J = prob.evaluate_jacobian(prob.u0, prob.p, 0.0)
        assert J is not None
        assert torch.equal(J, -torch.eye(3, dtype=torch.float64))

    def test_inplace_jacobian_allocates_square_buffer(self):
        def jac(J, u, p, t):
            J.copy_(torch.diag(u))

        prob = ODEProblem(
            name="diag_jac",
            f=ODEFunction(rhs=lambda du, u, p, t: None, inplace=True, jac=jac),
            u0=torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64),
            tspan=(0.0, 1.0),
        )
        J = prob.evaluate_jacobian(prob.u0, prob.p, 0.0)
        assert J is not None
        assert J.shape == (3, 3)
        assert torch.equal(J, torch.diag(prob.u0))


class TestRemake:
    def test_replaces_fields(self, decay_problem: ODEProblem):
        prob = decay_problem.remake(u0=torch.zeros(2, dtype=torch.float64), p={"k": 1.0})
        assert torch.equal(prob.u0, torch.zeros(2, dtype=torch.float64))
        assert prob.p is not None
        assert prob.p["k"] == 1.0

    def test_original_untouched(self, decay_problem: ODEProblem):
        decay_problem.remake(tspan=(0.0, 10.0))
        assert decay_problem.tspan == (0.0, 5.0)

    def test_shares_function(self, decay_problem: ODEProblem):
        assert decay_problem.remake(tspan=(0.0, 1.0)).f is decay_problem.f


class TestCopy:
    def test_state_is_not_shared(self, decay_problem: ODEProblem):
        prob = decay_problem.copy()
        prob.u0 += 1.0
        assert torch.equal(decay_problem.u0, torch.tensor([1.0, 2.0], dtype=torch.float64))

    def test_mass_matrix_is_not_shared(self, decay_problem: ODEProblem):
        with_mm = decay_problem.remake(mass_matrix=torch.eye(2, dtype=torch.float64))
        prob = with_mm.copy()
        assert prob.mass_matrix is not None
        prob.mass_matrix.zero_()
        assert torch.equal(with_mm.mass_matrix, torch.eye(2, dtype=torch.float64))

    def test_keeps_everything_else(self, decay_problem: ODEProblem):
        prob = decay_problem.copy()
        assert prob.f is decay_problem.f
        assert prob.tspan == decay_problem.tspan
        assert prob.p == decay_problem.p
        assert prob.mass_matrix is None
