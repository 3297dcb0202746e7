"""Self-consistency checks for catalog problems."""

from __future__ import annotations

from dataclasses import dataclass

from odeproblems.core.problem import ODEProblem
from odeproblems.core.types import LogFn
from odeproblems.lib.arrays import exactly_equal, is_finite, max_abs_diff, numel, shape_of


@dataclass
class ProblemReport:
    """
    Outcome of :func:`check_problem`.

    Attributes:
        name: Name of the checked problem.
        expected_shape: Shape of ``u0``.
        derivative_shape: Shape of ``f(u0, p, t0)``.
        derivative_finite: Whether every component of ``f(u0, p, t0)`` is finite.
        analytic_exact: Whether ``analytic(u0, p, t0) == u0`` holds exactly;
            ``None`` when the problem has no analytic solution.
        analytic_error: Largest absolute deviation of ``analytic(u0, p, t0)``
            from ``u0``; ``None`` when there is no analytic solution.
        jacobian_shape_ok: Whether the Jacobian at ``(u0, p, t0)`` is ``(n, n)``;
            ``None`` when the problem has no Jacobian.
    """

    name: str
    expected_shape: tuple[int, ...]
    derivative_shape: tuple[int, ...]
    derivative_finite: bool
    analytic_exact: bool | None = None
    analytic_error: float | None = None
    jacobian_shape_ok: bool | None = None

    @property
    def failures(self) -> list[str]:
        failed = []
        if self.derivative_shape != self.expected_shape:
            failed.append(
                f"derivative shape {self.derivative_shape} != u0 shape {self.expected_shape}"
            )
        if not self.derivative_finite:
            failed.append("derivative at (u0, p, t0) is not finite")
        if self.analytic_exact is False:
            failed.append(f"analytic(u0, p, t0) != u0 (max error {self.analytic_error:.3e})")
        if self.jacobian_shape_ok is False:
            failed.append("jacobian is not (n, n)")
        return failed

    @property
    def passed(self) -> bool:
        return not self.failures


def check_problem(problem: ODEProblem, log: LogFn | None = None) -> ProblemReport:
    """
    Evaluate a problem at its initial point and verify its invariants.

    The derivative must have the shape of ``u0`` and be finite; when an analytic
    solution exists it must reproduce ``u0`` exactly at ``t0``; when a Jacobian
    exists it must be square in the number of state components.

    Args:
        problem: The problem to check.
        log: Optional callback receiving ``(key, value)`` scalar metrics.

    Returns:
        A :class:`ProblemReport`; inspect ``passed`` / ``failures``.
    """
    u0, p, t0 = problem.u0, problem.p, problem.t0

    du = problem.evaluate_derivative(u0, p, t0)
    report = ProblemReport(
        name=problem.name,
        expected_shape=shape_of(u0),
        derivative_shape=shape_of(du),
        derivative_finite=is_finite(du),
    )

    exact = problem.evaluate_analytic(u0, p, t0)
    if exact is not None:
        report.analytic_exact = exactly_equal(exact, u0)
        report.analytic_error = max_abs_diff(exact, u0)

    J = problem.evaluate_jacobian(u0, p, t0)
    if J is not None:
        n = numel(u0)
        report.jacobian_shape_ok = shape_of(J) == (n, n)

    if log is not None:
        prefix = f"check/{problem.name}"
        log(f"{prefix}/derivative_finite", float(report.derivative_finite))
        if report.analytic_error is not None:
            log(f"{prefix}/analytic_error", report.analytic_error)
        log(f"{prefix}/passed", float(report.passed))

    return report
