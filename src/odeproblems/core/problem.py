"""The ODE problem abstraction shared by every catalog entry."""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, cast

from torch import Tensor
from typing_extensions import override

from odeproblems.core.types import (
    AnalyticFn,
    InPlaceFn,
    JacobianFn,
    OutOfPlaceFn,
    Params,
    RHSFn,
    State,
    Time,
)
from odeproblems.lib.arrays import copy_state, numel, shape_of, square_zeros_like, zeros_like


@dataclass(frozen=True)
class ODEFunction:
    """
    The callables that define an ODE ``u' = f(u, p, t)``.

    Attributes:
        rhs: Right-hand side. Out-of-place functions are called as
            ``rhs(u, p, t)`` and return the derivative; in-place functions are
            called as ``rhs(du, u, p, t)`` and overwrite every entry of ``du``.
        inplace: Which of the two calling conventions ``rhs`` (and ``jac``) use.
        analytic: Optional closed-form solution ``analytic(u0, p, t)``. At the
            initial time it returns ``u0`` exactly.
        jac: Optional Jacobian ``df/du`` with the same calling convention as
            ``rhs``; the in-place form writes an ``(n, n)`` buffer.
    """

    rhs: RHSFn
    inplace: bool
    analytic: AnalyticFn | None = None
    jac: JacobianFn | None = None


@dataclass(frozen=True, kw_only=True, eq=False)
class ODEProblem:
    """
    An initial-value problem ``M u' = f(u, p, t)``, ``u(t0) = u0``.

    The instance is frozen but ``u0`` and ``mass_matrix`` are not: integrating
    in place must start from ``copy()`` (or a problem from ``get_problem``),
    never from a module-level catalog constant.

    Attributes:
        name: Catalog name of the problem.
        f: Right-hand side and its optional analytic solution and Jacobian.
        u0: Initial state.
        tspan: Integration interval ``(t0, t1)`` with ``t0 < t1``.
        p: Read-only parameter mapping passed to every callable, or ``None``
            when all constants are fixed inside ``f``.
        mass_matrix: Optional square mass matrix ``M``; ``None`` is the identity.
        description: Human-readable summary, with the equations.
    """

    name: str
    f: ODEFunction
    u0: State
    tspan: tuple[Time, Time]
    p: Params | None = None
    mass_matrix: Tensor | None = None
    description: str = ""

    def __post_init__(self) -> None:
        t0, t1 = self.tspan
        if not t0 < t1:
            raise ValueError(f"tspan must satisfy t0 < t1, got ({t0}, {t1}).")

        if self.p is not None and not isinstance(self.p, MappingProxyType):
            object.__setattr__(self, "p", MappingProxyType(dict(self.p)))

        if self.mass_matrix is not None:
            mm = self.mass_matrix
            if mm.ndim != 2 or mm.shape[0] != mm.shape[1]:
                raise ValueError(
                    f"mass_matrix must be a square 2-D matrix, got shape {tuple(mm.shape)}."
                )
            n = numel(self.u0)
            if mm.shape[0] != n:
                raise ValueError(
                    f"mass_matrix of size {mm.shape[0]} does not match the {n} state "
                    f"components of u0 (shape {shape_of(self.u0)})."
                )

    @property
    def rhs(self) -> RHSFn:
        return self.f.rhs

    @property
    def analytic(self) -> AnalyticFn | None:
        return self.f.analytic

    @property
    def jac(self) -> JacobianFn | None:
        return self.f.jac

    @property
    def inplace(self) -> bool:
        return self.f.inplace

    @property
    def has_analytic(self) -> bool:
        return self.f.analytic is not None

    @property
    def has_jacobian(self) -> bool:
        return self.f.jac is not None

    @property
    def t0(self) -> Time:
        return self.tspan[0]

    @property
    def t1(self) -> Time:
        return self.tspan[1]

    def evaluate_derivative(
        self,
        u: State,
        p: Params | None,
        t: Time,
        *,
        out: State | None = None,
    ) -> State:
        """
        Evaluate ``f(u, p, t)``.

        For in-place problems the result is written into ``out`` (allocated
        shaped like ``u`` when omitted) and ``out`` is returned.

        Raises:
            TypeError: If ``out`` is given for an out-of-place problem.
        """
        if self.f.inplace:
            du = zeros_like(u) if out is None else out
            cast(InPlaceFn, self.f.rhs)(du, u, p, t)
            return du
        if out is not None:
            raise TypeError(
                f"Problem {self.name!r} has an out-of-place right-hand side; "
                "'out' is not accepted."
            )
        return cast(OutOfPlaceFn, self.f.rhs)(u, p, t)

    def evaluate_analytic(self, u0: State, p: Params | None, t: Time) -> State | None:
        """Exact solution at ``t`` from ``u0``, or ``None`` when no closed form exists."""
        if self.f.analytic is None:
            return None
        return self.f.analytic(u0, p, t)

    def evaluate_jacobian(
        self,
        u: State,
        p: Params | None,
        t: Time,
        *,
        out: State | None = None,
    ) -> State | None:
        """
        Evaluate ``df/du`` at ``(u, p, t)``, or return ``None`` when the problem
        has no Jacobian. In-place Jacobians fill ``out`` (an ``(n, n)`` buffer,
        allocated when omitted).
        """
        if self.f.jac is None:
            return None
        if self.f.inplace:
            J = square_zeros_like(u) if out is None else out
            cast(InPlaceFn, self.f.jac)(J, u, p, t)
            return J
        if out is not None:
            raise TypeError(
                f"Problem {self.name!r} has an out-of-place Jacobian; 'out' is not accepted."
            )
        return cast(OutOfPlaceFn, self.f.jac)(u, p, t)

    def remake(self, **changes: Any) -> ODEProblem:
        """Return a copy with the given fields replaced, validated anew."""
        return replace(self, **changes)

    def copy(self) -> ODEProblem:
        """Return a copy whose ``u0`` and ``mass_matrix`` share no storage with this one."""
        mm = self.mass_matrix
        return self.remake(
            u0=copy_state(self.u0),
            mass_matrix=None if mm is None else mm.clone(),
        )

    @override
    def __repr__(self) -> str:
        kind = "in-place" if self.f.inplace else "out-of-place"
        return (
            f"ODEProblem(name={self.name!r}, shape={shape_of(self.u0)}, {kind}, "
            f"tspan={self.tspan}, analytic={self.has_analytic}, "
            f"mass_matrix={self.mass_matrix is not None})"
        )
