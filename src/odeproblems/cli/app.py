"""Typer CLI application for odeproblems."""

from __future__ import annotations

from typing import Annotated, Any

import mpmath
import numpy as np
from rich.console import Console
from rich.markup import escape
from torch import Tensor
from typer import Argument, Exit, Typer

import odeproblems
from odeproblems.catalog import ProblemName, get_problem, list_problems
from odeproblems.core import ODEProblem, check_problem
from odeproblems.lib.arrays import numel, shape_of

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()

_MAX_SHOWN = 8


@app.callback()
def main() -> None:
    """odeproblems — benchmark ODE initial-value problems for solver test suites."""


def _fmt_number(v: Any) -> str:
    if isinstance(v, float | int):
        return f"{v:.6g}"
    return mpmath.nstr(v, 12)


def _fmt_state(u: Any) -> str:
    if not shape_of(u):
        return _fmt_number(u)
    if numel(u) > _MAX_SHOWN:
        return f"<{'x'.join(map(str, shape_of(u)))} values>"
    values = u.reshape(-1).tolist() if isinstance(u, Tensor) else list(np.ravel(u))
    return "[" + ", ".join(_fmt_number(v) for v in values) + "]"


def _kind(problem: ODEProblem) -> str:
    return "in-place" if problem.inplace else "out-of-place"


def _resolve(name: str) -> ODEProblem:
    try:
        return get_problem(name)
    except KeyError:
        _console.print(f"[bold red]Error:[/] [bold]{name!r}[/] is not a catalog problem.")
        _console.print("[dim]Run 'odeproblems list' to see all problems.[/]")
        raise Exit(code=2) from None


@app.command("list")
def list_() -> None:
    """List every problem in the catalog."""
    _console.print()
    _console.print(f"[bold cyan]●[/]  odeproblems v{odeproblems.__version__}")
    _console.print("[dim]│[/]")
    for member in ProblemName:
        problem = member.problem
        shape = "x".join(map(str, shape_of(problem.u0))) or "scalar"
        traits = [shape, _kind(problem)]
        if problem.has_analytic:
            traits.append("analytic")
        if problem.has_jacobian:
            traits.append("jacobian")
        if problem.mass_matrix is not None:
            traits.append("mass matrix")
        traits.append(f"tspan ({_fmt_number(problem.t0)}, {_fmt_number(problem.t1)})")

        _console.print(f"[dim]│[/]  [bold cyan]{problem.name:<30}[/] [bold]{member.label}[/]")
        _console.print(f"[dim]│[/]  {' ' * 30} [dim]{' · '.join(traits)}[/]")
        _console.print("[dim]│[/]")
    _console.print()


@app.command()
def show(
    name: Annotated[str, Argument(help="Catalog name, e.g. prob_ode_rober")],
) -> None:
    """Show one problem and its derivative at the initial point."""
    problem = _resolve(name)

    _console.print()
    _console.print(f"[bold cyan]◆[/]  {problem.name}")
    _console.print("[dim]│[/]")
    _console.print(f"[dim]│[/]  {escape(problem.description)}")
    _console.print("[dim]│[/]")
    _console.print(f"[dim]│[/]  [bold]rhs[/]        {_kind(problem)}")
    tspan = f"({_fmt_number(problem.t0)}, {_fmt_number(problem.t1)})"
    _console.print(f"[dim]│[/]  [bold]tspan[/]      {tspan}")
    _console.print(f"[dim]│[/]  [bold]u0[/]         {_fmt_state(problem.u0)}")
    if problem.p is not None:
        params = ", ".join(f"{k}={_fmt_number(v)}" for k, v in problem.p.items())
        _console.print(f"[dim]│[/]  [bold]p[/]          {params}")
    if problem.mass_matrix is not None:
        _console.print(f"[dim]│[/]  [bold]mass matrix[/] {_fmt_state(problem.mass_matrix)}")

    du = problem.evaluate_derivative(problem.u0, problem.p, problem.t0)
    _console.print(f"[dim]│[/]  [bold]f(u0)[/]      {_fmt_state(du)}")
    _console.print()


@app.command()
def check(
    names: Annotated[
        list[str] | None,
        Argument(help="Problems to check; all problems when omitted.", show_default=False),
    ] = None,
) -> None:
    """Verify shape, finiteness and analytic consistency at the initial point."""
    problems = [_resolve(n) for n in names] if names else list_problems()

    failed = 0
    _console.print()
    for problem in problems:
        report = check_problem(problem)
        if report.passed:
            _console.print(f"[bold green]◇[/]  {problem.name}")
            continue
        failed += 1
        _console.print(f"[bold red]✗[/]  {problem.name}")
        for failure in report.failures:
            _console.print(f"[dim]│[/]  [red]{failure}[/]")

    _console.print()
    if failed:
        _console.print(f"[bold red]●[/]  {failed} of {len(problems)} problems failed.")
        raise Exit(code=1)
    _console.print(f"[bold cyan]●[/]  All {len(problems)} problems passed.")
