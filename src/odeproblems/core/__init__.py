"""Core problem building blocks."""

from odeproblems.core.checks import ProblemReport, check_problem
from odeproblems.core.config import PrecisionConfig, RandomConfig
from odeproblems.core.problem import ODEFunction, ODEProblem
from odeproblems.core.types import (
    AnalyticFn,
    InPlaceFn,
    JacobianFn,
    LogFn,
    OutOfPlaceFn,
    Params,
    RHSFn,
    State,
    Time,
)

__all__ = [
    "AnalyticFn",
    "InPlaceFn",
    "JacobianFn",
    "LogFn",
    "ODEFunction",
    "ODEProblem",
    "OutOfPlaceFn",
    "Params",
    "PrecisionConfig",
    "ProblemReport",
    "RHSFn",
    "RandomConfig",
    "State",
    "Time",
    "check_problem",
]
