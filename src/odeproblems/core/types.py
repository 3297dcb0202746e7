"""Shared type aliases for problem definitions."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

import numpy as np
from torch import Tensor

# A state is a plain number (float or mpmath scalar), a float64 tensor, or a
# numpy object array of mpmath numbers for arbitrary-precision problems.
State: TypeAlias = Tensor | np.ndarray | float | Any
Time: TypeAlias = float | Any
Params: TypeAlias = Mapping[str, float]

OutOfPlaceFn: TypeAlias = Callable[[State, Params | None, Time], State]
InPlaceFn: TypeAlias = Callable[[State, State, Params | None, Time], None]
RHSFn: TypeAlias = OutOfPlaceFn | InPlaceFn
JacobianFn: TypeAlias = OutOfPlaceFn | InPlaceFn
AnalyticFn: TypeAlias = Callable[[State, Params | None, Time], State]

LogFn: TypeAlias = Callable[[str, float], None]
