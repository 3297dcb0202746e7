"""odeproblems: benchmark ODE initial-value problems for solver test suites."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("odeproblems")
except PackageNotFoundError:
    __version__ = "0.0.0"
