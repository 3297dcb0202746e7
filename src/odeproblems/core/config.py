"""Configuration dataclasses for catalog construction."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(kw_only=True)
class PrecisionConfig:
    """
    Configuration for arbitrary-precision problems.

    Attributes:
        prec_bits: Working precision, in bits, of the mpmath context used for
            big-float states and constants.
    """

    prec_bits: int = 256

    def __post_init__(self) -> None:
        if self.prec_bits < 53:
            raise ValueError(f"prec_bits must be >= 53, got {self.prec_bits}.")


@dataclass(kw_only=True)
class RandomConfig:
    """
    Configuration for randomly drawn initial states and matrices.

    Attributes:
        seed: Seed of the generator. Equal seeds give identical problems.
    """

    seed: int = 100

    def __post_init__(self) -> None:
        if self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}.")
