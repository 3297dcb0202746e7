"""Seeded random draws for reproducible problem construction."""

import torch
from torch import Tensor

from odeproblems.core.config import RandomConfig


def make_generator(config: RandomConfig | None = None) -> torch.Generator:
    """Return a CPU generator seeded from ``config`` (seed 100 by default)."""
    config = config or RandomConfig()
    generator = torch.Generator()
    generator.manual_seed(config.seed)
    return generator


def uniform(*shape: int, generator: torch.Generator) -> Tensor:
    """Draw a float64 tensor of the given shape, uniform on [0, 1)."""
    return torch.rand(*shape, generator=generator, dtype=torch.float64)
