"""Configuration for cluster formation and head election."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .errors import ConfigurationError


@dataclass(frozen=True)
class ElectionWeights:
    """Weights of the head election score ``alpha*E - beta*d - gamma*L``."""

    alpha: float = 0.5
    beta: float = 0.3
    gamma: float = 0.2

    def __post_init__(self) -> None:
        for name in ("alpha", "beta", "gamma"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ConfigurationError(
                    f"weight {name} must be a finite non-negative number, got {value!r}"
                )
        if self.alpha + self.beta + self.gamma == 0:
            raise ConfigurationError("at least one election weight must be positive")


@dataclass(frozen=True)
class ClusteringConfig:
    radius: float = 250.0
    weights: ElectionWeights = field(default_factory=ElectionWeights)

    def __post_init__(self) -> None:
        if not math.isfinite(self.radius) or self.radius <= 0:
            raise ConfigurationError(
                f"radius must be a finite positive number, got {self.radius!r}"
            )
        if not isinstance(self.weights, ElectionWeights):
            raise ConfigurationError(
                f"weights must be ElectionWeights, got {type(self.weights).__name__}"
            )


DEFAULT_CONFIG = ClusteringConfig()
