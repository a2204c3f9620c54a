"""Fog device model for distance- and energy-aware clustering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

import numpy as np

from .config import ElectionWeights
from .errors import ConfigurationError

DeviceName = Union[str, int]


@dataclass(eq=False)
class FogDevice:
    """A single edge/fog node.

    Position, energy, load and capacity are fixed at creation.  The cluster
    fields are written by a :class:`ClusterManager` during formation; a head
    holds references to its members (itself included) in ``members``.
    """

    name: DeviceName
    position: np.ndarray  # shape (2,)
    energy: float
    load: float
    capacity: int
    cluster_id: int | None = None
    is_head: bool = False
    members: list[FogDevice] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=float)
        if self.position.shape != (2,):
            raise ConfigurationError(
                f"{self.name}: position must be (x, y), got shape {self.position.shape}"
            )
        if not 0 <= self.energy <= 100:
            raise ConfigurationError(f"{self.name}: energy {self.energy!r} outside [0, 100]")
        if not 0 <= self.load <= 100:
            raise ConfigurationError(f"{self.name}: load {self.load!r} outside [0, 100]")
        if self.capacity <= 0:
            raise ConfigurationError(f"{self.name}: capacity must be positive")

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    @property
    def is_clustered(self) -> bool:
        return self.cluster_id is not None

    def distance_to(self, other: FogDevice) -> float:
        return float(np.linalg.norm(self.position - other.position))

    def score(self, mean_distance: float, weights: ElectionWeights) -> float:
        """Head election score; higher is better."""
        return (
            weights.alpha * self.energy
            - weights.beta * mean_distance
            - weights.gamma * self.load
        )

    def reset_cluster_state(self) -> None:
        self.cluster_id = None
        self.is_head = False
        self.members = []

    def __repr__(self) -> str:
        role = "head" if self.is_head else "member"
        return (
            f"FogDevice({self.name!r}, pos=({self.x:.2f}, {self.y:.2f}), "
            f"energy={self.energy:.2f}, load={self.load:.2f}, "
            f"capacity={self.capacity}, cluster={self.cluster_id}, {role})"
        )
