"""Derived statistics over a formed clustering.

Scores are not clamped: the efficiency score is meant to land roughly in
``[0, 100]`` but can exceed it or go negative for lopsided partitions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..core.device import FogDevice
from .manager import ClusterManager


def balance_score(sizes: Sequence[int], population: int) -> float:
    """Mean of ``1 - |s - ideal| / ideal`` over clusters, times 50.

    ``ideal`` is ``population // len(sizes)``.  Returns 0 when there are no
    clusters.
    """
    k = len(sizes)
    if k == 0:
        return 0.0
    ideal = population // k
    if ideal == 0:
        return 0.0
    contributions = [1 - abs(s - ideal) / ideal for s in sizes]
    return float(np.mean(contributions)) * 50


def energy_score(heads: Sequence[FogDevice]) -> float:
    """Mean head energy times 0.5; 0 without heads."""
    if not heads:
        return 0.0
    return float(np.mean([h.energy for h in heads])) * 0.5


def efficiency_score(manager: ClusterManager) -> float:
    heads = manager.cluster_heads()
    sizes = [len(h.members) for h in heads]
    return balance_score(sizes, len(manager.registry)) + energy_score(heads)


def head_mean_distance(head: FogDevice) -> float:
    """Mean distance from *head* to the other members of its cluster."""
    others = [m for m in head.members if m is not head]
    if not others:
        return 0.0
    return float(np.mean([head.distance_to(m) for m in others]))


@dataclass(frozen=True)
class ClusterSummary:
    device_count: int
    cluster_count: int
    avg_cluster_size: float
    largest_cluster: int
    smallest_cluster: int
    avg_energy: float
    avg_load: float
    balance_score: float
    energy_score: float

    @property
    def efficiency_score(self) -> float:
        return self.balance_score + self.energy_score


def summarize(manager: ClusterManager) -> ClusterSummary:
    """Collect population and cluster statistics in one pass."""
    devices = manager.registry.all_devices()
    heads = manager.cluster_heads()
    sizes = [len(h.members) for h in heads]
    n, k = len(devices), len(heads)
    return ClusterSummary(
        device_count=n,
        cluster_count=k,
        avg_cluster_size=n / k if k else 0.0,
        largest_cluster=max(sizes, default=0),
        smallest_cluster=min(sizes, default=0),
        avg_energy=float(np.mean([d.energy for d in devices])) if devices else 0.0,
        avg_load=float(np.mean([d.load for d in devices])) if devices else 0.0,
        balance_score=balance_score(sizes, n),
        energy_score=energy_score(heads),
    )
