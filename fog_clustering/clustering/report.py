"""Tabular views of a formed clustering for reporting layers."""

from __future__ import annotations

import pandas as pd

from .manager import ClusterManager
from .metrics import head_mean_distance

DEVICE_COLUMNS = ["name", "cluster", "role", "x", "y", "energy", "load", "capacity"]
CLUSTER_COLUMNS = ["cluster", "head", "size", "head_energy", "head_load", "avg_distance"]


def device_table(manager: ClusterManager) -> pd.DataFrame:
    """One row per device, in registry order."""
    manager.cluster_count()  # raises before formation
    rows = [
        {
            "name": d.name,
            "cluster": d.cluster_id,
            "role": "head" if d.is_head else "member",
            "x": d.x,
            "y": d.y,
            "energy": d.energy,
            "load": d.load,
            "capacity": d.capacity,
        }
        for d in manager.registry
    ]
    return pd.DataFrame(rows, columns=DEVICE_COLUMNS)


def cluster_table(manager: ClusterManager) -> pd.DataFrame:
    """One row per cluster, ordered by cluster id."""
    rows = [
        {
            "cluster": h.cluster_id,
            "head": h.name,
            "size": len(h.members),
            "head_energy": h.energy,
            "head_load": h.load,
            "avg_distance": head_mean_distance(h),
        }
        for h in manager.cluster_heads()
    ]
    return pd.DataFrame(rows, columns=CLUSTER_COLUMNS)
