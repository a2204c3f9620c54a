"""Greedy distance- and energy-aware cluster formation.

Each round picks the most energetic unclustered device as seed, claims every
remaining device within ``radius`` of it, then elects a head from that member
set by weighted score.  Rounds repeat until every device is clustered.
"""

from __future__ import annotations

import enum
import logging

import numpy as np

from ..core.config import DEFAULT_CONFIG, ClusteringConfig, ElectionWeights
from ..core.device import FogDevice
from ..core.errors import IllegalStateError, UnassignedDeviceError
from ..simulation.registry import DeviceRegistry

logger = logging.getLogger(__name__)


class ClusterState(enum.Enum):
    UNFORMED = "unformed"
    FORMING = "forming"
    FORMED = "formed"


def mean_distances(devices: list[FogDevice]) -> np.ndarray:
    """Mean distance from each device to all the others (0 for a singleton)."""
    n = len(devices)
    if n <= 1:
        return np.zeros(n)
    pos = np.stack([d.position for d in devices])
    dists = np.linalg.norm(pos[:, None, :] - pos[None, :, :], axis=-1)
    return dists.sum(axis=1) / (n - 1)


def elect_head(members: list[FogDevice], weights: ElectionWeights) -> FogDevice:
    """Return the member with the highest score.

    Ties go to the member that appears first in *members*.
    """
    means = mean_distances(members)
    best = members[0]
    best_score = best.score(float(means[0]), weights)
    for dev, mean in zip(members[1:], means[1:]):
        s = dev.score(float(mean), weights)
        if s > best_score:
            best, best_score = dev, s
    return best


class ClusterManager:
    """Partitions a device registry into clusters with elected heads.

    A manager runs :meth:`form_clusters` exactly once.  Queries are only
    available after formation.  Not thread-safe.
    """

    def __init__(
        self,
        registry: DeviceRegistry | None = None,
        config: ClusteringConfig | None = None,
    ) -> None:
        self._registry = registry if registry is not None else DeviceRegistry()
        self._config = config if config is not None else DEFAULT_CONFIG
        self._heads: dict[int, FogDevice] = {}
        self._next_cluster_id = 1
        self._state = ClusterState.UNFORMED

    @property
    def registry(self) -> DeviceRegistry:
        return self._registry

    @property
    def config(self) -> ClusteringConfig:
        return self._config

    @property
    def state(self) -> ClusterState:
        return self._state

    @property
    def is_formed(self) -> bool:
        return self._state is ClusterState.FORMED

    def add_device(self, device: FogDevice) -> FogDevice:
        if self._state is not ClusterState.UNFORMED:
            raise IllegalStateError(
                f"cannot add {device.name!r}: clusters already {self._state.value}"
            )
        return self._registry.add_device(device)

    # ------------------------------------------------------------------
    # Formation
    # ------------------------------------------------------------------

    def form_clusters(self) -> dict[int, FogDevice]:
        """Partition the registry.  Returns ``{cluster_id: head}``."""
        if self._state is not ClusterState.UNFORMED:
            raise IllegalStateError(
                f"form_clusters() already called (state: {self._state.value})"
            )
        self._state = ClusterState.FORMING

        unclustered = self._registry.all_devices()
        for dev in unclustered:
            dev.reset_cluster_state()

        logger.info(
            "Forming clusters over %d devices (radius %.2f)",
            len(unclustered), self._config.radius,
        )
        while unclustered:
            self._form_one(unclustered)

        self._state = ClusterState.FORMED
        logger.info(
            "Formed %d clusters from %d devices",
            len(self._heads), len(self._registry),
        )
        return dict(self._heads)

    def _form_one(self, unclustered: list[FogDevice]) -> None:
        """Run one round; claimed devices are removed from *unclustered*."""
        cid = self._next_cluster_id
        self._next_cluster_id += 1

        # max() keeps the first of equal maxima.
        seed = max(unclustered, key=lambda d: d.energy)
        unclustered.remove(seed)
        seed.cluster_id = cid

        members = [seed]
        remaining: list[FogDevice] = []
        for dev in unclustered:
            distance = seed.distance_to(dev)
            if distance <= self._config.radius:
                dev.cluster_id = cid
                members.append(dev)
                logger.debug(
                    "Added %s to cluster %d (distance: %.2f)", dev.name, cid, distance
                )
            else:
                remaining.append(dev)
        unclustered[:] = remaining

        head = elect_head(members, self._config.weights)
        for dev in members:
            dev.is_head = dev is head
            dev.members = []
        head.members = list(members)
        self._heads[cid] = head
        logger.info(
            "Cluster %d formed: %s (head) with %d members (seed %s)",
            cid, head.name, len(members) - 1, seed.name,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _require_formed(self) -> None:
        if self._state is not ClusterState.FORMED:
            raise IllegalStateError(
                f"clusters not formed yet (state: {self._state.value})"
            )

    def cluster_count(self) -> int:
        self._require_formed()
        return len(self._heads)

    def cluster_heads(self) -> list[FogDevice]:
        """Elected heads ordered by cluster id."""
        self._require_formed()
        return [self._heads[cid] for cid in sorted(self._heads)]

    def clusters(self) -> dict[int, FogDevice]:
        self._require_formed()
        return dict(self._heads)

    def head_for(self, device: FogDevice) -> FogDevice:
        self._require_formed()
        head = self._heads.get(device.cluster_id)
        if head is None or not any(m is device for m in head.members):
            raise UnassignedDeviceError(
                f"{device.name!r} is not assigned to a cluster of this manager"
            )
        return head

    def members_of(self, cluster_id: int) -> list[FogDevice]:
        self._require_formed()
        try:
            return list(self._heads[cluster_id].members)
        except KeyError:
            raise UnassignedDeviceError(f"no cluster with id {cluster_id}") from None
