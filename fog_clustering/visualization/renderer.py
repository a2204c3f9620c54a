"""Matplotlib-based 2D visualization of formed fog clusters."""

from __future__ import annotations

from typing import Any

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.colors as mcolors

from ..clustering.manager import ClusterManager


class ClusterRenderer:
    """Renders devices colored by cluster, with heads highlighted."""

    def __init__(self, manager: ClusterManager) -> None:
        self.manager = manager

    def _cluster_colors(self) -> dict[int, str]:
        tab_colors = list(mcolors.TABLEAU_COLORS.values())
        return {
            cid: tab_colors[i % len(tab_colors)]
            for i, cid in enumerate(sorted(self.manager.clusters()))
        }

    def render(
        self,
        *,
        title: str = "Fog Clusters",
        show_spokes: bool = True,
        show_radius: bool = False,
        show_names: bool = False,
        ax: Any = None,
    ) -> Any:
        """Draw members as dots and heads as stars, one color per cluster.

        Parameters
        ----------
        show_spokes:
            Draw a line from every member to its head.
        show_radius:
            Draw the formation radius around each head.  Heads are elected
            after the scan, so members may fall outside this circle.
        """
        if ax is None:
            _fig, ax = plt.subplots(1, 1, figsize=(8, 8))

        colors = self._cluster_colors()
        radius = self.manager.config.radius

        for head in self.manager.cluster_heads():
            color = colors[head.cluster_id]
            others = [m for m in head.members if m is not head]

            if show_spokes:
                for m in others:
                    ax.plot([head.x, m.x], [head.y, m.y],
                            color=color, linewidth=0.5, alpha=0.5, zorder=1)
            if show_radius:
                ax.add_patch(plt.Circle((head.x, head.y), radius, color=color,
                                        fill=False, linestyle="--", alpha=0.4))
            if others:
                pos = np.stack([m.position for m in others])
                ax.scatter(pos[:, 0], pos[:, 1], c=color, s=60,
                           edgecolors="black", linewidths=0.5, zorder=2)
            ax.scatter([head.x], [head.y], c=color, s=220, marker="*",
                       edgecolors="black", linewidths=0.8, zorder=3,
                       label=f"Cluster {head.cluster_id}")

        if show_names:
            for dev in self.manager.registry:
                ax.annotate(
                    str(dev.name), (dev.x, dev.y),
                    textcoords="offset points", xytext=(5, 5),
                    fontsize=6, color="gray",
                )

        if colors:
            ax.legend(loc="upper right", fontsize=8)
        ax.set_title(title)
        ax.set_aspect("equal")
        return ax
