"""Device registry.

Holds the population of fog devices in insertion order.  The registry is
filled before cluster formation and only read afterwards.
"""

from __future__ import annotations

from typing import Iterator

import numpy as np

from ..core.device import DeviceName, FogDevice


class DeviceRegistry:
    """An ordered population of fog devices."""

    def __init__(self) -> None:
        self._devices: list[FogDevice] = []

    def add_device(self, device: FogDevice) -> FogDevice:
        """Append *device*.  Names are not checked for uniqueness."""
        self._devices.append(device)
        return device

    def add(
        self,
        name: DeviceName,
        position: tuple[float, float] | np.ndarray,
        energy: float,
        load: float,
        capacity: int,
    ) -> FogDevice:
        """Build a device from its attributes, append and return it."""
        return self.add_device(
            FogDevice(name=name, position=position, energy=energy,
                      load=load, capacity=capacity)
        )

    def all_devices(self) -> list[FogDevice]:
        return list(self._devices)

    def __len__(self) -> int:
        return len(self._devices)

    def __iter__(self) -> Iterator[FogDevice]:
        return iter(self._devices)

    # ── Factory helpers ──────────────────────────────────────────────

    @classmethod
    def random(
        cls,
        n: int,
        width: float = 1000.0,
        height: float = 1000.0,
        energy_range: tuple[float, float] = (70.0, 100.0),
        load_range: tuple[float, float] = (0.0, 50.0),
        capacity_range: tuple[int, int] = (1000, 3000),
        rng: np.random.Generator | None = None,
    ) -> DeviceRegistry:
        """Create a synthetic population of *n* devices in a rectangular area.

        Parameters
        ----------
        capacity_range:
            Half-open ``[low, high)`` integer range for device capacity.
        rng:
            Source of randomness.  Pass a seeded generator for a
            reproducible population.
        """
        rng = rng or np.random.default_rng()
        reg = cls()
        for i in range(n):
            reg.add(
                f"FogDevice_{i}",
                (rng.uniform(0, width), rng.uniform(0, height)),
                energy=float(rng.uniform(*energy_range)),
                load=float(rng.uniform(*load_range)),
                capacity=int(rng.integers(*capacity_range)),
            )
        return reg
