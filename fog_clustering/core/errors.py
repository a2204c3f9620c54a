"""Exception types raised by the clustering engine."""

from __future__ import annotations


class ClusteringError(Exception):
    """Base class for all clustering errors."""


class ConfigurationError(ClusteringError, ValueError):
    """Invalid radius, weights or device attributes, raised at construction."""


class IllegalStateError(ClusteringError, RuntimeError):
    """Operation not allowed in the manager's current state."""


class UnassignedDeviceError(ClusteringError, LookupError):
    """The device does not belong to any cluster of this manager."""
