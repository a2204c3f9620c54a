"""Tests for the fog device model and configuration."""

from __future__ import annotations

import math

import numpy as np
import pytest

from fog_clustering.core.config import ClusteringConfig, ElectionWeights, DEFAULT_CONFIG
from fog_clustering.core.device import FogDevice
from fog_clustering.core.errors import ConfigurationError, ClusteringError


def _make_device(name="d", pos=(0, 0), energy=80.0, load=10.0, capacity=1000) -> FogDevice:
    return FogDevice(name=name, position=np.array(pos, dtype=float),
                     energy=energy, load=load, capacity=capacity)


class TestFogDevice:
    def test_starts_unassigned(self):
        d = _make_device()
        assert d.cluster_id is None
        assert not d.is_head
        assert d.members == []
        assert not d.is_clustered

    def test_position_coerced_to_array(self):
        d = FogDevice("d", (3, 4), energy=50, load=0, capacity=1)
        assert isinstance(d.position, np.ndarray)
        assert d.x == 3.0
        assert d.y == 4.0

    def test_distance(self):
        a = _make_device("a", (0, 0))
        b = _make_device("b", (3, 4))
        assert abs(a.distance_to(b) - 5.0) < 1e-9
        assert abs(b.distance_to(a) - 5.0) < 1e-9

    def test_score_uses_weights(self):
        d = _make_device(energy=90, load=10)
        w = ElectionWeights()
        assert d.score(10.0, w) == pytest.approx(0.5 * 90 - 0.3 * 10 - 0.2 * 10)

    def test_equal_attributes_are_distinct_devices(self):
        a = _make_device("x")
        b = _make_device("x")
        assert a != b
        assert [a, b].index(b) == 1

    def test_reset_cluster_state(self):
        d = _make_device()
        d.cluster_id = 3
        d.is_head = True
        d.members = [d]
        d.reset_cluster_state()
        assert d.cluster_id is None
        assert not d.is_head
        assert d.members == []

    @pytest.mark.parametrize("field,value", [
        ("energy", 100.5), ("energy", -1), ("load", 101), ("load", -0.1),
        ("capacity", 0),
    ])
    def test_rejects_out_of_range_attributes(self, field, value):
        kwargs = {"energy": 50.0, "load": 10.0, "capacity": 100}
        kwargs[field] = value
        with pytest.raises(ConfigurationError):
            FogDevice("bad", (0, 0), **kwargs)

    def test_rejects_bad_position_shape(self):
        with pytest.raises(ConfigurationError):
            FogDevice("bad", (0, 0, 0), energy=50, load=10, capacity=1)


class TestConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.radius == 250.0
        w = DEFAULT_CONFIG.weights
        assert (w.alpha, w.beta, w.gamma) == (0.5, 0.3, 0.2)

    @pytest.mark.parametrize("radius", [0.0, -10.0, math.inf, math.nan])
    def test_rejects_bad_radius(self, radius):
        with pytest.raises(ConfigurationError):
            ClusteringConfig(radius=radius)

    @pytest.mark.parametrize("weights", [(-0.1, 0.3, 0.2), (0.5, math.nan, 0.2), (0, 0, 0)])
    def test_rejects_bad_weights(self, weights):
        with pytest.raises(ConfigurationError):
            ElectionWeights(*weights)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            ClusteringConfig(radius=-1)
        assert issubclass(ConfigurationError, ClusteringError)

    def test_rejects_non_weights_object(self):
        with pytest.raises(ConfigurationError):
            ClusteringConfig(weights=(0.5, 0.3, 0.2))  # type: ignore[arg-type]
