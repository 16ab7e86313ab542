"""Unit tests for SessionRegistry."""

import pytest

from clubsimulator import Instant, SessionRegistry

NINE = Instant.parse("09:00")


class TestSessionRegistry:

    def test_starts_empty(self):
        registry = SessionRegistry()
        assert len(registry) == 0
        assert "alice" not in registry

    def test_admit(self):
        registry = SessionRegistry()
        registry.admit("alice", NINE)
        assert "alice" in registry
        assert registry.arrived_at("alice") == NINE

    def test_admit_twice_raises(self):
        registry = SessionRegistry()
        registry.admit("alice", NINE)
        with pytest.raises(ValueError, match="already in the club"):
            registry.admit("alice", NINE)
        assert len(registry) == 1

    def test_discharge(self):
        registry = SessionRegistry()
        registry.admit("alice", NINE)
        assert registry.discharge("alice") is True
        assert "alice" not in registry
        assert registry.arrived_at("alice") is None

    def test_discharge_absent_returns_false(self):
        assert SessionRegistry().discharge("ghost") is False

    def test_iteration_follows_arrival_order(self):
        registry = SessionRegistry()
        for name in ("zed", "amy", "bob"):
            registry.admit(name, NINE)
        assert list(registry) == ["zed", "amy", "bob"]

    def test_sorted_names(self):
        registry = SessionRegistry()
        for name in ("client10", "client2", "client1"):
            registry.admit(name, NINE)
        assert registry.sorted_names() == ["client1", "client10", "client2"]
