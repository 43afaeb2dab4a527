"""Tests for the map surface readiness gate."""

import pytest

from sitmap.lifecycle.readiness import (
    ObservableContainer,
    ReadinessError,
    ReadinessGate,
    ReadinessState,
    StaticContainer,
)


class TestReadinessGate:
    """Test ReadinessGate transitions."""

    def test_initial_state(self):
        gate = ReadinessGate()
        assert gate.state is ReadinessState.UNINITIALIZED
        assert gate.is_ready is False

    def test_sized_container_is_ready_on_mount(self):
        container = ObservableContainer(800, 600)
        gate = ReadinessGate()

        assert gate.mount(container) is ReadinessState.READY
        assert gate.is_ready
        assert container.observer_count == 0

    def test_zero_size_waits_for_layout(self):
        container = ObservableContainer(0, 0)
        gate = ReadinessGate()

        assert gate.mount(container) is ReadinessState.WAITING_FOR_LAYOUT
        assert gate.is_observing
        assert container.observer_count == 1

    def test_one_zero_dimension_is_not_ready(self):
        gate = ReadinessGate()
        assert gate.mount(ObservableContainer(800, 0)) is ReadinessState.WAITING_FOR_LAYOUT

    def test_layout_with_size_makes_ready_and_stops_observing(self):
        container = ObservableContainer(0, 0)
        gate = ReadinessGate()
        gate.mount(container)

        container.resize(0, 300)
        assert gate.state is ReadinessState.WAITING_FOR_LAYOUT

        container.resize(400, 300)
        assert gate.state is ReadinessState.READY
        assert not gate.is_observing
        assert container.observer_count == 0

    def test_ready_is_terminal(self):
        container = ObservableContainer(0, 0)
        gate = ReadinessGate()
        gate.mount(container)
        container.resize(400, 300)

        assert gate.dimensions_changed(0, 0) is ReadinessState.READY
        container.resize(0, 0)
        assert gate.is_ready

    def test_unmount_cancels_observation(self):
        container = ObservableContainer(0, 0)
        gate = ReadinessGate()
        gate.mount(container)

        gate.unmount()
        container.resize(400, 300)

        assert container.observer_count == 0
        assert gate.state is ReadinessState.WAITING_FOR_LAYOUT
        gate.unmount()

    def test_double_mount_raises(self):
        gate = ReadinessGate()
        gate.mount(StaticContainer(10, 10))
        with pytest.raises(ReadinessError):
            gate.mount(StaticContainer(10, 10))

    def test_on_ready_callbacks_fire_once(self):
        container = ObservableContainer(0, 0)
        gate = ReadinessGate()
        calls = []
        gate.on_ready(lambda: calls.append("early"))
        gate.mount(container)

        container.resize(100, 100)
        gate.dimensions_changed(200, 200)
        gate.on_ready(lambda: calls.append("late"))

        assert calls == ["early", "late"]


class TestContainers:
    """Test container helpers."""

    def test_static_container_cannot_resize(self):
        container = StaticContainer(100, 50)
        assert container.measure() == (100, 50)
        with pytest.raises(ReadinessError):
            container.resize(0, 0)
