"""
Lifecycle package for sitmap.
Readiness gating and frame-driven animation for the map surface.
"""

from sitmap.lifecycle.animation import (
    AnimationHandle,
    AnimationScheduler,
    AsyncioFrameClock,
    ManualFrameClock,
    PulseAnimation,
    SchedulerError,
)
from sitmap.lifecycle.readiness import (
    ObservableContainer,
    ReadinessError,
    ReadinessGate,
    ReadinessState,
    StaticContainer,
)

__all__ = [
    "AnimationHandle",
    "AnimationScheduler",
    "AsyncioFrameClock",
    "ManualFrameClock",
    "PulseAnimation",
    "SchedulerError",
    "ObservableContainer",
    "ReadinessError",
    "ReadinessGate",
    "ReadinessState",
    "StaticContainer",
]
