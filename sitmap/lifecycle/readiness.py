"""
Readiness gate for the map surface.

The WebGL surface must not be constructed inside a zero-area container: the
graphics context never gets its device limits and fails irrecoverably. The
gate holds construction back until the container reports a non-zero size.
"""

from enum import Enum
from typing import Callable, Optional, Protocol

from sitmap.utils.logger import get_logger

logger = get_logger(__name__)

LayoutCallback = Callable[[int, int], None]


class ReadinessState(str, Enum):
    """Lifecycle of the map surface container."""
    UNINITIALIZED = "uninitialized"
    WAITING_FOR_LAYOUT = "waiting_for_layout"
    READY = "ready"


class ReadinessError(Exception):
    """Raised when the gate is driven out of order."""
    pass


class LayoutObservation(Protocol):
    def disconnect(self) -> None: ...


class LayoutContainer(Protocol):
    """The hosting area of the map surface."""

    def measure(self) -> tuple[int, int]: ...

    def observe(self, callback: LayoutCallback) -> LayoutObservation: ...


class _Subscription:
    def __init__(self, container: "ObservableContainer", callback: LayoutCallback):
        self._container = container
        self._callback = callback

    def disconnect(self) -> None:
        self._container._observers.discard(self._callback)


class ObservableContainer:
    """Container whose size can change; notifies observers on resize."""

    def __init__(self, width: int = 0, height: int = 0):
        self.width = width
        self.height = height
        self._observers: set[LayoutCallback] = set()

    def measure(self) -> tuple[int, int]:
        return self.width, self.height

    def observe(self, callback: LayoutCallback) -> _Subscription:
        self._observers.add(callback)
        return _Subscription(self, callback)

    def resize(self, width: int, height: int) -> None:
        """Change the size and notify every observer."""
        self.width = width
        self.height = height
        for callback in list(self._observers):
            callback(width, height)

    @property
    def observer_count(self) -> int:
        return len(self._observers)


class StaticContainer(ObservableContainer):
    """Container with a fixed, known size (e.g. a configured chart height)."""

    def resize(self, width: int, height: int) -> None:
        raise ReadinessError("StaticContainer cannot be resized")


class ReadinessGate:
    """
    Three-state machine guarding construction of the map surface.

    UNINITIALIZED -> READY when the container already has a size on mount,
    UNINITIALIZED -> WAITING_FOR_LAYOUT otherwise, then WAITING_FOR_LAYOUT ->
    READY on the first layout notification with a non-zero size. READY is
    terminal.
    """

    def __init__(self):
        self._state = ReadinessState.UNINITIALIZED
        self._observation: Optional[LayoutObservation] = None
        self._ready_callbacks: list[Callable[[], None]] = []

    @property
    def state(self) -> ReadinessState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is ReadinessState.READY

    @property
    def is_observing(self) -> bool:
        return self._observation is not None

    def on_ready(self, callback: Callable[[], None]) -> None:
        """Register a callback fired once on READY (immediately if already READY)."""
        if self.is_ready:
            callback()
        else:
            self._ready_callbacks.append(callback)

    def mount(self, container: LayoutContainer) -> ReadinessState:
        """
        Attach the gate to its container and run the first dimension check.

        Args:
            container: Hosting container to measure and observe

        Returns:
            The state after the check
        """
        if self._state is not ReadinessState.UNINITIALIZED:
            raise ReadinessError(f"Gate already mounted (state={self._state.value})")

        width, height = container.measure()
        if _has_area(width, height):
            self._become_ready()
            return self._state

        self._state = ReadinessState.WAITING_FOR_LAYOUT
        logger.info("Map container has no size yet (%sx%s); waiting for layout", width, height)
        self._observation = container.observe(self.dimensions_changed)
        return self._state

    def dimensions_changed(self, width: int, height: int) -> ReadinessState:
        """Re-check readiness after a layout notification."""
        if self._state is ReadinessState.WAITING_FOR_LAYOUT and _has_area(width, height):
            self._stop_observing()
            self._become_ready()
        return self._state

    def unmount(self) -> None:
        """Cancel any active observation. Safe to call repeatedly."""
        self._stop_observing()
        self._ready_callbacks.clear()

    def _stop_observing(self) -> None:
        if self._observation is not None:
            self._observation.disconnect()
            self._observation = None

    def _become_ready(self) -> None:
        self._state = ReadinessState.READY
        logger.info("Map container sized; surface ready")
        callbacks, self._ready_callbacks = self._ready_callbacks, []
        for callback in callbacks:
            callback()


def _has_area(width: int, height: int) -> bool:
    return width > 0 and height > 0
