"""
Frame-driven pulsing animation.

A bounded ramp (0.8 -> 1.2, then back to 0.8) advanced once per rendering
frame. The scheduler re-requests a frame after every tick until stopped.
"""

import asyncio
import functools
import itertools
from typing import Callable, Hashable, Optional, Protocol

from sitmap.utils.logger import get_logger

logger = get_logger(__name__)

FrameCallback = Callable[[], None]

DEFAULT_STEP = 0.02
DEFAULT_LOWER = 0.8
DEFAULT_UPPER = 1.2
# Rounding applied after each step so repeated float additions land on the bounds
_PRECISION = 9


class SchedulerError(Exception):
    """Raised when the animation scheduler is driven out of order."""
    pass


class PulseAnimation:
    """Repeating ramp between a lower and upper bound."""

    def __init__(
        self,
        step: float = DEFAULT_STEP,
        lower: float = DEFAULT_LOWER,
        upper: float = DEFAULT_UPPER,
        initial: float = 1.0,
    ):
        if step <= 0:
            raise ValueError("Animation step must be positive")
        if lower >= upper:
            raise ValueError("Animation lower bound must be below the upper bound")
        self.step = step
        self.lower = lower
        self.upper = upper
        self.value = initial

    def advance(self) -> float:
        """Advance one step; past the upper bound the ramp restarts at the lower bound."""
        nxt = round(self.value + self.step, _PRECISION)
        self.value = self.lower if nxt > self.upper else nxt
        return self.value


class FrameClock(Protocol):
    """Source of rendering frames."""

    def request_frame(self, callback: FrameCallback) -> Hashable: ...

    def cancel_frame(self, token: Hashable) -> None: ...


class ManualFrameClock:
    """
    Frame clock driven explicitly by advance().
    Used where the host delivers frames itself (tests, Streamlit fragment reruns).
    """

    def __init__(self):
        self._pending: dict[int, FrameCallback] = {}
        self._tokens = itertools.count()

    def request_frame(self, callback: FrameCallback) -> int:
        token = next(self._tokens)
        self._pending[token] = callback
        return token

    def cancel_frame(self, token: Hashable) -> None:
        self._pending.pop(token, None)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def advance(self, frames: int = 1) -> None:
        """Deliver the given number of frames."""
        for _ in range(frames):
            due, self._pending = self._pending, {}
            for callback in due.values():
                callback()


class AsyncioFrameClock:
    """Frame clock on an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None, interval: float = 1 / 60):
        self._loop = loop
        self.interval = interval

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def request_frame(self, callback: FrameCallback) -> asyncio.TimerHandle:
        return self.loop.call_later(self.interval, callback)

    def cancel_frame(self, token: Hashable) -> None:
        token.cancel()


class AnimationHandle:
    """Handle returned by AnimationScheduler.start()."""

    def __init__(self, scheduler: "AnimationScheduler", generation: int):
        self._scheduler = scheduler
        self._generation = generation

    @property
    def running(self) -> bool:
        return self._scheduler._is_current(self._generation)

    def stop(self) -> None:
        """
        Stop the run this handle was returned for.
        No tick is delivered after this returns; a no-op once a later run started.
        """
        self._scheduler._stop(self._generation)


class AnimationScheduler:
    """
    Drives a PulseAnimation from a frame clock.

    Args:
        clock: Frame source
        animation: Animation to advance (a default pulse if omitted)
        on_tick: Called with the new value after every frame
    """

    def __init__(
        self,
        clock: FrameClock,
        animation: Optional[PulseAnimation] = None,
        on_tick: Optional[Callable[[float], None]] = None,
    ):
        self._clock = clock
        self._animation = animation or PulseAnimation()
        self._on_tick = on_tick
        self._token: Optional[Hashable] = None
        self._running = False
        # Bumped by every start(); frames and handles from older runs are ignored
        self._generation = 0

    @property
    def value(self) -> float:
        """Current pulsing intensity."""
        return self._animation.value

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> AnimationHandle:
        """Start ticking. Raises SchedulerError if already running."""
        if self._running:
            raise SchedulerError("Animation already running")
        self._running = True
        self._generation += 1
        self._request(self._generation)
        logger.debug("Pulse animation started at %.2f", self.value)
        return AnimationHandle(self, self._generation)

    def _is_current(self, generation: int) -> bool:
        return self._running and generation == self._generation

    def _request(self, generation: int) -> None:
        self._token = self._clock.request_frame(functools.partial(self._tick, generation))

    def _tick(self, generation: int) -> None:
        if not self._is_current(generation):
            return
        value = self._animation.advance()
        if self._on_tick is not None:
            self._on_tick(value)
        # on_tick may have stopped or restarted the animation
        if self._is_current(generation):
            self._request(generation)

    def _stop(self, generation: int) -> None:
        if not self._is_current(generation):
            return
        self._running = False
        if self._token is not None:
            self._clock.cancel_frame(self._token)
            self._token = None
        logger.debug("Pulse animation stopped at %.2f", self.value)
