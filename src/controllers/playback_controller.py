"""
Step playback controller.

Explicit state machine over a precomputed step sequence, replacing the
canvas timers. The controller itself never sleeps: something calls tick()
on a schedule. PlaybackRunner is that something for asyncio callers, with
an injectable sleep so tests can drive it without real time passing.

States:
- IDLE: sequence loaded, never played
- PLAYING: tick() advances one step
- PAUSED: pause(), reset(), or the last step was reached while playing

Transitions:
- play(): IDLE/PAUSED -> PLAYING (restarts from 0 when at the last step)
- pause(): PLAYING -> PAUSED
- next_step()/prev_step()/seek(): move position, state unchanged
- reset(): position 0, PAUSED
- load(): new sequence, position 0, IDLE
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, List, Optional

from models.animation_step import AnimationStep
from models.enums import PlaybackState, LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.PLAYBACK)

Listener = Callable[["PlaybackController"], None]


class PlaybackController:
    """
    Position + play/pause state over an immutable step list

    Usage:
        controller = PlaybackController(StepSequencer.generate([5, 3, 8]))
        controller.play()
        while controller.state == PlaybackState.PLAYING:
            controller.tick()          # caller owns the timing
        controller.current_step.is_complete  # True
    """

    def __init__(self, steps: Optional[List[AnimationStep]] = None) -> None:
        self._steps: List[AnimationStep] = list(steps or [])
        self._position: int = 0
        self._state: PlaybackState = PlaybackState.IDLE
        self._listeners: List[Listener] = []

    # ============================================================
    # Properties
    # ============================================================

    @property
    def steps(self) -> List[AnimationStep]:
        return list(self._steps)

    @property
    def position(self) -> int:
        return self._position

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def status(self) -> PlaybackState:
        """State for display: PAUSED at the last step reads as COMPLETE"""
        if self._state == PlaybackState.PAUSED and self._steps and self.is_at_end:
            return PlaybackState.COMPLETE
        return self._state

    @property
    def last_index(self) -> int:
        return max(len(self._steps) - 1, 0)

    @property
    def is_at_end(self) -> bool:
        return self._position >= self.last_index

    @property
    def current_step(self) -> Optional[AnimationStep]:
        if not self._steps:
            return None
        return self._steps[self._position]

    @property
    def progress(self) -> float:
        """Fraction of the sequence shown, 0.0 - 1.0"""
        if len(self._steps) <= 1:
            return 1.0 if self._steps else 0.0
        return self._position / self.last_index

    # ============================================================
    # Listeners
    # ============================================================

    def add_listener(self, listener: Listener) -> None:
        """Called with the controller after every position or state change"""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _set(self, position: Optional[int] = None, state: Optional[PlaybackState] = None) -> None:
        changed = False
        if position is not None and position != self._position:
            self._position = position
            changed = True
        if state is not None and state != self._state:
            log.debug(f"Playback {self._state.name} -> {state.name}", position=self._position)
            self._state = state
            changed = True
        if changed:
            self._notify()

    # ============================================================
    # Sequence
    # ============================================================

    def load(self, steps: List[AnimationStep]) -> None:
        """Replace the sequence (after regeneration), back to IDLE at 0"""
        self._steps = list(steps)
        self._position = 0
        self._state = PlaybackState.IDLE
        log.debug(f"Loaded {len(self._steps)} steps")
        self._notify()

    # ============================================================
    # Playback Control
    # ============================================================

    def play(self) -> bool:
        """
        Start playing.

        Returns:
            True if now PLAYING, False if nothing is loaded or already playing
        """
        if not self._steps:
            log.warn("No steps loaded")
            return False

        if self._state == PlaybackState.PLAYING:
            log.warn("Already playing")
            return False

        position = 0 if self.is_at_end else self._position
        self._set(position=position, state=PlaybackState.PLAYING)
        return True

    def pause(self) -> bool:
        if self._state != PlaybackState.PLAYING:
            return False
        self._set(state=PlaybackState.PAUSED)
        return True

    def toggle(self) -> bool:
        """Play/pause toggle. Returns True when the controller is now playing."""
        if self._state == PlaybackState.PLAYING:
            self.pause()
            return False
        return self.play()

    def reset(self) -> None:
        self._set(position=0, state=PlaybackState.PAUSED)

    def tick(self) -> Optional[AnimationStep]:
        """
        Advance one step when PLAYING.

        Reaching the last step pauses playback.
        """
        if self._state != PlaybackState.PLAYING:
            return self.current_step

        if not self.is_at_end:
            self._set(position=self._position + 1)

        if self.is_at_end:
            log.debug("Reached last step")
            self._set(state=PlaybackState.PAUSED)

        return self.current_step

    # ============================================================
    # Step Navigation
    # ============================================================

    def next_step(self) -> Optional[AnimationStep]:
        return self.seek(self._position + 1)

    def prev_step(self) -> Optional[AnimationStep]:
        return self.seek(self._position - 1)

    def seek(self, index: int) -> Optional[AnimationStep]:
        """Jump to index, clamped to [0, last]"""
        self._set(position=min(max(int(index), 0), self.last_index))
        return self.current_step

    def snapshot(self) -> Dict[str, Any]:
        step = self.current_step
        return {
            "state": self.status.name,
            "position": self._position,
            "total_steps": len(self._steps),
            "progress": round(self.progress, 4),
            "current_step": step.to_dict() if step else None,
        }


class PlaybackRunner:
    """
    Asyncio driver that ticks a PlaybackController on a fixed interval.

    The loop sleeps first and then ticks, so each step stays on screen for
    one interval. It ends by itself once the controller leaves PLAYING.

    Args:
        controller: Controller to drive
        interval_ms: Time between steps (normally the sequence speed)
        sleep: Awaitable sleep(seconds); inject a fake clock in tests
    """

    def __init__(
        self,
        controller: PlaybackController,
        interval_ms: int,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self.controller = controller
        self.interval_ms = interval_ms
        self._sleep = sleep
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> bool:
        if self.running:
            log.warn("Runner already running")
            return False

        if not self.controller.play() and self.controller.state != PlaybackState.PLAYING:
            return False

        log.info(f"Starting playback: {self.interval_ms} ms/step")
        self._task = asyncio.create_task(self._playback_loop())
        return True

    async def stop(self) -> None:
        """Pause the controller and cancel the loop"""
        self.controller.pause()

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        log.debug("Playback stopped")

    async def wait(self) -> None:
        """Wait until the loop ends (last step reached or stopped)"""
        if self._task:
            await self._task

    async def _playback_loop(self) -> None:
        delay = self.interval_ms / 1000.0

        try:
            while self.controller.state == PlaybackState.PLAYING:
                await self._sleep(delay)
                self.controller.tick()
        except asyncio.CancelledError:
            log.debug("Playback loop cancelled")
