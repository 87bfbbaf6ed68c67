"""
scheduler.py — Animation Scheduler
===================================
Turns a finished search (trace + path) into a timed list of frame events
and plays them back against a clock.

Schedule layout for one run, times relative to the run's origin:

    VISIT  trace[i]   at  i * step_delay
    PATH   path[j]    at  len(trace) * step_delay + j * path_delay
    DONE              at  the last PATH time (or the reveal start if
                          the path is empty), always after it

State machine of an Animation:
    IDLE     →  start(origin)  →  PLAYING
    PLAYING  →  (DONE fired)   →  FINISHED
    any      →  cancel()       →  CANCELLED

Nothing here sleeps or spawns threads.  Callers either poll `tick(now)`
from their own loop (the web API does this on every state request) or
hand the Timeline to `drive()`, the one blocking loop provided.

Thread safety:
  Not thread-safe.  Every call must come from the same thread.
"""

import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence

from grid import Cell, Coord


# ---------------------------------------------------------------------------
# Speed presets (milliseconds per visited cell)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":    50,
    "medium":  15,
    "fast":    5,
    "instant": 0,
}

PATH_DELAY_MS = 40


def resolve_speed(speed) -> float:
    """Accept a preset name or a finite, non-negative number of milliseconds."""
    if isinstance(speed, str) and speed in SPEED_PRESETS:
        return float(SPEED_PRESETS[speed])
    try:
        value = float(speed)
    except (TypeError, ValueError):
        raise ValueError(f"Unknown speed: {speed!r}")
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"Speed must be a finite number >= 0, got {speed!r}")
    return value


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------
class EventKind(Enum):
    VISIT = "visit"
    PATH  = "path"
    DONE  = "done"


@dataclass(frozen=True)
class FrameEvent:
    at_ms:  float
    kind:   EventKind
    index:  int                    # position in trace / path; -1 for DONE
    coord:  Optional[Coord] = None


@dataclass(frozen=True)
class RunStats:
    """Summary shown once the path has been revealed."""
    visited_count: int   = 0
    path_length:   int   = 0       # cells on the path, 0 if unreached
    elapsed_ms:    float = 0.0     # wall time spent inside the search

    def to_dict(self) -> dict:
        return {
            "visited":     self.visited_count,
            "path_length": self.path_length,
            "time_ms":     round(self.elapsed_ms, 2),
        }


def build_schedule(
    trace: Sequence[Cell],
    path: Sequence[Cell],
    step_delay_ms: float,
    path_delay_ms: float = PATH_DELAY_MS,
) -> List[FrameEvent]:
    """Chronological event list; order within equal times is list order."""
    events = [
        FrameEvent(i * step_delay_ms, EventKind.VISIT, i, cell.coord)
        for i, cell in enumerate(trace)
    ]
    reveal_start = len(trace) * step_delay_ms
    events.extend(
        FrameEvent(reveal_start + j * path_delay_ms, EventKind.PATH, j, cell.coord)
        for j, cell in enumerate(path)
    )
    done_at = events[-1].at_ms if path else reveal_start
    events.append(FrameEvent(done_at, EventKind.DONE, -1))
    return events


# ---------------------------------------------------------------------------
# Cancellation
# ---------------------------------------------------------------------------
class CancelToken:
    __slots__ = ("cancelled",)

    def __init__(self):
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


# ---------------------------------------------------------------------------
# Animation: one schedule played against a clock
# ---------------------------------------------------------------------------
class AnimationState(Enum):
    IDLE      = "idle"
    PLAYING   = "playing"
    FINISHED  = "finished"
    CANCELLED = "cancelled"


class Animation:
    """
    Attributes:
        events      : The full schedule (never mutated).
        cursor      : Index of the next event to fire.
        stats       : Delivered to `on_complete` when DONE fires.
        on_visit    : callback(coord) per exploration frame.
        on_path     : callback(coord) per path-reveal frame.
        on_complete : callback(RunStats) once, at the very end.
    """

    def __init__(
        self,
        events: List[FrameEvent],
        stats: RunStats,
        on_visit: Callable[[Coord], None],
        on_path: Callable[[Coord], None],
        on_complete: Optional[Callable[[RunStats], None]] = None,
        token: Optional[CancelToken] = None,
    ):
        self.events:      List[FrameEvent] = events
        self.stats:       RunStats         = stats
        self.on_visit     = on_visit
        self.on_path      = on_path
        self.on_complete  = on_complete
        self.token:       CancelToken      = token or CancelToken()
        self.cursor:      int              = 0
        self.origin_ms:   float            = 0.0
        self.state:       AnimationState   = AnimationState.IDLE

    def start(self, origin_ms: float) -> None:
        self.origin_ms = origin_ms
        self.cursor    = 0
        self.state     = AnimationState.PLAYING

    def cancel(self) -> None:
        self.token.cancel()
        if self.state != AnimationState.FINISHED:
            self.state = AnimationState.CANCELLED

    def advance(self, now_ms: float) -> int:
        """Fire every event due by `now_ms`.  Returns how many fired."""
        fired = 0
        while self.state == AnimationState.PLAYING and self.cursor < len(self.events):
            event = self.events[self.cursor]
            if self.origin_ms + event.at_ms > now_ms:
                break
            if self.token.cancelled:
                self.state = AnimationState.CANCELLED
                break
            self.cursor += 1
            self._fire(event)
            fired += 1
        return fired

    def next_due_ms(self) -> Optional[float]:
        """Absolute time of the next pending event, None when nothing is left."""
        if self.state != AnimationState.PLAYING or self.cursor >= len(self.events):
            return None
        return self.origin_ms + self.events[self.cursor].at_ms

    @property
    def duration_ms(self) -> float:
        return self.events[-1].at_ms if self.events else 0.0

    @property
    def is_finished(self) -> bool:
        return self.state == AnimationState.FINISHED

    def _fire(self, event: FrameEvent) -> None:
        if event.kind is EventKind.VISIT:
            self.on_visit(event.coord)
        elif event.kind is EventKind.PATH:
            self.on_path(event.coord)
        else:
            self.state = AnimationState.FINISHED
            if self.on_complete:
                self.on_complete(self.stats)


# ---------------------------------------------------------------------------
# Timeline: one or two animations sharing an origin
# ---------------------------------------------------------------------------
class Timeline:
    """
    Drives one animation, or two in comparison mode, from a single origin.
    The animations never share a display grid; they only share the clock.
    `on_all_done` fires once, after the last of them finishes.
    """

    def __init__(
        self,
        animations: Optional[List[Animation]] = None,
        on_all_done: Optional[Callable[[], None]] = None,
    ):
        self.animations:  List[Animation] = list(animations or [])
        self.on_all_done  = on_all_done
        self.origin_ms:   float           = 0.0
        self._reported:   bool            = False

    def start(self, origin_ms: float) -> None:
        self.origin_ms = origin_ms
        self._reported = False
        for anim in self.animations:
            anim.start(origin_ms)

    def tick(self, now_ms: float) -> int:
        fired = sum(anim.advance(now_ms) for anim in self.animations)
        if not self._reported and self.animations and all(a.is_finished for a in self.animations):
            self._reported = True
            if self.on_all_done:
                self.on_all_done()
        return fired

    def cancel(self) -> None:
        for anim in self.animations:
            anim.cancel()

    def next_due_ms(self) -> Optional[float]:
        pending = [t for t in (a.next_due_ms() for a in self.animations) if t is not None]
        return min(pending) if pending else None

    @property
    def is_active(self) -> bool:
        return any(a.state == AnimationState.PLAYING for a in self.animations)


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


def drive(
    timeline: Timeline,
    clock: Callable[[], float] = monotonic_ms,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """
    Blocking driver: start the timeline now and sleep until each next
    event is due.  Returns once every animation finished or was cancelled.
    """
    timeline.start(clock())
    while True:
        timeline.tick(clock())
        due = timeline.next_due_ms()
        if due is None:
            return
        wait = due - clock()
        if wait > 0:
            sleep(wait / 1000.0)
