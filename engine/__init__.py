"""
engine/
-------
Run, schedule and play back searches.

    from engine import Visualizer, Recorder, compare
    from engine import build_schedule, Animation, Timeline, drive
"""

from engine.scheduler import (
    SPEED_PRESETS, PATH_DELAY_MS, resolve_speed,
    EventKind, FrameEvent, RunStats, build_schedule,
    CancelToken, AnimationState, Animation, Timeline, drive, monotonic_ms,
)
from engine.recorder import Recorder, RunRecord, ComparisonResult, compare
from engine.session  import Visualizer

__all__ = [
    "SPEED_PRESETS",
    "PATH_DELAY_MS",
    "resolve_speed",
    "EventKind",
    "FrameEvent",
    "RunStats",
    "build_schedule",
    "CancelToken",
    "AnimationState",
    "Animation",
    "Timeline",
    "drive",
    "monotonic_ms",
    "Recorder",
    "RunRecord",
    "ComparisonResult",
    "compare",
    "Visualizer",
]
