import pytest

from grid import Grid
from engine import (
    build_schedule, EventKind, Animation, AnimationState, Timeline, RunStats,
    CancelToken, drive, resolve_speed, SPEED_PRESETS,
)
from tests.conftest import FakeClock


def cells(*coords):
    grid = Grid.create(6, 6)
    return [grid.cell(*c) for c in coords]


def recording_animation(events, log, stats=None, name="a"):
    return Animation(
        events,
        stats or RunStats(visited_count=3, path_length=2, elapsed_ms=1.5),
        on_visit=lambda coord: log.append((name, "visit", coord)),
        on_path=lambda coord: log.append((name, "path", coord)),
        on_complete=lambda s: log.append((name, "done", s)),
    )


def test_schedule_timing():
    trace = cells((1, 1), (1, 2), (2, 2))
    path = cells((1, 1), (1, 2))
    events = build_schedule(trace, path, step_delay_ms=10, path_delay_ms=40)
    assert [(e.kind, e.at_ms) for e in events] == [
        (EventKind.VISIT, 0), (EventKind.VISIT, 10), (EventKind.VISIT, 20),
        (EventKind.PATH, 30), (EventKind.PATH, 70),
        (EventKind.DONE, 70),
    ]
    assert [e.coord for e in events[:3]] == [(1, 1), (1, 2), (2, 2)]
    assert [e.index for e in events[3:5]] == [0, 1]


def test_schedule_without_path_finishes_after_exploration():
    events = build_schedule(cells((1, 1), (1, 2)), [], step_delay_ms=15)
    assert events[-1].kind is EventKind.DONE
    assert events[-1].at_ms == 30
    assert not any(e.kind is EventKind.PATH for e in events)


def test_path_reveal_pace_is_independent_of_speed():
    trace = cells((1, 1), (1, 2))
    path = cells((1, 1), (1, 2))
    slow = build_schedule(trace, path, step_delay_ms=100)
    fast = build_schedule(trace, path, step_delay_ms=1)
    gap = lambda evs: evs[3].at_ms - evs[2].at_ms
    assert gap(slow) == gap(fast) == 40


def test_animation_fires_only_due_events_in_order():
    log = []
    events = build_schedule(cells((1, 1), (1, 2), (2, 2)), cells((1, 1), (1, 2)), 10)
    anim = recording_animation(events, log)
    anim.start(1000)

    assert anim.advance(999) == 0
    assert anim.advance(1000) == 1
    assert anim.advance(1025) == 2
    assert [entry[1] for entry in log] == ["visit", "visit", "visit"]
    assert anim.next_due_ms() == 1030

    anim.advance(5000)
    kinds = [entry[1] for entry in log]
    assert kinds == ["visit", "visit", "visit", "path", "path", "done"]
    assert log[-1][2].path_length == 2
    assert anim.state is AnimationState.FINISHED
    assert anim.next_due_ms() is None
    assert anim.advance(9000) == 0


def test_cancelled_animation_delivers_nothing_more():
    log = []
    events = build_schedule(cells((1, 1), (1, 2), (2, 2)), [], 10)
    anim = recording_animation(events, log)
    anim.start(0)
    anim.advance(0)
    anim.cancel()
    assert anim.advance(10_000) == 0
    assert len(log) == 1
    assert anim.state is AnimationState.CANCELLED


def test_token_cancelled_from_a_callback_stops_the_batch():
    token = CancelToken()
    seen = []

    def on_visit(coord):
        seen.append(coord)
        token.cancel()

    events = build_schedule(cells((1, 1), (1, 2), (2, 2)), [], 0)
    anim = Animation(events, RunStats(), on_visit, lambda c: None, token=token)
    anim.start(0)
    assert anim.advance(100) == 1
    assert seen == [(1, 1)]


def test_timeline_waits_for_both_runs():
    log = []
    done = []
    short = build_schedule(cells((1, 1)), cells((1, 1)), 10)
    long = build_schedule(cells((1, 1), (1, 2), (2, 2), (3, 2)), cells((1, 1)), 10)
    timeline = Timeline(
        [recording_animation(short, log, name="left"), recording_animation(long, log, name="right")],
        on_all_done=lambda: done.append(True),
    )
    timeline.start(0)

    timeline.tick(10)
    assert ("left", "done") in [(n, k) for n, k, _ in log]
    assert timeline.is_active
    assert done == []

    timeline.tick(40)
    assert not timeline.is_active
    assert done == [True]
    timeline.tick(100)
    assert done == [True]


def test_timeline_runs_progress_independently():
    log = []
    a = build_schedule(cells((1, 1), (1, 2)), [], 10)
    b = build_schedule(cells((2, 2), (2, 3)), [], 25)
    timeline = Timeline([recording_animation(a, log, name="a"), recording_animation(b, log, name="b")])
    timeline.start(0)
    timeline.tick(10)
    visits = [(n, c) for n, k, c in log if k == "visit"]
    assert visits == [("a", (1, 1)), ("a", (1, 2)), ("b", (2, 2))]


def test_drive_plays_everything_with_fake_clock():
    clock = FakeClock(now=500)
    log = []
    events = build_schedule(cells((1, 1), (1, 2)), cells((1, 1), (1, 2)), 15)
    timeline = Timeline([recording_animation(events, log)])
    drive(timeline, clock=clock, sleep=clock.sleep)
    assert [entry[1] for entry in log] == ["visit", "visit", "path", "path", "done"]
    assert clock.now == pytest.approx(500 + 30 + 40)


def test_resolve_speed():
    assert resolve_speed("medium") == SPEED_PRESETS["medium"] == 15
    assert resolve_speed(7) == 7.0
    assert resolve_speed("12.5") == 12.5
    with pytest.raises(ValueError):
        resolve_speed(-1)
    with pytest.raises(ValueError):
        resolve_speed("ludicrous")


@pytest.mark.parametrize("speed", ["inf", "nan", float("inf"), "-inf", None, [15]])
def test_resolve_speed_rejects_non_finite_and_non_numbers(speed):
    with pytest.raises(ValueError):
        resolve_speed(speed)


def test_stats_to_dict():
    assert RunStats(4, 3, 1.234).to_dict() == {"visited": 4, "path_length": 3, "time_ms": 1.23}
