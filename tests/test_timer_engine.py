"""Pure timer transitions"""
import pytest

from app.features.timer import engine
from app.features.timer.domain import Phase, TimerState


def run_ticks(state: TimerState, count: int):
    ended = []
    for _ in range(count):
        state, phase = engine.tick(state)
        if phase is not None:
            ended.append(phase)
    return state, ended


def test_initial_state_is_paused_study():
    state = TimerState.initial(5, 3)

    assert state.phase is Phase.STUDY
    assert state.remaining_seconds == 5
    assert state.running is False


def test_remaining_cannot_exceed_phase_duration():
    with pytest.raises(ValueError):
        TimerState(phase=Phase.BREAK, remaining_seconds=10, study_duration_seconds=20, break_duration_seconds=5)


def test_study_then_break_cycle():
    state = engine.start(TimerState.initial(5, 3))

    state, ended = run_ticks(state, 5)
    assert state.phase is Phase.BREAK
    assert state.remaining_seconds == 3
    assert ended == [Phase.STUDY]

    state, ended = run_ticks(state, 3)
    assert state.phase is Phase.STUDY
    assert state.remaining_seconds == 5
    assert ended == [Phase.BREAK]
    assert state.running is True


@pytest.mark.parametrize("duration", [1, 2, 7, 60])
def test_running_for_duration_transitions_exactly_once(duration):
    state = engine.start(TimerState.initial(duration, 10_000))

    state, ended = run_ticks(state, duration)

    assert ended == [Phase.STUDY]
    assert state.phase is Phase.BREAK


def test_tick_while_paused_changes_nothing():
    state = TimerState.initial(5, 3)

    ticked, ended = engine.tick(state)

    assert ticked == state
    assert ended is None


def test_start_is_noop_when_running():
    state = engine.start(TimerState.initial(5, 3))
    assert engine.start(state) is state


def test_pause_freezes_remaining():
    state = engine.start(TimerState.initial(5, 3))
    state, _ = run_ticks(state, 2)

    paused = engine.pause(state)
    after, _ = run_ticks(paused, 4)

    assert after.remaining_seconds == 3
    assert after.running is False


@pytest.mark.parametrize("ticks", [0, 3, 5, 6, 8])
def test_reset_always_returns_to_paused_study(ticks):
    state = engine.start(TimerState.initial(5, 3))
    state, _ = run_ticks(state, ticks)

    state = engine.reset(state)

    assert state.phase is Phase.STUDY
    assert state.remaining_seconds == 5
    assert state.running is False


def test_skip_matches_natural_expiry():
    running = engine.start(TimerState.initial(5, 3))

    expired, _ = run_ticks(running, 5)
    skipped, ended = engine.skip(running)

    assert ended is Phase.STUDY
    assert skipped.phase == expired.phase
    assert skipped.remaining_seconds == expired.remaining_seconds
    assert skipped.running is False


def test_skip_from_break_goes_to_full_study():
    state = engine.start(TimerState.initial(5, 3))
    state, _ = run_ticks(state, 6)

    state, ended = engine.skip(state)

    assert ended is Phase.BREAK
    assert state.phase is Phase.STUDY
    assert state.remaining_seconds == 5


def test_duration_change_while_paused_resets_current_phase():
    state = TimerState.initial(3600, 300)

    state = engine.set_study_duration(state, 5400)
    assert state.remaining_seconds == 5400

    state = engine.set_break_duration(state, 600)
    assert state.remaining_seconds == 5400
    assert state.break_duration_seconds == 600


def test_duration_change_while_running_keeps_countdown():
    state = engine.start(TimerState.initial(10, 3))
    state, _ = run_ticks(state, 2)

    state = engine.set_study_duration(state, 20)

    assert state.remaining_seconds == 8
    state, ended = run_ticks(state, 8)
    assert ended == [Phase.STUDY]
    state, _ = run_ticks(state, 3)
    assert state.remaining_seconds == 20


def test_shortened_duration_while_running_stays_valid():
    state = engine.start(TimerState.initial(10, 3))
    state, _ = run_ticks(state, 2)

    state = engine.set_study_duration(state, 5)

    assert state.remaining_seconds == 8
    assert TimerState.model_validate(state.model_dump()) == state

    paused = engine.pause(state)
    assert paused.remaining_seconds == 5
    assert TimerState.model_validate(paused.model_dump()) == paused


def test_rejects_non_positive_duration():
    with pytest.raises(ValueError):
        engine.set_break_duration(TimerState.initial(5, 3), 0)
