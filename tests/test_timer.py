import pytest

from enginekit.timer import Profiler, ProfileID, Timer


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def advance(self, seconds):
        self.now += seconds

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_timer_accumulates_between_start_and_stop(clock):
    timer = Timer(clock)
    timer.start()
    clock.advance(2.0)
    timer.stop()
    clock.advance(5.0)
    assert timer.elapsed() == pytest.approx(2.0)
    timer.start()
    clock.advance(1.0)
    timer.stop()
    assert timer.elapsed() == pytest.approx(2.0 + 1.0)


def test_elapsed_while_running_reports_delta(clock):
    timer = Timer(clock)
    timer.start()
    clock.advance(0.5)
    total = timer.elapsed()
    assert timer.last_delta == pytest.approx(0.5)
    clock.advance(0.25)
    assert timer.elapsed() == pytest.approx(total + 0.25)
    assert timer.last_delta == pytest.approx(0.25)


def test_stop_when_not_running_changes_nothing(clock):
    timer = Timer(clock)
    clock.advance(3.0)
    timer.stop()
    assert timer.elapsed() == 0.0
    assert timer.is_running() is False


def test_reset_clears_and_stops(clock):
    timer = Timer(clock)
    timer.start()
    clock.advance(1.0)
    timer.reset()
    assert timer.is_running() is False
    assert timer.elapsed() == 0.0


def test_timer_as_context_manager(clock):
    timer = Timer(clock)
    with timer:
        assert timer.is_running()
        clock.advance(4.0)
    assert not timer.is_running()
    assert timer.elapsed() == pytest.approx(4.0)


def test_profile_average_of_equal_samples(clock):
    profiler = Profiler(clock)
    profile = profiler.get(ProfileID.FRAME)
    for _ in range(2):
        profile.start()
        clock.advance(0.3)
        profile.reset()
    assert profile.seconds() == pytest.approx(0.3)


def test_profile_keeps_zero_until_window_passes(clock):
    profiler = Profiler(clock)
    profile = profiler.get(ProfileID.DRAW)
    profile.start()
    clock.advance(0.3)
    profile.reset()
    assert profile.seconds() == 0.0


def test_get_accepts_plain_ints_and_rejects_unknown(clock):
    profiler = Profiler(clock)
    assert profiler.get(1) is profiler.get(ProfileID.UPDATE)
    with pytest.raises(ValueError):
        profiler.get(len(ProfileID))


def test_profile_time_starts_on_first_use(clock):
    profiler = Profiler(clock)
    clock.advance(10.0)
    assert profiler.profile_time() == 0.0
    clock.advance(1.5)
    assert profiler.profile_time() == pytest.approx(1.5)


def test_render_statistics_average_per_frame(clock):
    profiler = Profiler(clock)
    render = profiler.render
    render.add_render_calls(10)
    render.add_verts(300)
    profiler.reset_all()
    clock.advance(0.3)
    render.add_render_calls(10)
    render.add_verts(300)
    profiler.reset_all()
    assert render.render_calls == 10
    assert render.verts == 300
    assert render.render_calls_accum == 0
    assert render.frames == 0


def test_render_statistics_accumulate_within_window(clock):
    profiler = Profiler(clock)
    render = profiler.render
    render.add_faces(7)
    render.add_state_changes(2)
    profiler.reset_all()
    assert render.faces == 0
    assert render.faces_accum == 7
    assert render.state_changes_accum == 2
    assert render.frames == 1