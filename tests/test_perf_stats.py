import pytest

from cocuyo.perf_stats import Ema, PerfStats


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now

    def advance_ms(self, ms):
        self.now += ms / 1000.0


@pytest.fixture
def clock():
    return FakeClock()


def test_ema_first_sample_sets_value():
    ema = Ema(0.05)
    assert not ema.initialized
    ema.update(42.0)
    assert ema.initialized
    assert ema.value == 42.0


def test_ema_moves_toward_new_sample():
    ema = Ema(0.05)
    ema.update(10.0)
    ema.update(30.0)
    assert 10.0 < ema.value < 30.0
    assert ema.value - 10.0 < 30.0 - ema.value


def test_ema_constant_samples_stay_constant():
    ema = Ema(0.05)
    for _ in range(10):
        ema.update(7.5)
    assert ema.value == pytest.approx(7.5)


def test_fresh_stats_have_no_data(clock):
    stats = PerfStats(clock)
    assert not stats.has_frame_data()
    assert not stats.has_sampling_data()
    assert not stats.has_bulb_data()
    assert stats.effective_fps() == 0.0


def test_first_frame_gives_no_interval(clock):
    stats = PerfStats(clock)
    stats.record_frame_arrival()
    assert not stats.has_frame_data()


def test_frame_intervals(clock):
    stats = PerfStats(clock)
    stats.record_frame_arrival()
    for _ in range(5):
        clock.advance_ms(25.0)
        stats.record_frame_arrival()
    assert stats.has_frame_data()
    assert stats.frame_interval_ms() == pytest.approx(25.0)
    assert stats.effective_fps() * stats.frame_interval_ms() == pytest.approx(1000.0)


def test_sampling_complete_measures_since_start(clock):
    stats = PerfStats(clock)
    stats.mark_sampling_start()
    clock.advance_ms(4.0)
    stats.record_sampling_complete()
    assert stats.has_sampling_data()
    assert stats.sampling_time_ms() == pytest.approx(4.0)


def test_sampling_complete_without_start_is_ignored(clock):
    stats = PerfStats(clock)
    stats.record_sampling_complete()
    assert not stats.has_sampling_data()


def test_sampling_start_is_consumed(clock):
    stats = PerfStats(clock)
    stats.mark_sampling_start()
    clock.advance_ms(4.0)
    stats.record_sampling_complete()
    clock.advance_ms(500.0)
    stats.record_sampling_complete()
    assert stats.sampling_time_ms() == pytest.approx(4.0)


def test_direct_sampling_and_dispatch(clock):
    stats = PerfStats(clock)
    stats.record_sampling_time(3.0)
    stats.record_bulb_dispatch(12.0)
    assert stats.sampling_time_ms() == 3.0
    assert stats.bulb_dispatch_ms() == 12.0
    assert stats.has_bulb_data()


def test_reset_clears_everything(clock):
    stats = PerfStats(clock)
    stats.record_frame_arrival()
    clock.advance_ms(10.0)
    stats.record_frame_arrival()
    stats.record_bulb_dispatch(5.0)
    stats.reset()
    assert not stats.has_frame_data()
    assert not stats.has_bulb_data()
    assert stats.bulb_dispatch_ms() == 0.0


def test_fingerprint_ignores_fractional_change(clock):
    first = PerfStats(clock)
    second = PerfStats(clock)
    first.record_bulb_dispatch(12.2)
    second.record_bulb_dispatch(12.7)
    assert first.fingerprint() == second.fingerprint()


def test_fingerprint_changes_with_integer_change(clock):
    first = PerfStats(clock)
    second = PerfStats(clock)
    first.record_bulb_dispatch(12.0)
    second.record_bulb_dispatch(40.0)
    assert first.fingerprint() != second.fingerprint()
    assert first.bulb_dispatch_ms() < second.bulb_dispatch_ms()