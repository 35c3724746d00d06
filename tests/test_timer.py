from cafelogico.timer import Timer


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_not_over_at_exact_delay():
    clock = FakeClock()
    timer = Timer(100, clock)
    clock.now = 0.1
    assert timer.time_over() is False


def test_over_after_delay_and_restarts():
    clock = FakeClock()
    timer = Timer(100, clock)
    clock.now = 0.101
    assert timer.time_over() is True
    assert timer.elapsed_ms() == 0
    assert timer.time_over() is False


def test_elapsed_truncates_to_milliseconds():
    clock = FakeClock()
    timer = Timer(100, clock)
    clock.now = 0.0459
    assert timer.elapsed_ms() == 45


def test_reset_changes_delay_and_start():
    clock = FakeClock()
    timer = Timer(100, clock)
    clock.now = 1.0
    timer.reset(500)
    clock.now = 1.2
    assert timer.delay_ms == 500
    assert timer.elapsed_ms() == 200
    assert timer.time_over() is False


def test_stop_makes_every_check_over():
    clock = FakeClock()
    timer = Timer(1000, clock)
    timer.stop()
    assert timer.delay_ms == -1
    assert timer.time_over() is True
    assert timer.time_over() is True


def test_describe_format():
    clock = FakeClock()
    timer = Timer(100, clock)
    clock.now = 0.25
    assert timer.describe() == "Timer:  250"


def test_default_clock_counts_up():
    timer = Timer(10_000)
    assert timer.elapsed_ms() >= 0
    assert timer.time_over() is False