from masonrygrid.widgets.resize_debouncer import ResizeDebouncer


class FakeSignal:
    def __init__(self):
        self._slots = []

    def connect(self, slot):
        self._slots.append(slot)

    def emit(self):
        for slot in list(self._slots):
            slot()


class FakeTimer:
    def __init__(self):
        self.timeout = FakeSignal()
        self.started = []
        self.stop_calls = 0
        self.active = False

    def start(self, delay):
        self.started.append(delay)
        self.active = True

    def stop(self):
        self.stop_calls += 1
        self.active = False

    def fire(self):
        if self.active:
            self.active = False
            self.timeout.emit()


def make_debouncer(delay_ms=50):
    timer = FakeTimer()
    calls = []
    debouncer = ResizeDebouncer(lambda: calls.append(True), delay_ms, timer=timer)
    return debouncer, timer, calls


def test_burst_of_requests_runs_callback_once():
    debouncer, timer, calls = make_debouncer()

    for _ in range(5):
        debouncer.request()
    timer.fire()

    assert calls == [True]
    assert timer.started == [50] * 5
    assert debouncer.pending is False


def test_cancel_prevents_callback():
    debouncer, timer, calls = make_debouncer()

    debouncer.request()
    debouncer.cancel()
    timer.fire()

    assert calls == []
    assert debouncer.pending is False


def test_flush_without_request_is_noop():
    debouncer, _, calls = make_debouncer()

    debouncer.flush()

    assert calls == []


def test_set_delay_applies_to_next_request_and_clamps():
    debouncer, timer, _ = make_debouncer(delay_ms=50)

    debouncer.set_delay(200)
    debouncer.request()
    debouncer.set_delay(-5)
    debouncer.request()

    assert timer.started == [200, 0]
    assert debouncer.delay_ms == 0
