from PySide6.QtCore import QTimer


class ResizeDebouncer:
    """Coalesces rapid resize notifications into one delayed callback."""

    def __init__(self, callback, delay_ms: int = 50, timer=None, parent=None):
        self._callback = callback
        self._delay_ms = max(0, int(delay_ms))
        self._pending = False
        if timer is None:
            timer = QTimer(parent)
            timer.setSingleShot(True)
        self._timer = timer
        self._timer.timeout.connect(self.flush)

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    @property
    def pending(self) -> bool:
        return self._pending

    def set_delay(self, delay_ms: int):
        self._delay_ms = max(0, int(delay_ms))

    def request(self):
        """(Re)start the timer; only the last request in a burst fires."""
        self._pending = True
        self._timer.stop()
        self._timer.start(self._delay_ms)

    def flush(self):
        if not self._pending:
            return
        self._pending = False
        self._callback()

    def cancel(self):
        self._pending = False
        self._timer.stop()
