"""Timestamped, optionally throttled flow logging for masonry diagnostics."""

import time

_flow_log_last: dict[str, float] = {}

_ALWAYS_SHOWN = {"WARNING", "ERROR"}


def _trace_enabled() -> bool:
    from masonrygrid.utils.settings import DEFAULT_SETTINGS, settings
    try:
        return bool(settings.value(
            "masonry_trace_logs", DEFAULT_SETTINGS["masonry_trace_logs"], type=bool))
    except Exception:
        return False


def log_flow(component: str, message: str, *, level: str = "DEBUG",
             throttle_key: str | None = None, every_s: float | None = None):
    """Print `[HH:MM:SS.mmm][TRACE][COMPONENT][LEVEL] message`.

    DEBUG/INFO lines only show when `masonry_trace_logs` is enabled.
    With `throttle_key` and `every_s`, repeats inside the window are dropped.
    """
    if level not in _ALWAYS_SHOWN and not _trace_enabled():
        return

    now = time.time()
    if throttle_key and every_s is not None:
        last = _flow_log_last.get(throttle_key, 0.0)
        if (now - last) < every_s:
            return
        _flow_log_last[throttle_key] = now
    ts = time.strftime("%H:%M:%S", time.localtime(now)) + f".{int((now % 1) * 1000):03d}"
    print(f"[{ts}][TRACE][{component}][{level}] {message}")


def reset_throttle():
    _flow_log_last.clear()
