import threading
from collections.abc import Callable
from typing import Protocol


class Timer(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], Timer]


def thread_timer(delay: float, callback: Callable[[], None]) -> Timer:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    return timer


class Debouncer:
    """Runs a callback once no new call has arrived for ``delay`` seconds.

    At most one timer is live at a time: scheduling a callback cancels the
    pending one. A callback that is already running is not interrupted.
    """

    def __init__(self, delay: float, timer_factory: TimerFactory = thread_timer) -> None:
        self.delay = delay
        self.timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: Timer | None = None

    def call(self, callback: Callable[[], None]) -> None:
        def fire() -> None:
            with self._lock:
                if self._timer is not timer:
                    return
                self._timer = None
            callback()

        with self._lock:
            self._cancel_pending()
            timer = self.timer_factory(self.delay, fire)
            self._timer = timer
            timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._cancel_pending()

    def _cancel_pending(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
