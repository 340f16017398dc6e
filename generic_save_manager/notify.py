import threading
from typing import Callable

CLEAR_DELAY_S = 1.0


class Notifier:
    """
    Short-lived status line.

    ``notify()`` shows a message immediately and clears it after ``delay``
    seconds on a background timer.  A newer message cancels the pending
    clear, so the line is cleared once, ``delay`` after the latest call.
    ``on_change`` is called with every new value (including the final "").
    """

    def __init__(
        self,
        on_change: Callable[[str], None] | None = None,
        delay: float = CLEAR_DELAY_S,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        self.on_change      = on_change
        self.delay          = delay
        self._timer_factory = timer_factory
        self._lock          = threading.Lock()
        self._timer: threading.Timer | None = None
        self._generation    = 0
        self._message       = ""

    @property
    def message(self) -> str:
        return self._message

    def notify(self, message: str) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._message = message
            timer = self._timer_factory(self.delay, self._clear, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
        self._emit(message)
        timer.start()

    def _clear(self, generation: int) -> None:
        with self._lock:
            # A newer notify() got in after this timer was already running.
            if generation != self._generation:
                return
            self._timer = None
            self._message = ""
        self._emit("")

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._generation += 1

    def _emit(self, message: str) -> None:
        if self.on_change is not None:
            self.on_change(message)
