"""
Global quick-action keys.

F5  = Import Save  (new snapshot from the origin folder)
F9  = Load Save    (restore the selected snapshot, the newest one by default)

Keys work even while another application has focus.  When pynput has no
usable backend (no display, missing X libraries) the bindings report
themselves unavailable and the caller carries on without them.
"""

import logging

from .manager import Outcome, SaveManager

try:
    from pynput import keyboard as pynput_keyboard
    PYNPUT_AVAILABLE = True
except ImportError:
    PYNPUT_AVAILABLE = False

logger = logging.getLogger(__name__)

DEFAULT_BINDINGS: dict[str, str] = {
    "f5": "import_save",
    "f9": "load_save",
}


class QuickKeys:

    def __init__(self, manager: SaveManager, bindings: dict[str, str] | None = None):
        self.manager  = manager
        self.bindings = dict(DEFAULT_BINDINGS if bindings is None else bindings)
        self._listener = None

    def handle_key(self, key) -> Outcome | None:
        """Run the manager operation bound to ``key``; None for unbound keys."""
        action = self.bindings.get(getattr(key, "name", None))
        if action is None:
            return None
        outcome = getattr(self.manager, action)()
        if outcome.ok:
            logger.info("%s: %s", action, outcome.message or "done")
        else:
            logger.warning("%s: %s", action, outcome.message)
        for notice in outcome.notices:
            logger.warning(notice)
        return outcome

    def _on_press(self, key) -> None:
        # An exception here would stop the listener thread for good.
        try:
            self.handle_key(key)
        except Exception:
            logger.exception("Quick key handler failed")

    def start(self) -> bool:
        if not PYNPUT_AVAILABLE:
            logger.warning("pynput not available — quick keys disabled.")
            return False
        try:
            listener = pynput_keyboard.Listener(on_press=self._on_press, suppress=False)
            listener.daemon = True
            listener.start()
        except Exception as exc:
            logger.warning("Global hotkeys unavailable (%s)", exc)
            return False
        self._listener = listener
        return True

    @property
    def running(self) -> bool:
        return self._listener is not None

    def join(self) -> None:
        if self._listener is not None:
            self._listener.join()

    def stop(self) -> None:
        if self._listener is not None:
            self._listener.stop()
            self._listener = None
