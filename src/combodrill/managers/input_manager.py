# File: src/combodrill/managers/input_manager.py
"""Keyboard input from the terminal via blessed."""

import asyncio

from combodrill.utilities.key_event import KeyEvent
from combodrill.utilities.logger import DrillLogger


class InputManager:
    """Turns blessed keystrokes into KeyEvents.

    ``Terminal.inkey()`` blocks, so reads run on a worker thread with a short
    timeout. A read still in flight when its caller is cancelled is kept and
    handed to the next caller, so cancelling a waiter never loses the key it
    was reading. Keys a caller has already taken are its own to use or drop.
    """

    POLL_INTERVAL_S = 0.05

    def __init__(self, term, poll_interval=POLL_INTERVAL_S):
        DrillLogger.info("INPT", f"[INIT] InputManager - poll_interval: {poll_interval}s")
        self.term = term
        self.poll_interval = poll_interval
        self._pending = None

    def read_key(self, timeout=None):
        """Read one keystroke. Returns None on timeout, an ERROR event on failure."""
        try:
            keystroke = self.term.inkey(timeout=timeout)
        except (OSError, ValueError) as e:
            DrillLogger.error("INPT", f"Terminal read failed: {e}")
            return KeyEvent.failure(e)

        if not keystroke:
            return None

        if keystroke.is_sequence:
            return KeyEvent.press(key=keystroke.name)
        return KeyEvent.press(key=keystroke.name, char=str(keystroke))

    async def next_event(self):
        """Wait for the next key event."""
        while True:
            if self._pending is None:
                self._pending = asyncio.ensure_future(
                    asyncio.to_thread(self.read_key, self.poll_interval)
                )
            # Shielded so a cancelled waiter leaves the read running for the next one
            event = await asyncio.shield(self._pending)
            self._pending = None
            if event is not None:
                DrillLogger.debug("INPT", f"Key: {event!r}")
                return event

    def flush(self):
        """Discard any keystrokes typed before a mode starts."""
        if self._pending is not None and not self._pending.done():
            return
        self._pending = None
        while self.term.inkey(timeout=0):
            pass
