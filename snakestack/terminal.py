"""Keyboard and screen access through a curses window."""

from __future__ import annotations

import time
from typing import Any, Optional

try:
    import curses
except ImportError:  # curses is not available on every platform
    curses = None  # type: ignore[assignment]

ERR = -1
ENTER_CODES = (10, 13)
SHUTDOWN_PROMPT = "\nPress ENTER to Shut Down\n"

_WRITE_ERRORS: tuple[type[BaseException], ...] = (
    (curses.error,) if curses is not None else ()
)


class Terminal:
    """Non-blocking key input and text output on a curses-like window.

    The window must offer ``getch``, ``addstr``, ``clear``, ``refresh`` and
    ``nodelay``; ``getch`` returns -1 when no key is waiting.
    """

    def __init__(self, window: Any) -> None:
        self._window = window
        self._pending: Optional[int] = None
        window.nodelay(True)

    def _read(self) -> int:
        if self._pending is not None:
            code, self._pending = self._pending, None
            return code
        return self._window.getch()

    def has_char(self) -> bool:
        """Return True when a key is waiting; the key is kept for get_char."""
        if self._pending is None:
            code = self._window.getch()
            if code == ERR:
                return False
            self._pending = code
        return True

    def get_char(self) -> str:
        """Return the next key, or an empty string when none is waiting."""
        code = self._read()
        return "" if code == ERR else chr(code)

    def write(self, text: str) -> None:
        """Write text at the cursor; text past the window's end is dropped."""
        try:
            self._window.addstr(text)
        except _WRITE_ERRORS:
            pass

    def clear(self) -> None:
        self._window.clear()

    def delay(self, usec: int) -> None:
        """Show pending output, then pause for ``usec`` microseconds."""
        self._window.refresh()
        time.sleep(usec / 1_000_000)

    def wait_for_enter(self) -> None:
        """Show the shutdown prompt and block until Enter is pressed."""
        self.write(SHUTDOWN_PROMPT)
        self._window.refresh()
        self._window.nodelay(False)
        while self._read() not in ENTER_CODES:
            pass