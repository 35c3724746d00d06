"""Non-blocking single-key terminal input."""

from __future__ import annotations

import os
import select
import termios


class Keyboard:
    """Puts a terminal in raw-ish mode and reads single keys."""

    def __init__(self, fd: int = 0) -> None:
        self.fd = fd
        self._saved: list | None = None
        self._peek: str | None = None

    def open(self) -> None:
        """Disable line buffering, echo and signal keys on the terminal."""
        saved = termios.tcgetattr(self.fd)
        settings = termios.tcgetattr(self.fd)
        settings[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
        settings[6][termios.VMIN] = 1
        settings[6][termios.VTIME] = 0
        termios.tcsetattr(self.fd, termios.TCSANOW, settings)
        self._saved = saved

    def close(self) -> None:
        """Restore the terminal settings saved by :meth:`open`."""
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSANOW, self._saved)
            self._saved = None

    def __enter__(self) -> "Keyboard":
        self.open()
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def hit(self) -> bool:
        """Return True if a key is waiting, without blocking."""
        if self._peek is not None:
            return True
        ready, _, _ = select.select([self.fd], [], [], 0)
        if not ready:
            return False
        data = os.read(self.fd, 1)
        if not data:
            return False
        self._peek = data.decode("latin-1")
        return True

    def read(self) -> str:
        """Return the next key, blocking until one arrives."""
        if self._peek is not None:
            key, self._peek = self._peek, None
            return key
        data = os.read(self.fd, 1)
        if not data:
            raise EOFError("input closed")
        return data.decode("latin-1")