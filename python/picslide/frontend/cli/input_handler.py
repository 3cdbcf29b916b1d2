"""Single-keypress reader for the terminal frontend.

Keys are turned into action strings without waiting for Enter:

    "ArrowUp", "ArrowDown", "ArrowLeft", "ArrowRight"   slide a tile
    "cursor-up", "cursor-down", "cursor-left", "cursor-right"
    "click"                                             click the cursor slot
    "restart", "new", "quit"

Any other printable key comes back as itself, anything else as "".
POSIX terminals are read through termios, Windows consoles through msvcrt.
"""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable

# Waits for the rest of a multi-byte key sequence.
_SEQUENCE_WAIT = 0.1

_KEY_MAP: dict[str, str] = {
    "w": "ArrowUp",
    "s": "ArrowDown",
    "a": "ArrowLeft",
    "d": "ArrowRight",
    "i": "cursor-up",
    "k": "cursor-down",
    "j": "cursor-left",
    "l": "cursor-right",
    " ": "click",
    "\r": "click",
    "\n": "click",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "n": "new",
}

# Final byte of ESC [ x on POSIX, second byte after 0xE0 / 0x00 on Windows.
_ANSI_ARROWS = {"A": "ArrowUp", "B": "ArrowDown", "C": "ArrowRight", "D": "ArrowLeft"}
_WINDOWS_ARROWS = {"H": "ArrowUp", "P": "ArrowDown", "M": "ArrowRight", "K": "ArrowLeft"}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch.lower(), ch if ch.isprintable() else "")


def decode(ch: str, read_next: Callable[[], str | None]) -> str:
    """Turn the first character of a keypress into an action.

    *read_next* returns the following character of the same keypress, or
    ``None`` when nothing else arrived in time.
    """
    if ch == "\x1b":
        if read_next() != "[":
            return "quit"  # bare Escape
        return _ANSI_ARROWS.get(read_next() or "", "")
    if ch in ("\xe0", "\x00"):
        return _WINDOWS_ARROWS.get(read_next() or "", "")
    return resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Read one keypress, or return ``None`` after *timeout* seconds."""
    if os.name == "nt":
        return _read_windows(timeout)
    return _read_posix(timeout)


def _read_windows(timeout: float) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    def getch() -> str:
        return msvcrt.getch().decode("latin-1")

    def read_next() -> str | None:
        return getch() if msvcrt.kbhit() else None

    end = time.monotonic() + timeout
    while time.monotonic() < end:
        if msvcrt.kbhit():
            return decode(getch(), read_next)
        time.sleep(0.02)
    return None


def _read_posix(timeout: float) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()

    def read_within(wait: float) -> str | None:
        # os.read is unbuffered, so select() still sees the rest of a sequence.
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = read_within(timeout)
        if ch is None:
            return None
        return decode(ch, lambda: read_within(_SEQUENCE_WAIT))
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
