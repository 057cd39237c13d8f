"""Single-keypress reader for the terminal frontend.

Maps raw keys to game actions without requiring Enter.  Works on
macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
import time


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    " ": "select",
    "\r": "select",
    "\n": "select",
    "n": "hint",
    "x": "shuffle",
    "r": "restart",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    action = _KEY_MAP.get(ch) or _KEY_MAP.get(ch.lower())
    if action:
        return action
    return ch if ch.isprintable() else ""


# -- low-level readers ---------------------------------------------------------


def _read_action(read_char, has_more) -> str:
    """Read one key, decoding ``ESC [ A..D`` arrow sequences."""
    ch = read_char()
    if ch != "\x1b":
        return resolve(ch)
    if not has_more():
        return "quit"  # bare Escape
    if read_char() != "[":
        return "quit"
    if not has_more():
        return ""
    return _ARROW_MAP.get(read_char(), "")


def _get_key_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    if timeout is not None:
        end = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= end:
                return None
            time.sleep(0.02)
    raw = msvcrt.getch()
    # Windows reports arrows as a 0x00/0xE0 prefix followed by a scan code.
    if raw in (b"\x00", b"\xe0"):
        code = msvcrt.getch()
        return {b"H": "up", b"P": "down", b"K": "left", b"M": "right"}.get(code, "")
    return resolve(raw.decode("utf-8", errors="ignore"))


def _get_key_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        if timeout is not None:
            ready, _, _ = select.select([fd], [], [], timeout)
            if not ready:
                return None

        # os.read is unbuffered so select() still sees the remaining
        # bytes of a multi-byte escape sequence.
        def read_char() -> str:
            return os.read(fd, 1).decode("utf-8", errors="ignore")

        def has_more() -> bool:
            return bool(select.select([fd], [], [], 0.1)[0])

        return _read_action(read_char, has_more)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


_get_key = _get_key_windows if os.name == "nt" else _get_key_unix


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block until a key is pressed and return its action string.

    Possible return values:
        "up", "down", "left", "right"  — move the cursor
        "select"                       — Space / Enter
        "hint", "shuffle", "restart"   — n / x / r
        "quit"                         — q / Ctrl-C / Escape
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    return _get_key(None) or ""


def get_key_timeout(timeout: float) -> str | None:
    """Like :func:`get_key`, but return ``None`` after *timeout* seconds."""
    return _get_key(timeout)
