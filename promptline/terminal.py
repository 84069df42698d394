"""Switching optional terminal features on and off."""

from __future__ import annotations

import os
import re
import select
import sys
from collections.abc import Callable
from typing import TextIO

try:
    import termios
    import tty
except ImportError:  # not available on every platform
    termios = None
    tty = None

ENABLE_BRACKETED_PASTE = "\x1b[?2004h"
DISABLE_BRACKETED_PASTE = "\x1b[?2004l"
PUSH_KEYBOARD_ENHANCEMENT = "\x1b[>1u"  # disambiguate escape codes
POP_KEYBOARD_ENHANCEMENT = "\x1b[<1u"

_QUERY = b"\x1b[?u\x1b[c"
_FLAGS_RESPONSE = re.compile(rb"\x1b\[\?\d*u")
_ATTRIBUTES_RESPONSE = re.compile(rb"\x1b\[\?[\d;]*c")
_QUERY_TIMEOUT = 2.0


def _query_keyboard_enhancement(fd: int) -> bool:
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        os.write(fd, _QUERY)
        response = b""
        while not _ATTRIBUTES_RESPONSE.search(response):
            ready, _, _ = select.select([fd], [], [], _QUERY_TIMEOUT)
            if not ready:
                return False
            chunk = os.read(fd, 1024)
            if not chunk:
                return False
            response += chunk
        return _FLAGS_RESPONSE.search(response) is not None
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def kitty_protocol_available() -> bool:
    """Whether the terminal supports the kitty keyboard enhancement protocol.

    Queries the terminal; any failure counts as no support.
    """
    if termios is None:
        return False
    try:
        if not sys.stdin.isatty():
            return False
        return _query_keyboard_enhancement(sys.stdin.fileno())
    except (OSError, ValueError, termios.error):
        return False


def _emit(stream: TextIO | None, sequence: str) -> None:
    """Write ``sequence``, ignoring failures of the output."""
    target = stream if stream is not None else sys.stdout
    try:
        target.write(sequence)
        target.flush()
    except (OSError, ValueError):
        pass


class _FeatureGuard:
    _enable_sequence = ""
    _disable_sequence = ""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._enabled = False
        self._active = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def active(self) -> bool:
        return self._active

    def set(self, enable: bool) -> None:
        """Choose whether the feature is switched on by ``enter``."""
        self._enabled = enable

    def enter(self) -> None:
        """Switch the feature on if it is enabled and not already on."""
        if self._enabled and not self._active:
            _emit(self._stream, self._enable_sequence)
            self._active = True

    def exit(self) -> None:
        """Switch the feature off if it is on."""
        if self._active:
            _emit(self._stream, self._disable_sequence)
            self._active = False

    def __enter__(self):
        self.enter()
        return self

    def __exit__(self, *args) -> None:
        self.exit()


class BracketedPasteGuard(_FeatureGuard):
    """Sets up and tears down bracketed paste mode."""

    _enable_sequence = ENABLE_BRACKETED_PASTE
    _disable_sequence = DISABLE_BRACKETED_PASTE

    def set(self, enable: bool) -> None:
        super().set(enable)

    def enter(self) -> None:
        super().enter()

    def exit(self) -> None:
        super().exit()

    def __enter__(self) -> BracketedPasteGuard:
        return super().__enter__()

    def __exit__(self, *args) -> None:
        super().__exit__(*args)


class KittyProtocolGuard(_FeatureGuard):
    """Sets up and tears down the kitty keyboard enhancement protocol."""

    _enable_sequence = PUSH_KEYBOARD_ENHANCEMENT
    _disable_sequence = POP_KEYBOARD_ENHANCEMENT

    def __init__(
        self,
        stream: TextIO | None = None,
        detect: Callable[[], bool] = kitty_protocol_available,
    ) -> None:
        super().__init__(stream)
        self._detect = detect

    def set(self, enable: bool) -> None:
        """Enable the protocol only if asked to and the terminal supports it."""
        super().set(enable and self._detect())

    def enter(self) -> None:
        super().enter()

    def exit(self) -> None:
        super().exit()

    def __enter__(self) -> KittyProtocolGuard:
        return super().__enter__()

    def __exit__(self, *args) -> None:
        super().__exit__(*args)