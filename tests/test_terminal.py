import io
import sys

from promptline.terminal import (
    DISABLE_BRACKETED_PASTE,
    ENABLE_BRACKETED_PASTE,
    POP_KEYBOARD_ENHANCEMENT,
    PUSH_KEYBOARD_ENHANCEMENT,
    BracketedPasteGuard,
    KittyProtocolGuard,
    kitty_protocol_available,
)


def test_bracketed_paste_sequence():
    stream = io.StringIO()
    guard = BracketedPasteGuard(stream)
    guard.set(True)
    guard.enter()
    assert stream.getvalue() == "\x1b[?2004h"


def test_bracketed_paste_enter_exit_once():
    stream = io.StringIO()
    guard = BracketedPasteGuard(stream)
    guard.set(True)
    guard.enter()
    guard.enter()
    assert guard.active is True
    guard.exit()
    guard.exit()
    assert guard.active is False
    assert stream.getvalue() == ENABLE_BRACKETED_PASTE + DISABLE_BRACKETED_PASTE


def test_bracketed_paste_disabled_writes_nothing():
    stream = io.StringIO()
    guard = BracketedPasteGuard(stream)
    guard.enter()
    guard.exit()
    assert stream.getvalue() == ""
    assert guard.active is False


def test_bracketed_paste_context_manager():
    stream = io.StringIO()
    guard = BracketedPasteGuard(stream)
    guard.set(True)
    with guard as entered:
        assert entered is guard
        assert guard.active is True
    assert guard.active is False
    assert stream.getvalue() == ENABLE_BRACKETED_PASTE + DISABLE_BRACKETED_PASTE


def test_write_errors_are_ignored():
    stream = io.StringIO()
    stream.close()
    guard = BracketedPasteGuard(stream)
    guard.set(True)
    guard.enter()
    assert guard.active is True
    guard.exit()
    assert guard.active is False


def test_kitty_guard_with_support():
    stream = io.StringIO()
    guard = KittyProtocolGuard(stream, detect=lambda: True)
    guard.set(True)
    assert guard.enabled is True
    with guard:
        assert stream.getvalue() == PUSH_KEYBOARD_ENHANCEMENT
    assert stream.getvalue() == PUSH_KEYBOARD_ENHANCEMENT + POP_KEYBOARD_ENHANCEMENT


def test_kitty_guard_without_support():
    stream = io.StringIO()
    guard = KittyProtocolGuard(stream, detect=lambda: False)
    guard.set(True)
    assert guard.enabled is False
    guard.enter()
    assert guard.active is False
    assert stream.getvalue() == ""


def test_kitty_guard_not_requested_skips_detection():
    calls = []

    def detect():
        calls.append(True)
        return True

    guard = KittyProtocolGuard(io.StringIO(), detect=detect)
    guard.set(False)
    assert guard.enabled is False
    assert calls == []


def test_kitty_protocol_unavailable_without_tty(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO())
    assert kitty_protocol_available() is False