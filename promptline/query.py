"""Lists of the names the line editor understands, for help and configuration."""

from __future__ import annotations

from .prompt import PromptEditMode

_KEYBINDING_MODIFIERS = (
    "Alt",
    "Control",
    "Shift",
    "None",
    "Shift_Alt",
    "Alt_Shift",
    "Control_Shift",
    "Shift_Control",
    "Control_Alt",
    "Alt_Control",
    "Control_Alt_Shift",
    "Control_Shift_Alt",
)

_KEYCODES = (
    "Backspace",
    "Enter",
    "Left",
    "Right",
    "Up",
    "Down",
    "Home",
    "End",
    "PageUp",
    "PageDown",
    "Tab",
    "BackTab",
    "Delete",
    "Insert",
    "F<number>",
    "Space",
    "Char_<letter>",
    "Null",
    "Esc",
)


def get_keybinding_modifiers() -> list[str]:
    """The names of the keybinding modifiers."""
    return list(_KEYBINDING_MODIFIERS)


def get_prompt_edit_modes() -> list[str]:
    """The names of the prompt edit modes."""
    return [str(mode) for mode in PromptEditMode.iter_all()]


def get_keycodes() -> list[str]:
    """The names of the key codes that can be bound."""
    return list(_KEYCODES)