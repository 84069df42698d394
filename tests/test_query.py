from promptline.query import get_keybinding_modifiers, get_keycodes, get_prompt_edit_modes


def test_modifiers():
    modifiers = get_keybinding_modifiers()
    assert len(modifiers) == 12
    assert modifiers[:4] == ["Alt", "Control", "Shift", "None"]
    assert modifiers[-1] == "Control_Shift_Alt"
    assert len(set(modifiers)) == len(modifiers)


def test_modifiers_returns_fresh_list():
    first = get_keybinding_modifiers()
    first.clear()
    assert len(get_keybinding_modifiers()) == 12


def test_prompt_edit_modes():
    assert get_prompt_edit_modes() == ["Default", "Emacs", "Vi_Normal\nVi_Insert", "Custom_"]


def test_keycodes():
    keycodes = get_keycodes()
    assert len(keycodes) == 19
    assert keycodes[0] == "Backspace"
    assert keycodes[-1] == "Esc"
    assert "F<number>" in keycodes
    assert "Space" in keycodes
    assert "Char_<letter>" in keycodes
    assert len(set(keycodes)) == len(keycodes)