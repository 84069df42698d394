import pytest

from promptline.prompt import (
    DEFAULT_INDICATOR_COLOR,
    DEFAULT_PROMPT_COLOR,
    DEFAULT_PROMPT_MULTILINE_COLOR,
    DEFAULT_PROMPT_RIGHT_COLOR,
    EditModeKind,
    Prompt,
    PromptEditMode,
    PromptHistorySearch,
    PromptHistorySearchStatus,
    PromptViMode,
)


class _SimplePrompt(Prompt):
    def render_prompt_left(self):
        return "left"

    def render_prompt_right(self):
        return "right"

    def render_prompt_indicator(self, prompt_mode):
        return str(prompt_mode)

    def render_prompt_multiline_indicator(self):
        return "... "

    def render_prompt_history_search_indicator(self, history_search):
        return history_search.term


def test_edit_mode_display():
    assert str(PromptEditMode.default()) == "Default"
    assert str(PromptEditMode.emacs()) == "Emacs"
    assert str(PromptEditMode.vi(PromptViMode.INSERT)) == "Vi_Normal\nVi_Insert"
    assert str(PromptEditMode.custom("x")) == "Custom_x"


def test_iter_all():
    assert [str(mode) for mode in PromptEditMode.iter_all()] == [
        "Default",
        "Emacs",
        "Vi_Normal\nVi_Insert",
        "Custom_",
    ]


def test_vi_defaults_to_normal():
    assert PromptEditMode.vi().vi_mode is PromptViMode.NORMAL
    assert PromptEditMode.vi().kind is EditModeKind.VI


def test_modes_compare_by_value():
    assert PromptEditMode.custom("a") == PromptEditMode.custom("a")
    assert PromptEditMode.vi(PromptViMode.NORMAL) != PromptEditMode.vi(PromptViMode.INSERT)


def test_invalid_mode_combinations():
    with pytest.raises(ValueError):
        PromptEditMode(EditModeKind.VI)
    with pytest.raises(ValueError):
        PromptEditMode(EditModeKind.EMACS, name="x")


def test_history_search_fields():
    search = PromptHistorySearch(PromptHistorySearchStatus.FAILING, "ls")
    assert search.status is PromptHistorySearchStatus.FAILING
    assert search.term == "ls"


def test_prompt_is_abstract():
    with pytest.raises(TypeError):
        Prompt()


def test_prompt_default_colors():
    prompt = _SimplePrompt()
    assert Prompt.get_prompt_color(prompt) == DEFAULT_PROMPT_COLOR
    assert Prompt.get_prompt_multiline_color(prompt) == DEFAULT_PROMPT_MULTILINE_COLOR
    assert Prompt.get_indicator_color(prompt) == DEFAULT_INDICATOR_COLOR
    assert Prompt.get_prompt_right_color(prompt) == DEFAULT_PROMPT_RIGHT_COLOR
    assert Prompt.right_prompt_on_last_line(prompt) is False


def test_subclass_rendering():
    prompt = _SimplePrompt()
    assert prompt.render_prompt_indicator(PromptEditMode.emacs()) == "Emacs"
    search = PromptHistorySearch(PromptHistorySearchStatus.PASSING, "git")
    assert prompt.render_prompt_history_search_indicator(search) == "git"