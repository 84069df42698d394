import os
import re
from datetime import datetime

import pytest

from promptline.default_prompt import (
    DEFAULT_MULTILINE_INDICATOR,
    DEFAULT_PROMPT_INDICATOR,
    DEFAULT_VI_INSERT_PROMPT_INDICATOR,
    DEFAULT_VI_NORMAL_PROMPT_INDICATOR,
    DefaultPrompt,
    DefaultPromptSegment,
    SegmentKind,
    current_datetime,
    working_dir,
)
from promptline.prompt import (
    PromptEditMode,
    PromptHistorySearch,
    PromptHistorySearchStatus,
    PromptViMode,
)

_DATETIME = re.compile(r"\d{2}/\d{2}/\d{4} \d{2}:\d{2}:\d{2} (AM|PM)")
_DATETIME_FORMAT = "%m/%d/%Y %I:%M:%S %p"


@pytest.fixture
def in_home_subdir(tmp_path, monkeypatch):
    work = tmp_path / "project"
    work.mkdir()
    monkeypatch.delenv("USERPROFILE", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(work)
    return work


def test_working_dir_abbreviates_home(in_home_subdir):
    assert working_dir() == "~" + os.sep + in_home_subdir.name


def test_working_dir_at_home_is_full_path(tmp_path, monkeypatch):
    monkeypatch.delenv("USERPROFILE", raising=False)
    monkeypatch.setenv("HOME", os.path.realpath(tmp_path))
    monkeypatch.chdir(tmp_path)
    assert working_dir() == os.getcwd()


def test_current_datetime_format():
    before = datetime.now().replace(microsecond=0)
    text = current_datetime()
    after = datetime.now().replace(microsecond=0)
    parsed = datetime.strptime(text, _DATETIME_FORMAT)
    assert before <= parsed <= after


def test_segments_render():
    assert DefaultPromptSegment.basic("hello").render() == "hello"
    assert DefaultPromptSegment.empty().render() == ""
    assert _DATETIME.fullmatch(DefaultPromptSegment.current_datetime().render())


def test_working_directory_segment(in_home_subdir):
    assert DefaultPromptSegment.working_directory().render() == working_dir()


def test_default_prompt_segments():
    prompt = DefaultPrompt()
    assert prompt.left_prompt.kind is SegmentKind.WORKING_DIRECTORY
    assert prompt.right_prompt.kind is SegmentKind.CURRENT_DATETIME


def test_custom_left_right():
    prompt = DefaultPrompt(DefaultPromptSegment.basic("L"), DefaultPromptSegment.empty())
    assert prompt.render_prompt_left() == "L"
    assert prompt.render_prompt_right() == ""


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        (PromptEditMode.default(), DEFAULT_PROMPT_INDICATOR),
        (PromptEditMode.emacs(), DEFAULT_PROMPT_INDICATOR),
        (PromptEditMode.vi(PromptViMode.NORMAL), DEFAULT_VI_NORMAL_PROMPT_INDICATOR),
        (PromptEditMode.vi(PromptViMode.INSERT), DEFAULT_VI_INSERT_PROMPT_INDICATOR),
    ],
)
def test_indicator(mode, expected):
    assert DefaultPrompt().render_prompt_indicator(mode) == expected


def test_custom_mode_indicator():
    assert DefaultPrompt().render_prompt_indicator(PromptEditMode.custom("nu")) == "(nu)"


def test_multiline_indicator():
    assert DefaultPrompt().render_prompt_multiline_indicator() == DEFAULT_MULTILINE_INDICATOR


def test_history_search_passing():
    search = PromptHistorySearch(PromptHistorySearchStatus.PASSING, "ls")
    assert DefaultPrompt().render_prompt_history_search_indicator(search) == "(reverse-search: ls) "


def test_history_search_failing():
    search = PromptHistorySearch(PromptHistorySearchStatus.FAILING, "ls")
    text = DefaultPrompt().render_prompt_history_search_indicator(search)
    assert text == "(failing reverse-search: ls) "