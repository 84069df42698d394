"""A ready-made prompt showing the working directory and the time."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from datetime import datetime

from .prompt import (
    EditModeKind,
    Prompt,
    PromptEditMode,
    PromptHistorySearch,
    PromptHistorySearchStatus,
    PromptViMode,
)

DEFAULT_PROMPT_INDICATOR = "〉"
DEFAULT_VI_INSERT_PROMPT_INDICATOR = ": "
DEFAULT_VI_NORMAL_PROMPT_INDICATOR = "〉"
DEFAULT_MULTILINE_INDICATOR = "::: "


class SegmentKind(enum.Enum):
    """What a prompt segment shows."""

    BASIC = enum.auto()
    WORKING_DIRECTORY = enum.auto()
    CURRENT_DATETIME = enum.auto()
    EMPTY = enum.auto()


@dataclass(frozen=True)
class DefaultPromptSegment:
    """The content of the left or right part of a DefaultPrompt."""

    kind: SegmentKind
    text: str = ""

    @classmethod
    def basic(cls, text: str) -> DefaultPromptSegment:
        return cls(SegmentKind.BASIC, text)

    @classmethod
    def working_directory(cls) -> DefaultPromptSegment:
        return cls(SegmentKind.WORKING_DIRECTORY)

    @classmethod
    def current_datetime(cls) -> DefaultPromptSegment:
        return cls(SegmentKind.CURRENT_DATETIME)

    @classmethod
    def empty(cls) -> DefaultPromptSegment:
        return cls(SegmentKind.EMPTY)

    def render(self) -> str:
        """The text this segment shows now."""
        if self.kind is SegmentKind.BASIC:
            return self.text
        if self.kind is SegmentKind.WORKING_DIRECTORY:
            try:
                return working_dir()
            except OSError:
                return "no path"
        if self.kind is SegmentKind.CURRENT_DATETIME:
            return current_datetime()
        return ""


@dataclass
class DefaultPrompt(Prompt):
    """A prompt with a configurable left and right segment."""

    left_prompt: DefaultPromptSegment = field(
        default_factory=DefaultPromptSegment.working_directory
    )
    right_prompt: DefaultPromptSegment = field(
        default_factory=DefaultPromptSegment.current_datetime
    )

    def render_prompt_left(self) -> str:
        return self.left_prompt.render()

    def render_prompt_right(self) -> str:
        return self.right_prompt.render()

    def render_prompt_indicator(self, prompt_mode: PromptEditMode) -> str:
        if prompt_mode.kind in (EditModeKind.DEFAULT, EditModeKind.EMACS):
            return DEFAULT_PROMPT_INDICATOR
        if prompt_mode.kind is EditModeKind.VI:
            if prompt_mode.vi_mode is PromptViMode.INSERT:
                return DEFAULT_VI_INSERT_PROMPT_INDICATOR
            return DEFAULT_VI_NORMAL_PROMPT_INDICATOR
        return f"({prompt_mode.name})"

    def render_prompt_multiline_indicator(self) -> str:
        return DEFAULT_MULTILINE_INDICATOR

    def render_prompt_history_search_indicator(
        self, history_search: PromptHistorySearch
    ) -> str:
        prefix = "failing " if history_search.status is PromptHistorySearchStatus.FAILING else ""
        return f"({prefix}reverse-search: {history_search.term}) "


def working_dir() -> str:
    """The current directory, with the home directory shown as ``~``."""
    path = os.getcwd()
    home = os.environ.get("USERPROFILE")
    if home is None:
        home = os.environ.get("HOME", path)
    if path != home:
        return path.replace(home, "~")
    return path


def current_datetime() -> str:
    """The local date and time as ``MM/DD/YYYY HH:MM:SS AM``."""
    now = datetime.now()
    meridiem = "AM" if now.hour < 12 else "PM"
    return f"{now.strftime('%m/%d/%Y %I:%M:%S')} {meridiem}"