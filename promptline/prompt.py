"""The prompt interface and the editing modes it is rendered for."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass

from .ansi import Color

DEFAULT_PROMPT_COLOR = Color.LIGHT_GREEN
DEFAULT_PROMPT_MULTILINE_COLOR = Color.LIGHT_BLUE
DEFAULT_INDICATOR_COLOR = Color.LIGHT_CYAN
DEFAULT_PROMPT_RIGHT_COLOR = Color.fixed(5)


class PromptHistorySearchStatus(enum.Enum):
    """Whether the current history search finds anything."""

    PASSING = enum.auto()
    FAILING = enum.auto()


@dataclass
class PromptHistorySearch:
    """The state of a history search shown in the prompt."""

    status: PromptHistorySearchStatus
    term: str


class PromptViMode(enum.Enum):
    """The vi-specific modes of the prompt."""

    NORMAL = enum.auto()
    INSERT = enum.auto()


class EditModeKind(enum.Enum):
    """The families of editing modes."""

    DEFAULT = enum.auto()
    EMACS = enum.auto()
    VI = enum.auto()
    CUSTOM = enum.auto()


@dataclass(frozen=True)
class PromptEditMode:
    """The mode the prompt is in; vi modes carry a sub-mode, custom modes a name."""

    kind: EditModeKind
    vi_mode: PromptViMode | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if (self.kind is EditModeKind.VI) != (self.vi_mode is not None):
            raise ValueError("a vi sub-mode is given exactly for vi modes")
        if (self.kind is EditModeKind.CUSTOM) != (self.name is not None):
            raise ValueError("a name is given exactly for custom modes")

    @classmethod
    def default(cls) -> PromptEditMode:
        return cls(EditModeKind.DEFAULT)

    @classmethod
    def emacs(cls) -> PromptEditMode:
        return cls(EditModeKind.EMACS)

    @classmethod
    def vi(cls, vi_mode: PromptViMode = PromptViMode.NORMAL) -> PromptEditMode:
        return cls(EditModeKind.VI, vi_mode=vi_mode)

    @classmethod
    def custom(cls, name: str) -> PromptEditMode:
        return cls(EditModeKind.CUSTOM, name=name)

    @classmethod
    def iter_all(cls) -> Iterator[PromptEditMode]:
        """One mode of each kind, with default contents."""
        yield cls.default()
        yield cls.emacs()
        yield cls.vi()
        yield cls.custom("")

    def __str__(self) -> str:
        if self.kind is EditModeKind.DEFAULT:
            return "Default"
        if self.kind is EditModeKind.EMACS:
            return "Emacs"
        if self.kind is EditModeKind.VI:
            return "Vi_Normal\nVi_Insert"
        return f"Custom_{self.name}"


class Prompt(ABC):
    """Provides the text and colors drawn in front of the input buffer."""

    @abstractmethod
    def render_prompt_left(self) -> str:
        """The left (main) prompt."""

    @abstractmethod
    def render_prompt_right(self) -> str:
        """The right prompt."""

    @abstractmethod
    def render_prompt_indicator(self, prompt_mode: PromptEditMode) -> str:
        """The indicator that follows the prompt and reflects the edit mode."""

    @abstractmethod
    def render_prompt_multiline_indicator(self) -> str:
        """The indicator shown before each continuation line."""

    @abstractmethod
    def render_prompt_history_search_indicator(
        self, history_search: PromptHistorySearch
    ) -> str:
        """The indicator shown during a reverse history search."""

    def get_prompt_color(self) -> Color:
        return DEFAULT_PROMPT_COLOR

    def get_prompt_multiline_color(self) -> Color:
        return DEFAULT_PROMPT_MULTILINE_COLOR

    def get_indicator_color(self) -> Color:
        return DEFAULT_INDICATOR_COLOR

    def get_prompt_right_color(self) -> Color:
        return DEFAULT_PROMPT_RIGHT_COLOR

    def right_prompt_on_last_line(self) -> bool:
        """Whether the right prompt goes on the last prompt line instead of the first."""
        return False