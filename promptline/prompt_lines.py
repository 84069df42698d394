"""The prompt and buffer pieces a painter draws, with their line estimates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .prompt import Prompt, PromptEditMode, PromptHistorySearch
from .text import coerce_crlf, estimate_required_lines, line_width

_MAX_WIDTH = 65535


def _lines(text: str) -> list[str]:
    """Split on LF, dropping a trailing CR per line and a final empty line."""
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class Menu(ABC):
    """A menu drawn below the buffer."""

    @abstractmethod
    def indicator(self) -> str:
        """The indicator that replaces the prompt indicator while the menu is shown."""

    @abstractmethod
    def min_rows(self) -> int:
        """The fewest rows the menu needs."""

    @abstractmethod
    def menu_string(self, available_lines: int, use_ansi_coloring: bool) -> str:
        """The menu as it fits into ``available_lines`` rows."""

    @abstractmethod
    def menu_required_lines(self, terminal_columns: int) -> int:
        """The rows the whole menu needs at the given width."""


@dataclass
class PromptLines:
    """The prompt strings together with the input around the cursor."""

    prompt_str_left: str
    prompt_str_right: str
    prompt_indicator: str
    before_cursor: str
    after_cursor: str
    hint: str
    right_prompt_on_last_line: bool = False

    @classmethod
    def build(
        cls,
        prompt: Prompt,
        prompt_mode: PromptEditMode,
        history_indicator: PromptHistorySearch | None,
        before_cursor: str,
        after_cursor: str,
        hint: str,
    ) -> PromptLines:
        """Render the prompt and normalise the input's line endings."""
        if history_indicator is not None:
            indicator = prompt.render_prompt_history_search_indicator(history_indicator)
        else:
            indicator = prompt.render_prompt_indicator(prompt_mode)
        return cls(
            prompt_str_left=prompt.render_prompt_left(),
            prompt_str_right=prompt.render_prompt_right(),
            prompt_indicator=indicator,
            before_cursor=coerce_crlf(before_cursor),
            after_cursor=coerce_crlf(after_cursor),
            hint=coerce_crlf(hint),
            right_prompt_on_last_line=prompt.right_prompt_on_last_line(),
        )

    def required_lines(self, terminal_columns: int, menu: Menu | None) -> int:
        """Rows needed for prompt, buffer and either the hint or the menu."""
        text = self.prompt_str_left + self.prompt_indicator + self.before_cursor + self.after_cursor
        if menu is None:
            return estimate_required_lines(text + self.hint, terminal_columns)
        lines = estimate_required_lines(text, terminal_columns)
        return lines + menu.menu_required_lines(terminal_columns)

    def distance_from_prompt(self, terminal_columns: int) -> int:
        """Rows between the start of the prompt and the cursor, with wrapping."""
        text = self.prompt_str_left + self.prompt_indicator + self.before_cursor
        return max(estimate_required_lines(text, terminal_columns) - 1, 0)

    def prompt_lines_with_wrap(self, screen_width: int) -> int:
        """Extra rows the prompt itself takes, with wrapping."""
        text = self.prompt_str_left + self.prompt_indicator
        return max(estimate_required_lines(text, screen_width) - 1, 0)

    def estimate_right_prompt_line_width(self, terminal_columns: int) -> int:
        """Width taken on the row where the right prompt goes."""
        left_lines = _lines(self.prompt_str_left)
        input_lines = _lines(self.before_cursor + self.after_cursor + self.hint)
        first_input = input_lines[0] if input_lines else None

        estimate = 0
        if self.right_prompt_on_last_line:
            if left_lines:
                estimate += line_width(left_lines[-1])
                estimate += line_width(self.prompt_indicator)
                if first_input is not None:
                    estimate += line_width(first_input)
        else:
            required = estimate_required_lines(self.prompt_str_left, terminal_columns)
            if left_lines:
                estimate += line_width(left_lines[0])
            if required == 1:
                estimate += line_width(self.prompt_indicator)
                if first_input is not None:
                    estimate += line_width(first_input)

        return min(estimate, _MAX_WIDTH)