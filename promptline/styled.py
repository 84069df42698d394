"""Text made of styled pieces, as produced by syntax highlighting."""

from __future__ import annotations

from dataclasses import dataclass, field

from .ansi import Style
from .prompt import Prompt
from .text import strip_ansi


def _render_piece(style: Style, text: str, prompt_style: Style, multiline_prompt: str) -> str:
    """Paint ``text``, putting the multiline indicator after every line feed."""
    continuation = prompt_style.paint(f"\n{multiline_prompt}")
    return continuation.join(style.paint(line) for line in text.split("\n"))


@dataclass
class StyledText:
    """A buffer of ``(Style, text)`` pieces."""

    buffer: list[tuple[Style, str]] = field(default_factory=list)

    def push(self, styled_string: tuple[Style, str]) -> None:
        """Append a styled piece."""
        self.buffer.append(styled_string)

    def render_around_insertion_point(
        self, insertion_point: int, prompt: Prompt, use_ansi_coloring: bool
    ) -> tuple[str, str]:
        """Render the text split at ``insertion_point`` into the parts before and after it.

        Continuation lines get the prompt's multiline indicator.  Without ANSI
        coloring all escape sequences are removed from both parts.
        """
        multiline_prompt = prompt.render_prompt_multiline_indicator()
        prompt_style = Style().fg(prompt.get_prompt_multiline_color())

        left: list[str] = []
        right: list[str] = []
        position = 0
        for style, text in self.buffer:
            end = position + len(text)
            if position >= insertion_point:
                right.append(_render_piece(style, text, prompt_style, multiline_prompt))
            elif end <= insertion_point:
                left.append(_render_piece(style, text, prompt_style, multiline_prompt))
            else:
                offset = insertion_point - position
                left.append(_render_piece(style, text[:offset], prompt_style, multiline_prompt))
                right.append(_render_piece(style, text[offset:], prompt_style, multiline_prompt))
            position = end

        left_string = "".join(left)
        right_string = "".join(right)
        if use_ansi_coloring:
            return left_string, right_string
        return strip_ansi(left_string), strip_ansi(right_string)

    def render_simple(self) -> str:
        """The whole text with each piece painted in its style."""
        return "".join(style.paint(text) for style, text in self.buffer)

    def raw_string(self) -> str:
        """The whole text without any styling."""
        return "".join(text for _, text in self.buffer)