"""Drawing the prompt, the buffer and menus on the terminal."""

from __future__ import annotations

import enum
import os
import re
import select
import sys
from dataclasses import dataclass
from typing import Protocol, TextIO

from .prompt import EditModeKind, Prompt, PromptEditMode, PromptViMode
from .prompt_lines import Menu, PromptLines
from .text import coerce_crlf, line_width

try:
    import termios
    import tty
except ImportError:  # not available on every platform
    termios = None
    tty = None

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
SAVE_POSITION = "\x1b7"
RESTORE_POSITION = "\x1b8"
CLEAR_FROM_CURSOR_DOWN = "\x1b[J"
CLEAR_ALL = "\x1b[2J"
CLEAR_PURGE = "\x1b[3J"
RESET = "\x1b[0m"

_DEFAULT_SIZE = (80, 24)
_POSITION_RESPONSE = re.compile(r"\x1b\[(\d+);(\d+)R")
_POSITION_TIMEOUT = 2.0


def _move_to(column: int, row: int) -> str:
    return f"\x1b[{row + 1};{column + 1}H"


def _move_up(rows: int) -> str:
    return f"\x1b[{rows}A"


def _line_count(text: str) -> int:
    """The number of lines ``text`` splits into, ignoring a final line feed."""
    if not text:
        return 0
    return text.count("\n") + (0 if text.endswith("\n") else 1)


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def skip_buffer_lines(text: str, skip: int, offset: int | None) -> str:
    """Skip ``skip`` lines of ``text`` and keep the next ``offset + 1`` lines.

    With no offset everything after the skipped lines is kept.
    """
    newlines = [match.start() for match in re.finditer("\n", text)]
    if skip == 0:
        start = 0
    elif skip - 1 < len(newlines):
        start = newlines[skip - 1] + 1
    else:
        start = len(text)

    if offset is None:
        limit = len(text)
    else:
        position = skip + offset
        limit = newlines[position] if position < len(newlines) else len(text)

    return text[start:limit].rstrip("\n")


class CursorShape(enum.Enum):
    """Cursor shapes, each with the escape sequence that selects it."""

    DEFAULT = "\x1b[0 q"
    BLINKING_BLOCK = "\x1b[1 q"
    STEADY_BLOCK = "\x1b[2 q"
    BLINKING_UNDERSCORE = "\x1b[3 q"
    STEADY_UNDERSCORE = "\x1b[4 q"
    BLINKING_BAR = "\x1b[5 q"
    STEADY_BAR = "\x1b[6 q"


@dataclass
class CursorConfig:
    """The cursor shape to use in each edit mode; None keeps the current one."""

    vi_insert: CursorShape | None = None
    vi_normal: CursorShape | None = None
    emacs: CursorShape | None = None

    def shape_for(self, mode: PromptEditMode) -> CursorShape | None:
        if mode.kind is EditModeKind.EMACS:
            return self.emacs
        if mode.kind is EditModeKind.VI:
            if mode.vi_mode is PromptViMode.INSERT:
                return self.vi_insert
            return self.vi_normal
        return None


class _Terminal(Protocol):
    def size(self) -> tuple[int, int]: ...

    def cursor_position(self) -> tuple[int, int]: ...


class TerminalState:
    """Queries the size of the terminal and the position of its cursor."""

    def __init__(self, input_stream: TextIO | None = None, output_stream: TextIO | None = None):
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output_stream if output_stream is not None else sys.stdout

    def size(self) -> tuple[int, int]:
        """The terminal size as ``(columns, rows)``."""
        size = os.get_terminal_size(self._output.fileno())
        return size.columns, size.lines

    def cursor_position(self) -> tuple[int, int]:
        """The zero-based cursor position as ``(column, row)``.

        Raises OSError when the terminal does not answer.
        """
        if termios is None:
            raise OSError("cursor position cannot be queried on this platform")
        fd = self._input.fileno()
        if not os.isatty(fd):
            raise OSError("input is not a terminal")
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            os.write(self._output.fileno(), b"\x1b[6n")
            response = ""
            while True:
                ready, _, _ = select.select([fd], [], [], _POSITION_TIMEOUT)
                if not ready:
                    raise OSError("the terminal did not report the cursor position")
                chunk = os.read(fd, 64)
                if not chunk:
                    raise OSError("the terminal closed while reporting the cursor position")
                response += chunk.decode("latin-1")
                match = _POSITION_RESPONSE.search(response)
                if match:
                    return int(match.group(2)) - 1, int(match.group(1)) - 1
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)


class Painter:
    """Writes the prompt and buffer to the terminal."""

    def __init__(self, stream: TextIO | None = None, terminal: _Terminal | None = None):
        self._stream = stream if stream is not None else sys.stderr
        self._terminal = terminal if terminal is not None else TerminalState()
        self._pending: list[str] = []
        self.prompt_start_row = 0
        self.terminal_size = (0, 0)
        self.last_required_lines = 0
        self.large_buffer = False

    def _queue(self, *parts: str) -> None:
        self._pending.extend(parts)

    def _flush(self) -> None:
        data = "".join(self._pending)
        self._pending.clear()
        self._stream.write(data)
        self._stream.flush()

    def screen_height(self) -> int:
        """Height of the terminal window."""
        return self.terminal_size[1]

    def screen_width(self) -> int:
        """Width of the terminal window."""
        return self.terminal_size[0]

    def remaining_lines(self) -> int:
        """Rows available from the prompt down."""
        return max(self.screen_height() - self.prompt_start_row, 0)

    def initialize_prompt_position(self) -> None:
        """Record the screen size and where the prompt starts for a new invocation."""
        size = tuple(self._terminal.size())
        self.terminal_size = _DEFAULT_SIZE if size == (0, 0) else size
        column, row = self._terminal.cursor_position()
        # Content already on the cursor's row is left intact.
        new_row = row + 1 if column > 0 else row
        if new_row == self.screen_height():
            self.print_crlf()
            new_row = max(new_row - 1, 0)
        self.prompt_start_row = new_row

    def _is_reset(self) -> bool:
        try:
            _, row = self._terminal.cursor_position()
        except OSError:
            return False
        return abs(row - self.prompt_start_row) > 1

    def repaint_buffer(
        self,
        prompt: Prompt,
        lines: PromptLines,
        prompt_mode: PromptEditMode,
        menu: Menu | None,
        use_ansi_coloring: bool,
        cursor_config: CursorConfig | None,
    ) -> None:
        """Draw the prompt and buffer, scrolling to make room when needed."""
        self._queue(HIDE_CURSOR)

        screen_width = self.screen_width()
        screen_height = self.screen_height()
        remaining_lines = self.remaining_lines()
        required_lines = lines.required_lines(screen_width, menu)

        self.large_buffer = required_lines >= screen_height

        if self.large_buffer or self._is_reset():
            self.prompt_start_row = 0
        elif required_lines >= remaining_lines:
            extra = max(required_lines - remaining_lines, 0)
            self._queue_universal_scroll(extra)
            self.prompt_start_row = max(self.prompt_start_row - extra, 0)

        self._queue(_move_to(0, self.prompt_start_row), CLEAR_FROM_CURSOR_DOWN)

        if self.large_buffer:
            self._print_large_buffer(prompt, lines, menu, use_ansi_coloring)
        else:
            self._print_small_buffer(prompt, lines, menu, use_ansi_coloring)

        self.last_required_lines = required_lines
        self._queue(RESTORE_POSITION)

        if cursor_config is not None:
            shape = cursor_config.shape_for(prompt_mode)
            if shape is not None:
                self._queue(shape.value)
        self._queue(SHOW_CURSOR)
        self._flush()

    def _print_right_prompt(self, lines: PromptLines) -> None:
        prompt_length_right = line_width(lines.prompt_str_right)
        screen_width = self.screen_width()
        start_position = max(screen_width - prompt_length_right, 0)
        input_width = lines.estimate_right_prompt_line_width(screen_width)

        row = self.prompt_start_row
        if lines.right_prompt_on_last_line:
            row += lines.prompt_lines_with_wrap(screen_width)

        if input_width <= start_position:
            self._queue(
                SAVE_POSITION,
                _move_to(start_position, row),
                coerce_crlf(lines.prompt_str_right),
                RESTORE_POSITION,
            )

    def _print_menu(self, menu: Menu, lines: PromptLines, use_ansi_coloring: bool) -> None:
        screen_width = self.screen_width()
        screen_height = self.screen_height()
        cursor_distance = lines.distance_from_prompt(screen_width)

        # Without room for the menu it overwrites the last rows of the buffer.
        if cursor_distance >= max(screen_height - 1, 0):
            starting_row = max(screen_height - menu.min_rows(), 0)
        else:
            starting_row = self.prompt_start_row + cursor_distance + 1

        remaining_lines = max(screen_height - starting_row, 0)
        menu_string = menu.menu_string(remaining_lines, use_ansi_coloring)
        self._queue(
            _move_to(0, starting_row),
            CLEAR_FROM_CURSOR_DOWN,
            menu_string.rstrip("\n"),
        )

    def _color(self, color) -> str:
        return f"\x1b[{color.foreground_code()}m"

    def _print_small_buffer(
        self, prompt: Prompt, lines: PromptLines, menu: Menu | None, use_ansi_coloring: bool
    ) -> None:
        if use_ansi_coloring:
            self._queue(self._color(prompt.get_prompt_color()))
        self._queue(coerce_crlf(lines.prompt_str_left))

        indicator = menu.indicator() if menu is not None else lines.prompt_indicator

        if use_ansi_coloring:
            self._queue(self._color(prompt.get_indicator_color()))
        self._queue(coerce_crlf(indicator))

        if use_ansi_coloring:
            self._queue(self._color(prompt.get_prompt_right_color()))
        self._print_right_prompt(lines)

        if use_ansi_coloring:
            self._queue(RESET, RESET)

        self._queue(lines.before_cursor, SAVE_POSITION, lines.after_cursor)

        if menu is not None:
            self._print_menu(menu, lines, use_ansi_coloring)
        else:
            self._queue(lines.hint)

    def _print_large_buffer(
        self, prompt: Prompt, lines: PromptLines, menu: Menu | None, use_ansi_coloring: bool
    ) -> None:
        screen_width = self.screen_width()
        screen_height = self.screen_height()
        cursor_distance = lines.distance_from_prompt(screen_width)
        remaining_lines = max(screen_height - cursor_distance, 0)

        prompt_lines = lines.prompt_lines_with_wrap(screen_width)
        indicator = menu.indicator() if menu is not None else lines.prompt_indicator

        # The first buffer line shares a row with the prompt indicator.
        before_cursor_lines = _line_count(lines.before_cursor)
        total_lines_before = max(prompt_lines + _line_count(indicator) + before_cursor_lines - 1, 0)

        # Rows that lie above the visible area.
        extra_rows = max(total_lines_before - screen_height, 0)

        if use_ansi_coloring:
            self._queue(self._color(prompt.get_prompt_color()))

        prompt_skipped = skip_buffer_lines(lines.prompt_str_left, extra_rows, None)
        self._queue(coerce_crlf(prompt_skipped))

        if extra_rows == 0:
            self._print_right_prompt(lines)

        extra_rows = max(extra_rows - prompt_lines, 0)

        indicator_skipped = skip_buffer_lines(indicator, extra_rows, None)
        self._queue(coerce_crlf(indicator_skipped))

        if use_ansi_coloring:
            self._queue(RESET)

        # With the cursor on the last row, the menu's minimum rows are taken
        # from the buffer.
        offset = None
        if menu is not None and cursor_distance >= max(screen_height - 1, 0):
            offset = max(before_cursor_lines - extra_rows - menu.min_rows(), 0)

        before_cursor_skipped = skip_buffer_lines(lines.before_cursor, extra_rows, offset)
        self._queue(before_cursor_skipped, SAVE_POSITION)

        if menu is not None:
            self._print_menu(menu, lines, use_ansi_coloring)
        else:
            # The cursor's own row counts among the remaining lines.
            offset = max(remaining_lines - 1, 0)
            self._queue(skip_buffer_lines(lines.after_cursor, 0, offset))
            self._queue(skip_buffer_lines(lines.hint, 0, offset))

    def handle_resize(self, width: int, height: int) -> None:
        """Update the screen size and prompt origin after a resize."""
        self.terminal_size = (width, height)
        try:
            _, row = self._terminal.cursor_position()
        except OSError:
            return
        self.prompt_start_row = row

    def paint_line(self, line: str) -> None:
        """Write ``line`` followed by CRLF."""
        self._queue(line, "\r\n")
        self._flush()

    def print_crlf(self) -> None:
        """Go to the beginning of the next line, also in raw mode."""
        self._queue("\r\n")
        self._flush()

    def clear_screen(self) -> None:
        """Scroll the output away so the prompt starts at the top of the screen."""
        self._queue(HIDE_CURSOR)
        _, num_lines = self._terminal.size()
        self._queue("\n" * (2 * num_lines))
        self._queue(_move_to(0, 0), SHOW_CURSOR)
        self._flush()
        self.initialize_prompt_position()

    def clear_scrollback(self) -> None:
        """Clear the screen and the scrollback."""
        self._queue(CLEAR_ALL, CLEAR_PURGE, _move_to(0, 0))
        self._flush()
        self.initialize_prompt_position()

    def move_cursor_to_end(self) -> None:
        """Move the cursor below the painted buffer so output does not overwrite it."""
        final_row = self.prompt_start_row + self.last_required_lines
        last_row = self.screen_height() - 1
        scroll = max(final_row - last_row, 0)
        if scroll:
            self._queue_universal_scroll(scroll)
        self._queue(_move_to(0, min(final_row, last_row)))
        self._flush()

    def print_external_message(self, messages: list[str], buffer: str, prompt: Prompt) -> None:
        """Queue messages above the prompt; nothing is flushed until the next repaint."""
        width = self.screen_width()
        prompt_len = len(prompt.render_prompt_right().encode()) + 3
        buffer_num_lines = 0
        for index, line in enumerate(_lines(buffer)):
            length = len(line.encode()) + (prompt_len if index == 0 else 0)
            buffer_num_lines += length // width + 1
        if buffer_num_lines > 1:
            self._queue(_move_up(buffer_num_lines - 1))

        erase_line = f"\r{' ' * width}\r"
        height = self.screen_height()
        for message in messages:
            self._queue(erase_line, message, "\r\n")
            new_start = self.prompt_start_row + 1
            self.prompt_start_row = height - 1 if new_start >= height else new_start

    def _queue_universal_scroll(self, num: int) -> None:
        """Scroll by printing line feeds on the last row; leaves the cursor there."""
        self._queue(_move_to(0, self.screen_height() - 1))
        self._queue(coerce_crlf("\n") * num)