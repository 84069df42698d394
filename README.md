# promptline

Building blocks for an interactive line editor running in a terminal:
prompt rendering, ANSI-aware width estimation, styled buffers, input
validation and a painter that draws the prompt and buffer to the screen.

## Installation

```
pip install promptline
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Modules

- `promptline.prompt` – the abstract `Prompt` class, `PromptEditMode`
  (built with `PromptEditMode.default()`, `.emacs()`, `.vi(vi_mode)` and
  `.custom(name)`), `PromptViMode`, `EditModeKind`, `PromptHistorySearch` and
  `PromptHistorySearchStatus`.
- `promptline.default_prompt` – `DefaultPrompt`, made of two
  `DefaultPromptSegment`s: `basic(text)`, `working_directory()`,
  `current_datetime()` or `empty()`. By default the left segment shows the
  working directory (home shown as `~`) and the right one the local date and
  time as `MM/DD/YYYY HH:MM:SS AM`.
- `promptline.ansi` – `Color` (named colors, `Color.fixed(index)`,
  `Color.rgb(r, g, b)`) and `Style`, which wraps text in SGR escape sequences.
- `promptline.styled` – `StyledText`, a list of `(Style, str)` pieces that
  can be rendered whole, as plain text, or split at the cursor position with
  the prompt's multiline indicator after every line feed.
- `promptline.text` – `coerce_crlf`, `strip_ansi`, `line_width`,
  `estimate_required_lines`, `estimate_single_line_wraps` and
  `remove_last_grapheme`.
- `promptline.validator` – `Validator`, `ValidationResult` and
  `DefaultValidator`, which reports input with an odd number of double quotes
  or an unclosed bracket as incomplete; `incomplete_brackets` checks the
  brackets alone.
- `promptline.prompt_lines` – the abstract `Menu` class and `PromptLines`,
  which estimates how many rows the prompt, buffer, hint or menu need.
- `promptline.painter` – `Painter`, which writes the prompt, buffer, hint
  and menu to a stream (standard error by default); `TerminalState`, which
  reads the terminal size and queries the cursor position; `CursorConfig`
  and `CursorShape` for per-mode cursor shapes; `skip_buffer_lines`.
- `promptline.terminal` – `BracketedPasteGuard` and `KittyProtocolGuard`,
  usable as context managers, and `kitty_protocol_available()`.
- `promptline.query` – `get_keybinding_modifiers()`, `get_keycodes()` and
  `get_prompt_edit_modes()`.
- `promptline.errors` – `LineEditorError` and its subclasses
  `HistoryDatabaseError`, `OtherHistoryError`, `HistoryFeatureUnsupported`
  and `LineEditorIOError`.

## Examples

A prompt with custom text on the left and nothing on the right:

```python
from promptline.default_prompt import DefaultPrompt, DefaultPromptSegment
from promptline.prompt import PromptEditMode

prompt = DefaultPrompt(
    DefaultPromptSegment.basic("db"),
    DefaultPromptSegment.empty(),
)
print(prompt.render_prompt_left() + prompt.render_prompt_indicator(PromptEditMode.emacs()))
```

Checking whether input is complete:

```python
from promptline.validator import DefaultValidator, ValidationResult

validator = DefaultValidator()
assert validator.validate('print("hi"') is ValidationResult.INCOMPLETE
assert validator.validate('print("hi")') is ValidationResult.COMPLETE
```

Measuring text that contains escape sequences:

```python
from promptline.text import coerce_crlf, line_width

line_width("\x1b[32mhello\x1b[0m")   # 5
coerce_crlf("one\ntwo")              # "one\r\ntwo"
```

Enabling bracketed paste for the duration of a block:

```python
from promptline.terminal import BracketedPasteGuard

guard = BracketedPasteGuard()
guard.set(True)
with guard:
    ...  # read input
```

## What it does not do

promptline draws and measures; it does not read keys. There is no editing
loop, no line buffer, no keybindings, no history storage and no concrete
menu: `Menu` is an abstract class to implement yourself, and the error
classes for history are provided only for code that adds a history. The
package installs no command. Cursor position and kitty protocol queries
need a POSIX terminal; elsewhere they report failure.