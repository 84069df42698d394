"""Prompt rendering, ANSI-aware measuring, validation and terminal painting for line editors."""

__version__ = "0.1.0"

__all__ = [
    "ansi",
    "default_prompt",
    "errors",
    "painter",
    "prompt",
    "prompt_lines",
    "query",
    "styled",
    "terminal",
    "text",
    "validator",
]