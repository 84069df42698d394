"""Validation of input buffers for completeness."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod


class ValidationResult(enum.Enum):
    """Whether the input is complete."""

    INCOMPLETE = enum.auto()
    COMPLETE = enum.auto()


class Validator(ABC):
    """Checks whether the current buffer is complete or needs more lines."""

    @abstractmethod
    def validate(self, line: str) -> ValidationResult:
        """Return the validation result for ``line``."""


class DefaultValidator(Validator):
    """Flags input with unbalanced double quotes or unclosed brackets."""

    def validate(self, line: str) -> ValidationResult:
        if line.count('"') % 2 == 1 or incomplete_brackets(line):
            return ValidationResult.INCOMPLETE
        return ValidationResult.COMPLETE


_CLOSING = {"{": "}", "[": "]", "(": ")"}


def incomplete_brackets(line: str) -> bool:
    """Return True if ``line`` leaves an opening bracket unclosed.

    A closing bracket only closes the innermost open one when it matches.
    """
    expected: list[str] = []
    for char in line:
        if char in _CLOSING:
            expected.append(_CLOSING[char])
        elif char in "}])" and expected and expected[-1] == char:
            expected.pop()
    return bool(expected)