"""Errors raised by the line editor."""

from __future__ import annotations


class LineEditorError(Exception):
    """Base class for all line editor errors."""


class HistoryDatabaseError(LineEditorError):
    """An error reported by the history database."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"error within history database: {message}")


class OtherHistoryError(LineEditorError):
    """A generic error within the history."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"error within history: {message}")


class HistoryFeatureUnsupported(LineEditorError):
    """The history backend does not support a requested feature."""

    def __init__(self, history: str, feature: str) -> None:
        self.history = history
        self.feature = feature
        super().__init__(f"the history {history} does not support feature {feature}")


class LineEditorIOError(LineEditorError):
    """An I/O failure while talking to the terminal or the file system."""

    def __init__(self, error: OSError) -> None:
        self.error = error
        super().__init__(f"I/O error: {error}")
        self.__cause__ = error