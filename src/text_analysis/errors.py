"""Exceptions raised around the text analyzer."""


class TextAnalysisError(Exception):
    """Base class for all errors reported by the application."""


class EmptyTextError(TextAnalysisError, ValueError):
    """Raised when the user asks to analyze empty or whitespace-only text."""

    def __init__(self, message: str = "Please enter some text"):
        super().__init__(message)


class ConfigError(TextAnalysisError):
    """Raised when config.yaml cannot be read or has the wrong shape."""
