"""Caller-side controller: input validation, optional delay and the current result."""

import logging
import time
from typing import Callable, Optional, Tuple

from src.text_analysis.engine import WHITESPACE_CHARS, WHITESPACE_PATTERN, analyze
from src.text_analysis.errors import EmptyTextError
from src.text_analysis.result import AnalysisResult

logger = logging.getLogger(__name__)


def input_counts(text: str) -> Tuple[int, int]:
    """Characters and whitespace-separated words of the raw input, for the caption under the text box."""
    return len(text), sum(1 for word in WHITESPACE_PATTERN.split(text) if word)


class AnalysisSession:
    """Validate input, apply the optional delay and hold the result of the last analysis."""

    def __init__(self, latency: float = 0.0, sleep: Callable[[float], None] = time.sleep):
        """
        Initialize session.

        Args:
            latency: Seconds to wait before analyzing (0 disables the wait)
            sleep: Function used for waiting, replaceable in tests
        """
        if latency < 0:
            raise ValueError(f"latency must not be negative, got {latency}")
        self.latency = latency
        self._sleep = sleep
        self.result: Optional[AnalysisResult] = None

    @staticmethod
    def validate(text: str) -> str:
        """
        Reject text that is empty after trimming.

        Args:
            text: Raw user input

        Returns:
            The text, unchanged

        Raises:
            EmptyTextError: If text contains only whitespace
        """
        if not text.strip(WHITESPACE_CHARS):
            logger.info("Rejected analysis request with empty text")
            raise EmptyTextError()
        return text

    def run(self, text: str) -> AnalysisResult:
        """
        Validate, wait for the configured latency and analyze the text.

        The new result replaces any previous one. If validation fails the
        previous result is kept and the analyzer is not called.

        Args:
            text: Raw user input

        Returns:
            AnalysisResult for text
        """
        self.validate(text)

        if self.latency > 0:
            self._sleep(self.latency)

        logger.debug("Analyzing %d characters", len(text))
        self.result = analyze(text)
        return self.result

    def clear(self) -> None:
        """Forget the last result."""
        self.result = None

    @property
    def has_result(self) -> bool:
        return self.result is not None
