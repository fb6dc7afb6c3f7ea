"""Shared fixtures for the text analysis tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from src.text_analysis.engine import analyze


@pytest.fixture
def sample_text() -> str:
    return (
        "Alice loves Python. Python is a great language, and Alice thinks it is the best! "
        "Bob prefers Rust? Rust is good too. Paris hosted the conference."
    )


@pytest.fixture
def sample_result(sample_text):
    return analyze(sample_text)
