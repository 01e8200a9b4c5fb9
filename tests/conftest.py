"""
Shared pytest fixtures for test suite.

Provides sample texts, files and count tables used across test modules.
"""

import os

import pytest


SAMPLE_TEXT = """The cat sat on the mat.
The dog -- a big dog -- sat on the log!
Cats and dogs: 12 of them, 3 of us.
"""


@pytest.fixture(autouse=True)
def clean_tagcloud_env(monkeypatch):
    """Remove TAGCLOUD_* variables so tests see default configuration."""
    for key in list(os.environ):
        if key.startswith("TAGCLOUD_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sample_text():
    """Multi-line sample text with punctuation, digits and mixed case."""
    return SAMPLE_TEXT


@pytest.fixture
def sample_file(tmp_path, sample_text):
    """Sample text written to a temporary file."""
    path = tmp_path / "sample.txt"
    path.write_text(sample_text, encoding="utf-8")
    return path


@pytest.fixture
def simple_counts():
    """Counts for 'the cat the dog the'."""
    return {"the": 3, "cat": 1, "dog": 1}


@pytest.fixture
def many_counts():
    """One hundred words with distinct counts, word000 most frequent."""
    return {f"word{i:03d}": 1000 - i for i in range(100)}
