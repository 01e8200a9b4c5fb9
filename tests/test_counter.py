"""
Tests for the counting pass.
"""

import pytest
from tagcloud.counter import count_words, count_text, total_words


SPACE_ONLY = frozenset(" ")


def test_count_simple_sentence():
    """Test counting with a space-only separator set."""
    counts = count_text("the cat the dog the", SPACE_ONLY)
    assert dict(counts) == {"the": 3, "cat": 1, "dog": 1}


def test_count_is_case_insensitive():
    """Test that lines are lowercased before counting."""
    counts = count_words(["The THE the", "tHe"])
    assert dict(counts) == {"the": 4}


def test_words_do_not_span_lines():
    """Test that a line break ends a word even without separators."""
    counts = count_words(["ab", "cd"], SPACE_ONLY)
    assert dict(counts) == {"ab": 1, "cd": 1}


def test_punctuation_and_digits_ignored(sample_text):
    """Test counting the shared sample text."""
    counts = count_text(sample_text)
    assert counts["the"] == 4
    assert counts["dog"] == 2
    assert counts["sat"] == 2
    assert counts["of"] == 2
    assert counts["cats"] == 1
    assert "12" not in counts
    assert "" not in counts


def test_empty_input():
    """Test that no lines produce an empty table."""
    assert dict(count_words([])) == {}
    assert dict(count_words(["", "   ", "..."])) == {}


def test_result_is_read_only():
    """Test that the returned table cannot be mutated."""
    counts = count_text("a b a")
    with pytest.raises(TypeError):
        counts["a"] = 10
    with pytest.raises(TypeError):
        del counts["b"]


def test_counting_is_repeatable(sample_text):
    """Test that two passes over the same input give identical tables."""
    first = count_text(sample_text)
    second = count_text(sample_text)
    assert dict(first) == dict(second)
    assert first is not second


def test_consumes_generator_once():
    """Test that a lazy, non-restartable line source is supported."""
    lines = (line for line in ["one two", "two"])
    counts = count_words(lines)
    assert dict(counts) == {"one": 1, "two": 2}
    assert list(lines) == []


def test_total_words(simple_counts):
    """Test the total across all counts."""
    assert total_words(simple_counts) == 5
    assert total_words({}) == 0
