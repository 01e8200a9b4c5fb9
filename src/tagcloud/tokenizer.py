"""
Word and separator scanning.

Text is split into alternating maximal runs of separator characters and
word characters. The separator set is fixed at startup but every function
takes it as a parameter so callers can supply their own.
"""

from typing import FrozenSet, Iterable, Iterator

# Digits, punctuation and whitespace. Letters are never separators, and text
# is lowercased before scanning, so case does not matter here.
SEPARATOR_CHARS = "_,./;'[]=-?!:()*&^%$#@0123456789\"`~ \t"

DEFAULT_SEPARATORS: FrozenSet[str] = frozenset(SEPARATOR_CHARS)


def build_separators(chars: Iterable[str]) -> FrozenSet[str]:
    """Build an immutable separator set from a string or iterable of characters."""
    separators = frozenset(chars)
    for char in separators:
        if len(char) != 1:
            raise ValueError(f"Separator entries must be single characters, got {char!r}")
    return separators


def next_word_or_separator(text: str, position: int, separators: FrozenSet[str]) -> str:
    """
    Return the word or separator run starting at ``position``.

    The result is the longest substring of ``text`` beginning at ``position``
    whose characters are all separators or all non-separators, matching the
    class of ``text[position]``.

    Args:
        text: String to scan
        position: Starting index, 0 <= position < len(text)
        separators: Set of separator characters

    Returns:
        The maximal word or separator run at ``position``
    """
    assert text is not None, "text must not be None"
    assert separators is not None, "separators must not be None"
    assert 0 <= position < len(text), (
        f"position {position} out of range for text of length {len(text)}"
    )

    in_separator = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == in_separator:
        end += 1
    return text[position:end]


def is_separator_run(token: str, separators: FrozenSet[str]) -> bool:
    """Check whether a token returned by the scanner is a separator run."""
    return bool(token) and token[0] in separators


def iter_tokens(text: str, separators: FrozenSet[str] = DEFAULT_SEPARATORS) -> Iterator[str]:
    """Yield every word and separator run in ``text``, in order."""
    position = 0
    while position < len(text):
        token = next_word_or_separator(text, position, separators)
        yield token
        position += len(token)


def iter_words(line: str, separators: FrozenSet[str] = DEFAULT_SEPARATORS) -> Iterator[str]:
    """
    Yield the words of a single line, skipping separator runs.

    The caller is responsible for case normalization.
    """
    for token in iter_tokens(line, separators):
        if not is_separator_run(token, separators):
            yield token
