"""Counting pass: builds the word frequency table from a sequence of lines."""

import logging
from collections import Counter
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping

from .sources import text_lines
from .tokenizer import DEFAULT_SEPARATORS, iter_words

logger = logging.getLogger(__name__)


def count_words(
    lines: Iterable[str],
    separators: FrozenSet[str] = DEFAULT_SEPARATORS
) -> Mapping[str, int]:
    """
    Count word occurrences across all lines.

    Each line is lowercased before scanning, so words never span a line
    boundary and counts are case-insensitive. The table is built fresh on
    every call and handed back as a read-only view.

    Args:
        lines: Lines of text (without trailing newlines)
        separators: Set of separator characters

    Returns:
        Read-only mapping of word -> occurrence count
    """
    counts: Counter = Counter()
    line_count = 0

    for line in lines:
        line_count += 1
        counts.update(iter_words(line.lower(), separators))

    logger.info(
        f"Counted {sum(counts.values())} words ({len(counts)} distinct) "
        f"across {line_count} lines"
    )
    return MappingProxyType(dict(counts))


def count_text(text: str, separators: FrozenSet[str] = DEFAULT_SEPARATORS) -> Mapping[str, int]:
    """Count words in an in-memory string."""
    return count_words(text_lines(text), separators)


def total_words(counts: Mapping[str, int]) -> int:
    """Total number of words counted, including repeats."""
    return sum(counts.values())
