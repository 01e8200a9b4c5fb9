"""
Tag Cloud Generator

Counts word frequencies in a text file and renders the most frequent
words as an HTML tag cloud, sized by frequency and listed alphabetically.
"""

from .tokenizer import (
    DEFAULT_SEPARATORS,
    build_separators,
    next_word_or_separator,
    iter_tokens,
    iter_words,
)
from .counter import count_words, count_text
from .models import RankedEntry, TagCloud
from .config import TagCloudConfig
from .ranker import FrequencyRanker, rank_words
from .pipeline import TagCloudPipeline

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SEPARATORS",
    "build_separators",
    "next_word_or_separator",
    "iter_tokens",
    "iter_words",
    "count_words",
    "count_text",
    "RankedEntry",
    "TagCloud",
    "TagCloudConfig",
    "FrequencyRanker",
    "rank_words",
    "TagCloudPipeline",
]
