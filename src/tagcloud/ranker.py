"""
Frequency ranking and font tier assignment.

Ranking is a two-phase sort: words are first ordered by count to pick the
top K and give each a font tier, then the selected words are re-sorted
alphabetically for display so a reader can scan the cloud.
"""

import logging
import math
from typing import List, Mapping, Optional, Sequence, Tuple

from .config import TagCloudConfig
from .counter import total_words
from .errors import InvalidCountError
from .models import RankedEntry, TagCloud

logger = logging.getLogger(__name__)


def _by_count_desc(item: Tuple[str, int]) -> Tuple[int, str]:
    # equal counts fall back to alphabetical order
    word, count = item
    return (-count, word)


def _alphabetical(entry: RankedEntry) -> Tuple[str, str]:
    return (entry.word.lower(), entry.word)


def validate_count(count) -> int:
    """
    Validate a requested word count.

    Raises:
        InvalidCountError: If count is not an integer or is negative
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidCountError(count)
    if count < 0:
        raise InvalidCountError(count)
    return count


def batch_size_for(count: int, batch_divisor: int) -> int:
    """Number of consecutive ranks that share a tier under the batch scale."""
    return count // batch_divisor + 1


def select_top(counts: Mapping[str, int], count: int) -> List[Tuple[str, int]]:
    """Return the ``count`` most frequent (word, count) pairs, most frequent first."""
    ordered = sorted(counts.items(), key=_by_count_desc)
    return ordered[:count]


def sort_alphabetically(entries: Sequence[RankedEntry]) -> List[RankedEntry]:
    """Order entries by word, ignoring case."""
    return sorted(entries, key=_alphabetical)


class FrequencyRanker:
    """
    Selects the most frequent words and assigns font tiers.

    Two tier scales are available:

    - ``batch``: ranks are grouped into batches of ``K // batch_divisor + 1``;
      the first batch gets ``max_tier`` and each following batch one less,
      never going below ``min_tier``.
    - ``log``: tiers are interpolated on a log scale between the smallest and
      largest selected counts.
    """

    def __init__(self, config: Optional[TagCloudConfig] = None):
        """
        Initialize the ranker.

        Args:
            config: Tier settings (default: TagCloudConfig())
        """
        self.config = config or TagCloudConfig()

    def assign_tiers(self, selected: Sequence[Tuple[str, int]], count: int) -> List[RankedEntry]:
        """
        Give each selected word a font tier.

        Args:
            selected: (word, count) pairs ordered by count, most frequent first
            count: The requested number of words (drives batch size)

        Returns:
            RankedEntry list in the same order as ``selected``
        """
        if self.config.scale == "log":
            return self._assign_log_tiers(selected)
        return self._assign_batch_tiers(selected, count)

    def _assign_batch_tiers(self, selected, count):
        batch_size = batch_size_for(count, self.config.batch_divisor)
        logger.debug(f"Assigning batch tiers: K={count}, batch size={batch_size}")

        entries = []
        for rank, (word, occurrences) in enumerate(selected):
            tier = max(self.config.max_tier - rank // batch_size, self.config.min_tier)
            entries.append(RankedEntry(word=word, count=occurrences, tier=tier))
        return entries

    def _assign_log_tiers(self, selected):
        if not selected:
            return []

        high = math.log(selected[0][1]) if selected[0][1] > 0 else 0.0
        low = math.log(selected[-1][1]) if selected[-1][1] > 0 else 0.0
        spread = self.config.max_tier - self.config.min_tier
        logger.debug(f"Assigning log tiers between counts {selected[-1][1]} and {selected[0][1]}")

        entries = []
        for word, occurrences in selected:
            if high == low:
                tier = self.config.max_tier
            else:
                position = math.log(occurrences) if occurrences > 0 else 0.0
                tier = self.config.min_tier + round((position - low) / (high - low) * spread)
            entries.append(RankedEntry(word=word, count=occurrences, tier=tier))
        return entries

    def rank(self, counts: Mapping[str, int], count: int) -> TagCloud:
        """
        Build a tag cloud from a word count table.

        Args:
            counts: Word -> occurrence count mapping
            count: Number of words to include; may exceed the number of
                distinct words, in which case every word is included

        Returns:
            TagCloud with entries in alphabetical order

        Raises:
            InvalidCountError: If count is negative or not an integer
        """
        count = validate_count(count)

        selected = select_top(counts, count)
        entries = sort_alphabetically(self.assign_tiers(selected, count))

        if len(entries) < count:
            logger.info(f"Requested {count} words but only {len(entries)} distinct words available")

        return TagCloud(
            entries=tuple(entries),
            requested_count=count,
            distinct_words=len(counts),
            total_words=total_words(counts),
        )


def rank_words(
    counts: Mapping[str, int],
    count: int,
    config: Optional[TagCloudConfig] = None
) -> TagCloud:
    """Rank words with a one-off FrequencyRanker."""
    return FrequencyRanker(config).rank(counts, count)
