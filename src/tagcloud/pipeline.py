"""
TagCloudPipeline - ties the counting, ranking and rendering stages together.
"""

import logging
from pathlib import Path
from typing import Iterable, Mapping, Optional, Union

from .config import TagCloudConfig
from .counter import count_words
from .models import TagCloud
from .ranker import FrequencyRanker, validate_count
from .renderer import render, write_output
from .sources import open_lines

logger = logging.getLogger(__name__)


class TagCloudPipeline:
    """
    Pipeline for tag cloud generation.

    Stages:
    1. Count - tokenize lines and build the word count table
    2. Rank - select the top K words and assign font tiers
    3. Render - produce HTML, JSON or text output
    """

    def __init__(self, config: Optional[TagCloudConfig] = None):
        """
        Initialize the pipeline.

        Args:
            config: Generation settings (default: TagCloudConfig())
        """
        self.config = config or TagCloudConfig()
        self.ranker = FrequencyRanker(self.config)
        self.counts: Optional[Mapping[str, int]] = None
        self.cloud: Optional[TagCloud] = None

    def count(self, lines: Iterable[str]) -> Mapping[str, int]:
        """
        Stage 1: Count word occurrences.

        Replaces any previously counted table.
        """
        self.counts = count_words(lines, self.config.separators)
        self.cloud = None
        return self.counts

    def rank(self, count: int) -> TagCloud:
        """
        Stage 2: Rank counted words into a tag cloud.

        Raises:
            ValueError: If count() has not been called
            InvalidCountError: If count is negative or not an integer
        """
        if self.counts is None:
            raise ValueError("Cannot rank words before counting. Call count() first.")
        self.cloud = self.ranker.rank(self.counts, count)
        return self.cloud

    def render(self, source_name: str, output_format: str = "html") -> str:
        """
        Stage 3: Render the ranked cloud.

        Raises:
            ValueError: If rank() has not been called
        """
        if self.cloud is None:
            raise ValueError("Cannot render before ranking. Call rank() first.")
        return render(self.cloud, source_name, output_format, self.config)

    def generate(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
        count: int,
        output_format: str = "html",
        source_name: Optional[str] = None
    ) -> TagCloud:
        """
        Run every stage and write the result to ``output_path``.

        Args:
            input_path: Text file to read
            output_path: File to write
            count: Number of words in the cloud
            output_format: One of html, json, text
            source_name: Name shown in the output (default: input_path)

        Returns:
            The ranked TagCloud

        Raises:
            SourceUnavailableError: If the input cannot be opened
            OutputUnavailableError: If the output cannot be written
            InvalidCountError: If count is negative or not an integer
        """
        validate_count(count)
        logger.info(f"Generating top {count} words from {input_path}")
        self.count(open_lines(input_path, self.config.encoding))
        cloud = self.rank(count)
        content = self.render(source_name or str(input_path), output_format)
        write_output(content, output_path, self.config.encoding)
        return cloud
