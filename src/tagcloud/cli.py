"""
CLI tool for generating tag clouds from text files.

Reads a text file, counts word frequencies and writes the most frequent
words as an HTML tag cloud (or prints them as a table).
"""

import json
import logging
import os
import sys
from typing import Optional

import click
from dotenv import load_dotenv

from .config import TagCloudConfig, TIER_SCALES
from .counter import count_words
from .errors import TagCloudError, error_to_dict
from .pipeline import TagCloudPipeline
from .ranker import FrequencyRanker
from .renderer import OUTPUT_FORMATS, render_text
from .sources import open_lines

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else os.getenv("TAGCLOUD_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _load_config(**overrides) -> TagCloudConfig:
    try:
        return TagCloudConfig.from_env(**overrides)
    except TagCloudError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose: bool) -> None:
    """Generate tag clouds from text files."""
    _configure_logging(verbose)


@cli.command()
@click.option('--input', '-i', 'input_path', prompt='name of an input file',
              type=click.Path(exists=True, dir_okay=False, readable=True),
              help='Text file to read')
@click.option('--output', '-o', 'output_path', prompt='name of an output file',
              type=click.Path(dir_okay=False, writable=True),
              help='File to write the tag cloud to')
@click.option('--count', '-n', prompt='the number of words to be included in the generated tag cloud',
              type=int, help='Number of words in the cloud')
@click.option('--format', 'output_format', type=click.Choice(OUTPUT_FORMATS),
              default='html', help='Output format (default: html)')
@click.option('--title-source', type=str, help='Name shown in the title (default: input path)')
@click.option('--inline-css/--no-inline-css', default=None,
              help='Embed font-size rules for every tier in the document')
@click.option('--scale', type=click.Choice(TIER_SCALES), default=None,
              help='Tier scale (default: batch)')
@click.option('--encoding', type=str, default=None, help='Input and output encoding (default: utf-8)')
def generate(
    input_path: str,
    output_path: str,
    count: int,
    output_format: str,
    title_source: Optional[str],
    inline_css: Optional[bool],
    scale: Optional[str],
    encoding: Optional[str],
) -> None:
    """
    Write a tag cloud of the most frequent words in a text file.

    Missing input, output or count values are prompted for.

    Raises:
        SystemExit: Exits with code 1 if the input cannot be read, the output
            cannot be written or the count is invalid.
    """
    config = _load_config(inline_css=inline_css, scale=scale, encoding=encoding)
    pipeline = TagCloudPipeline(config)

    try:
        cloud = pipeline.generate(
            input_path,
            output_path,
            count,
            output_format=output_format,
            source_name=title_source,
        )
    except TagCloudError as e:
        logger.debug(f"Generation failed: {e.error_code}", exc_info=True)
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    click.echo(
        f"✓ Wrote {len(cloud)} of {cloud.distinct_words} distinct words "
        f"to '{output_path}' ({output_format.upper()})"
    )


@cli.command()
@click.argument('input_path', type=click.Path(dir_okay=False))
@click.option('--count', '-n', default=20, type=int, help='Number of words to show (default: 20)')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json', 'simple']),
              default='table', help='Output format (default: table)')
@click.option('--scale', type=click.Choice(TIER_SCALES), default=None,
              help='Tier scale (default: batch)')
def top(input_path: str, count: int, output_format: str, scale: Optional[str]) -> None:
    """
    Print the most frequent words in a text file.

    Words are listed alphabetically with their counts and font tiers.

    Raises:
        SystemExit: Exits with code 1 if the input cannot be read or the
            count is invalid.
    """
    config = _load_config(scale=scale)

    try:
        counts = count_words(open_lines(input_path, config.encoding), config.separators)
        cloud = FrequencyRanker(config).rank(counts, count)
    except TagCloudError as e:
        if output_format == 'json':
            click.echo(json.dumps(error_to_dict(e), indent=2), err=True)
        else:
            click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    if output_format == 'json':
        click.echo(json.dumps(cloud.to_dict(), indent=2))
    elif output_format == 'simple':
        for entry in cloud.entries:
            click.echo(f"{entry.word}: {entry.count}")
    else:  # table format
        click.echo(render_text(cloud), nl=False)


if __name__ == '__main__':
    cli()
