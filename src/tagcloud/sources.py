"""Line sources feeding the counting pass."""

import logging
from pathlib import Path
from typing import Iterator, Union

from .errors import SourceUnavailableError

logger = logging.getLogger(__name__)


def open_lines(path: Union[str, Path], encoding: str = "utf-8") -> Iterator[str]:
    """
    Yield lines from a text file with trailing newlines stripped.

    Failing to open the file raises SourceUnavailableError. A failure while
    reading is logged and ends the sequence early, as if the file had ended.

    Args:
        path: Path to the input file
        encoding: Text encoding of the file

    Raises:
        SourceUnavailableError: If the file cannot be opened
    """
    try:
        handle = open(path, "r", encoding=encoding)
    except OSError as e:
        raise SourceUnavailableError(str(path), e.strerror) from e

    with handle:
        line_number = 0
        while True:
            try:
                line = handle.readline()
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Unable to read {path} after line {line_number}: {e}")
                return
            if not line:
                return
            line_number += 1
            yield line.rstrip("\r\n")


def text_lines(text: str) -> Iterator[str]:
    """Yield the lines of an in-memory string."""
    yield from text.splitlines()
