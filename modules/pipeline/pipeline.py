"""
Pipeline for the max-finding workflow.

Handles the complete path from one input line to the maximum value:
read line, parse integers, build a cursor, traverse it.
"""

import logging
import time
from typing import IO, Optional, Union

from core.cursor import cursor_over
from core.models import MaxResult
from modules.maxfinder.finder import count_and_find_max
from modules.parsing.tokenizer import parse_line
from config.settings import Settings

logger = logging.getLogger(__name__)


class MaxPipeline:
    """
    Main pipeline for finding the maximum of an input line.

    Workflow:
    1. Read exactly one line
    2. Split it into tokens and parse each as an integer
    3. Wrap the integers in a forward-only cursor
    4. Traverse the cursor keeping a running maximum

    Errors are logged and re-raised; there are no partial results.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize pipeline.

        Args:
            settings: Configuration settings (loads default if None)
        """
        self.settings = settings or Settings()
        logger.debug("Pipeline initialized")

    def read_line(self, stream: IO) -> str:
        """
        Read exactly one line from ``stream``.

        Binary streams are decoded with ``settings.input_encoding``.
        Returns an empty string at end of input.
        """
        line: Union[str, bytes] = stream.readline()
        if isinstance(line, bytes):
            line = line.decode(self.settings.input_encoding)
        logger.debug(f"Read {len(line)} character(s) from input")
        return line

    def process_line(self, line: str) -> MaxResult:
        """
        Find the maximum integer on ``line``.

        Args:
            line: Whitespace-separated base-10 integers

        Returns:
            MaxResult with the maximum and the number of elements traversed

        Raises:
            MalformedTokenError: If a token is not an integer
            EmptyInputError: If the line holds no tokens
        """
        start_time = time.perf_counter()

        try:
            parsed = parse_line(line)
            cursor = cursor_over(parsed.values, name="input line")
            value, count = count_and_find_max(cursor)
        except Exception as e:
            logger.error(f"Max search failed: {e}")
            raise

        result = MaxResult(
            value=value,
            count=count,
            processing_time=time.perf_counter() - start_time
        )
        logger.info(
            f"Found maximum {result.value} among {result.count} value(s) "
            f"in {result.processing_time:.6f}s"
        )
        return result

    def run(self, stream: IO) -> MaxResult:
        """Read one line from ``stream`` and process it."""
        return self.process_line(self.read_line(stream))


def create_pipeline(settings: Optional[Settings] = None) -> MaxPipeline:
    """
    Create a pipeline instance.

    Args:
        settings: Optional settings override

    Returns:
        MaxPipeline instance
    """
    return MaxPipeline(settings=settings)
