"""Interactive filename prompt."""

from __future__ import annotations

__all__ = ("prompt_filename", "read_token")

import logging
import sys
from typing import TYPE_CHECKING

from .constants import PROMPT

if TYPE_CHECKING:
    from typing import TextIO

logger = logging.getLogger(__name__)


def read_token(stream: TextIO) -> str:
    """Return the next whitespace-delimited token from ``stream``.

    Blank lines are skipped. Only the line holding the token is consumed.
    Returns an empty string when the stream ends before a token is found.
    """
    for line in stream:
        tokens = line.split()
        if tokens:
            return tokens[0]
    return ""


def prompt_filename(stdin: TextIO | None = None, stdout: TextIO | None = None) -> str:
    """Ask for an image filename and return what was typed.

    Writes ``Please enter image filename: `` without a trailing newline,
    flushes, then reads one token. The result is not validated.

    Args:
        stdin: Stream to read from. Defaults to :data:`sys.stdin`.
        stdout: Stream the prompt is written to. Defaults to :data:`sys.stdout`.

    Returns:
        str: The first token entered, or ``""`` if input was closed.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    stdout.write(PROMPT)
    stdout.flush()

    filename = read_token(stdin)
    logger.debug("Read filename %r.", filename)
    return filename
