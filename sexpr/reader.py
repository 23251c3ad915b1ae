"""Bulk input: slurp a stream into one buffer, or open and parse a file.

Read failures carry the numeric subcodes below; callers surface them as-is.
"""

import logging
from pathlib import Path
from typing import Any, Optional, TextIO, Union

from .errors import BufferReadFailure, FileNotFound
from .parser import parse
from .types import Limits, Value

log = logging.getLogger(__name__)

READALL_CHUNK = 262144

READALL_OK = 0
READALL_INVALID = -1
READALL_ERROR = -2
READALL_TOOMUCH = -3
READALL_NOMEM = -4


def read_all(
    stream: Optional[TextIO],
    limit: Optional[int] = None,
    chunk_size: int = READALL_CHUNK,
) -> str:
    """Read a text stream to exhaustion.

    Raises BufferReadFailure with READALL_INVALID, READALL_ERROR,
    READALL_TOOMUCH or READALL_NOMEM.
    """
    if stream is None or chunk_size <= 0:
        raise BufferReadFailure(READALL_INVALID)

    chunks: list[str] = []
    size = 0
    try:
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            size += len(chunk)
            if limit is not None and size > limit:
                raise BufferReadFailure(READALL_TOOMUCH)
            chunks.append(chunk)
        return "".join(chunks)
    except (OSError, UnicodeDecodeError) as e:
        log.debug("stream error after %d characters: %s", size, e)
        raise BufferReadFailure(READALL_ERROR) from e
    except MemoryError as e:
        raise BufferReadFailure(READALL_NOMEM) from e


def parse_file(path: Union[str, Path], limits: Any = None) -> Value:
    """Open path for text reading, slurp it, and parse the single value inside."""
    lim = Limits.of(limits)
    try:
        f = open(path, "r")
    except OSError as e:
        raise FileNotFound(str(path)) from e
    with f:
        log.debug("opened %s", path)
        src = read_all(f, lim.max_input_size)
    log.debug("read %d characters from %s", len(src), path)
    return parse(src, lim)
