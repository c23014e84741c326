from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


def copy_file(source: str | Path, dest: str | Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Stream ``source`` into ``dest`` and return the number of bytes copied.

    ``dest`` is created or truncated. It is flushed and fsynced before the
    count is returned. OSError from open, read, write or sync propagates.
    """
    copied = 0
    with open(source, "rb") as src, open(dest, "wb") as dst:
        while True:
            chunk = src.read(chunk_size)
            if not chunk:
                break
            dst.write(chunk)
            copied += len(chunk)
        dst.flush()
        os.fsync(dst.fileno())
    logger.debug("Copied %d bytes: %s -> %s", copied, source, dest)
    return copied
