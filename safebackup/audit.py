from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path

from .errors import IoError

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f\x85\u2028\u2029]")


def _escape(action: str) -> str:
    # One record per line: control characters never reach the file raw.
    return _CONTROL_CHARS.sub(lambda m: repr(m.group())[1:-1], action)


class AuditLog:
    """Append-only, timestamped record of every action taken on a file.

    The file is opened, appended to and closed on each call, so nothing is
    held open between records. Text that cannot be encoded is written with
    backslash escapes rather than failing the write.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def write(self, action: str) -> None:
        line = f"[{datetime.now().strftime(TIMESTAMP_FORMAT)}] {_escape(action)}\n"
        try:
            with open(self._path, "a", encoding="utf-8", errors="backslashreplace") as f:
                f.write(line)
        except OSError as e:
            raise IoError(e) from e

    def record(self, action: str) -> bool:
        """Best-effort write: a failure is logged as a warning, never raised."""
        try:
            self.write(action)
        except IoError as e:
            logger.warning("Could not write audit record to %s: %s", self._path, e)
            return False
        return True
