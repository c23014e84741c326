from __future__ import annotations

import re
from typing import Callable

from .audit import AuditLog
from .errors import BackupError, InvalidFilename, PathTraversal

MAX_FILENAME_LENGTH = 255

_VALID_CHARS = re.compile(r"[A-Za-z0-9._-]+")
_TRAVERSAL_TOKENS = ("..", "/", "\\")


def _is_traversal(name: str) -> bool:
    return any(token in name for token in _TRAVERSAL_TOKENS)


def _reject_traversal(name: str, audit: AuditLog) -> BackupError:
    audit.record(f"Security: Path traversal attempt blocked - {name}")
    return PathTraversal(name)


# Evaluated in order; the first failing check decides the reason.
_CHECKS: tuple[tuple[Callable[[str], bool], Callable[[str, AuditLog], BackupError]], ...] = (
    (
        lambda name: not name,
        lambda name, audit: InvalidFilename("Filename cannot be empty"),
    ),
    (_is_traversal, _reject_traversal),
    (
        lambda name: _VALID_CHARS.fullmatch(name) is None,
        lambda name, audit: InvalidFilename("Filename contains invalid characters"),
    ),
    (
        lambda name: len(name) > MAX_FILENAME_LENGTH,
        lambda name, audit: InvalidFilename(
            f"Filename too long (max {MAX_FILENAME_LENGTH} characters)"
        ),
    ),
)


def validate_filename(name: str, audit: AuditLog) -> None:
    """Accept only a bare, single-segment filename.

    Raises InvalidFilename or PathTraversal. The filesystem is never touched,
    except that a traversal attempt appends one record to ``audit`` before
    the error is raised.
    """
    for failed, reject in _CHECKS:
        if failed(name):
            raise reject(name, audit)
