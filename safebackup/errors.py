from __future__ import annotations


class BackupError(Exception):
    """Base class for every failure a command can report to the operator."""

    label = "Backup error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.label}: {self.detail}"


class InvalidFilename(BackupError):
    label = "Invalid filename"


class PathTraversal(BackupError):
    label = "Path traversal attempt"


class FileNotFound(BackupError):
    label = "File not found"


class PermissionDenied(BackupError):
    label = "Permission denied"


class IoError(BackupError):
    label = "IO Error"

    def __init__(self, cause: OSError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def from_os_error(exc: OSError, path: str) -> BackupError:
    """Classify an OSError raised by the filesystem layer."""
    if isinstance(exc, PermissionError):
        return PermissionDenied(path)
    if isinstance(exc, FileNotFoundError):
        return FileNotFound(path)
    return IoError(exc)
