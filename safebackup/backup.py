from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Callable, TextIO

from .audit import AuditLog
from .copier import DEFAULT_CHUNK_SIZE, copy_file
from .errors import FileNotFound, InvalidFilename, from_os_error
from .validator import validate_filename

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"
CONFIRM_WORD = "yes"


class BackupManager:
    """Back up, restore and delete single files inside one directory."""

    def __init__(
        self,
        audit: AuditLog,
        work_dir: str | Path = ".",
        confirm: Callable[[str], str] = input,
        out: TextIO | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self._audit = audit
        self._dir = Path(work_dir)
        self._confirm = confirm
        self._out = out
        self._chunk_size = chunk_size

    def _path_for(self, name: str) -> Path:
        return self._dir / name

    def _say(self, message: str) -> None:
        print(message, file=self._out or sys.stdout)

    def _copy(self, op: str, source_name: str, dest_name: str) -> int:
        source = self._path_for(source_name)
        dest = self._path_for(dest_name)
        try:
            copied = copy_file(source, dest, self._chunk_size)
        except OSError as e:
            self._audit.record(f"{op} failed: {source_name} -> {dest_name} - {e}")
            raise from_os_error(e, str(e.filename or source)) from e
        return copied

    def backup(self, name: str) -> int:
        validate_filename(name, self._audit)

        src = self._path_for(name)
        if not src.exists():
            self._audit.record(f"Backup failed: File not found - {name}")
            raise FileNotFound(name)
        if not src.is_file():
            self._audit.record(f"Backup failed: Not a regular file - {name}")
            raise InvalidFilename("Target is not a regular file")

        backup_name = name + BACKUP_SUFFIX
        copied = self._copy("Backup", name, backup_name)

        self._say(f"Your backup created: {backup_name}")
        self._audit.record(f"Backup successful: {name} -> {backup_name} ({copied} bytes)")
        logger.info("Backup saved: %s (%d bytes)", self._path_for(backup_name), copied)
        return copied

    def restore(self, name: str) -> int:
        # The target name is validated, not the artifact name.
        validate_filename(name, self._audit)

        backup_name = name + BACKUP_SUFFIX
        src = self._path_for(backup_name)
        if not src.exists():
            self._audit.record(f"Restore failed: Backup not found - {backup_name}")
            raise FileNotFound(backup_name)
        if not src.is_file():
            self._audit.record(f"Restore failed: Not a regular file - {backup_name}")
            raise InvalidFilename("Backup is not a regular file")

        copied = self._copy("Restore", backup_name, name)

        self._say(f"File restored from: {backup_name}")
        self._audit.record(f"Restore successful: {backup_name} -> {name} ({copied} bytes)")
        logger.info("Restored %s from %s (%d bytes)", name, backup_name, copied)
        return copied

    def delete(self, name: str) -> bool:
        """Remove ``name`` once the operator answers "yes".

        Returns False when the operator declines; that is a cancellation,
        not a failure.
        """
        validate_filename(name, self._audit)

        target = self._path_for(name)
        if not target.exists():
            self._audit.record(f"Delete failed: File not found - {name}")
            raise FileNotFound(name)

        answer = self._confirm(f"Are you sure you want to delete {name}? (yes/no): ")
        if answer.strip().lower() != CONFIRM_WORD:
            self._say("Delete cancelled.")
            self._audit.record(f"Delete cancelled by user: {name}")
            return False

        try:
            os.remove(target)
        except OSError as e:
            self._audit.record(f"Delete failed: {name} - {e}")
            raise from_os_error(e, name) from e

        self._say("File deleted.")
        self._audit.record(f"Delete successful: {name}")
        logger.info("Deleted %s", target)
        return True
