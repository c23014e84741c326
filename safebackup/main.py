from __future__ import annotations

import logging
import sys
from typing import TextIO

from .audit import AuditLog
from .backup import BackupManager
from .config import Config
from .errors import BackupError, IoError, PathTraversal
from .notifier import Notifier
from .validator import validate_filename

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("safebackup")

BANNER = "SafeBackup - Secure File Backup Utility"
COMMANDS = ("backup", "restore", "delete")


def _prompt(message: str, stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(message)
    stdout.flush()
    # EOF reads as an empty line.
    return stdin.readline()


def run(
    cfg: Config,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    stderr: TextIO = sys.stderr,
    notifier: Notifier | None = None,
) -> int:
    """Run one interactive session and return the process exit status."""
    audit = AuditLog(cfg.log_file)
    notifier = notifier or Notifier(cfg.webhook_url)

    print(BANNER, file=stdout)
    print("=" * len(BANNER), file=stdout)

    try:
        audit.write("SafeBackup session started")
    except IoError as e:
        print(f"Warning: Could not write to log file: {e}", file=stderr)

    filename = _prompt("Please enter your file name: ", stdin, stdout).strip()

    try:
        validate_filename(filename, audit)
    except BackupError as e:
        print(f"Error: {e}", file=stderr)
        audit.record(f"Session terminated: {e}")
        if isinstance(e, PathTraversal) and notifier.enabled:
            notifier.send("Path Traversal Blocked", str(e), level="warning")
        return 1

    command = _prompt(
        f"Please enter your command ({', '.join(COMMANDS)}): ", stdin, stdout
    ).strip().lower()

    manager = BackupManager(
        audit,
        work_dir=cfg.work_dir,
        confirm=lambda message: _prompt(message, stdin, stdout),
        out=stdout,
        chunk_size=cfg.chunk_size,
    )
    handlers = {
        "backup": manager.backup,
        "restore": manager.restore,
        "delete": manager.delete,
    }

    handler = handlers.get(command)
    if handler is None:
        print(f"Unknown command: {command}", file=stderr)
        audit.record(f"Unknown command attempted: {command}")
        return 1

    logger.info("Running %s on %s", command, filename)
    try:
        handler(filename)
    except BackupError as e:
        print(f"Error: {e}", file=stderr)
        audit.record(f"Operation failed: {e}")
        return 1

    audit.record("Operation completed successfully")
    audit.record("SafeBackup session ended")
    return 0


def main() -> None:
    try:
        cfg = Config.load()
    except ValueError as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    logging.getLogger().setLevel(cfg.log_level)
    sys.exit(run(cfg))


if __name__ == "__main__":
    main()
