import pytest

from safebackup.audit import AuditLog


@pytest.fixture
def audit(tmp_path):
    return AuditLog(tmp_path / "logfile.txt")


def read_records(audit):
    if not audit.path.exists():
        return []
    return audit.path.read_text(encoding="utf-8").splitlines()
