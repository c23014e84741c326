"""Tests for configuration management."""

import os
from unittest.mock import patch

import pytest

from safebackup.config import Config


class TestConfig:

    def test_defaults(self, tmp_path):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.load(str(tmp_path / "absent.yaml"))
        assert config.log_file == "logfile.txt"
        assert config.work_dir == "."
        assert config.chunk_size == 65536
        assert config.webhook_url == ""
        assert config.log_level == "WARNING"

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "safebackup.yaml"
        path.write_text("log_file: audit.log\nchunk_size: 4096\nlog_level: debug\n")
        with patch.dict(os.environ, {}, clear=True):
            config = Config.load(str(path))
        assert config.log_file == "audit.log"
        assert config.chunk_size == 4096
        assert config.log_level == "DEBUG"

    def test_env_overrides_yaml(self, tmp_path):
        path = tmp_path / "safebackup.yaml"
        path.write_text("log_file: audit.log\nwork_dir: /srv\n")
        with patch.dict(os.environ, {
            "SAFEBACKUP_LOG_FILE": "other.log",
            "SAFEBACKUP_CHUNK_SIZE": "128",
            "SAFEBACKUP_WEBHOOK_URL": "http://hooks.local/x",
        }, clear=True):
            config = Config.load(str(path))
        assert config.log_file == "other.log"
        assert config.work_dir == "/srv"
        assert config.chunk_size == 128
        assert config.webhook_url == "http://hooks.local/x"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "safebackup.yaml"
        path.write_text("")
        with patch.dict(os.environ, {}, clear=True):
            assert Config.load(str(path)) == Config()

    def test_validation(self, tmp_path):
        absent = str(tmp_path / "absent.yaml")
        with patch.dict(os.environ, {"SAFEBACKUP_CHUNK_SIZE": "0"}, clear=True):
            with pytest.raises(ValueError, match="chunk_size must be positive"):
                Config.load(absent)
        with patch.dict(os.environ, {"SAFEBACKUP_CHUNK_SIZE": "big"}, clear=True):
            with pytest.raises(ValueError, match="must be an integer"):
                Config.load(absent)
        with patch.dict(os.environ, {"SAFEBACKUP_LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValueError, match="Unknown log_level"):
                Config.load(absent)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "safebackup.yaml"
        path.write_text("retention: 5\n")
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="Unknown config key"):
                Config.load(str(path))

    def test_non_mapping_yaml(self, tmp_path):
        path = tmp_path / "safebackup.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="must contain a mapping"):
            Config.load(str(path))
