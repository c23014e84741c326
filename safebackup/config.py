from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .copier import DEFAULT_CHUNK_SIZE


@dataclass
class Config:
    log_file: str = "logfile.txt"
    work_dir: str = "."
    chunk_size: int = DEFAULT_CHUNK_SIZE
    webhook_url: str = ""
    log_level: str = "WARNING"

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> Config:
        """Load config from YAML file first, then override with environment variables."""
        data: dict = {}

        path = Path(config_path) if config_path else Path("safebackup.yaml")
        if path.exists():
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a mapping")

        env_map = {
            "SAFEBACKUP_LOG_FILE": "log_file",
            "SAFEBACKUP_WORK_DIR": "work_dir",
            "SAFEBACKUP_CHUNK_SIZE": "chunk_size",
            "SAFEBACKUP_WEBHOOK_URL": "webhook_url",
            "SAFEBACKUP_LOG_LEVEL": "log_level",
        }

        for env_key, field_name in env_map.items():
            val = os.environ.get(env_key)
            if val is not None:
                data[field_name] = val

        unknown = set(data) - set(env_map.values())
        if unknown:
            raise ValueError(f"Unknown config key(s): {', '.join(sorted(unknown))}")

        # Type coercion
        if "chunk_size" in data:
            try:
                data["chunk_size"] = int(data["chunk_size"])
            except (TypeError, ValueError):
                raise ValueError(f"chunk_size must be an integer, got {data['chunk_size']!r}") from None
        if "log_level" in data:
            data["log_level"] = str(data["log_level"]).upper()
        for key in ("log_file", "work_dir", "webhook_url"):
            if key in data:
                data[key] = "" if data[key] is None else str(data[key])

        cfg = cls(**data)

        if cfg.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if not isinstance(logging.getLevelName(cfg.log_level), int):
            raise ValueError(f"Unknown log_level: {cfg.log_level}")
        if not cfg.log_file:
            raise ValueError("log_file must not be empty")

        return cfg
