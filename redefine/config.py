"""
config.py - redefine configuration

Provides configuration loading from JSON files, environment variables,
and defaults.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional
from pathlib import Path
import os
import json
import logging

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


@dataclass
class RedefineConfig:
    """Root configuration for redefine."""

    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    json_logs: bool = False

    # Include value reprs in debug logs (can be large or sensitive)
    trace_values: bool = False

    # Raise LifecycleError when an after-hook finds no session
    strict_lifecycle: bool = True

    @classmethod
    def from_env(cls) -> "RedefineConfig":
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv("REDEFINE_LOG_LEVEL", DEFAULT_LOG_LEVEL),
            log_file=os.getenv("REDEFINE_LOG_FILE"),
            json_logs=_env_flag("REDEFINE_JSON_LOGS", "false"),
            trace_values=_env_flag("REDEFINE_TRACE_VALUES", "false"),
            strict_lifecycle=_env_flag("REDEFINE_STRICT_LIFECYCLE", "true"),
        )

    @classmethod
    def from_file(cls, filepath: str) -> "RedefineConfig":
        """Load configuration from JSON file."""
        path = Path(filepath)
        if not path.exists():
            logger.warning(f"Config file not found: {filepath}, using defaults")
            return cls.from_env()

        with open(path) as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "RedefineConfig":
        """Environment first, then file values on top."""
        config = cls.from_env()

        for key, value in data.items():
            if hasattr(config, key):
                setattr(config, key, value)
            else:
                logger.warning(f"Ignoring unknown config key: {key}")

        return config

    def to_dict(self) -> Dict[str, Any]:
        return {
            "log_level": self.log_level,
            "log_file": self.log_file,
            "json_logs": self.json_logs,
            "trace_values": self.trace_values,
            "strict_lifecycle": self.strict_lifecycle,
        }


# Global config instance
_config: Optional[RedefineConfig] = None


def load_config(filepath: str = None) -> RedefineConfig:
    """
    Load configuration from file or environment.

    Args:
        filepath: Optional path to JSON config file

    Returns:
        RedefineConfig instance
    """
    global _config

    if filepath:
        _config = RedefineConfig.from_file(filepath)
        return _config

    default_paths = [
        "./redefine.json",
        os.path.expanduser("~/.redefine/config.json"),
    ]
    for path in default_paths:
        if Path(path).exists():
            logger.info(f"Loading config from: {path}")
            _config = RedefineConfig.from_file(path)
            return _config

    _config = RedefineConfig.from_env()
    return _config


def get_config() -> RedefineConfig:
    """Get current configuration, loading if needed."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[RedefineConfig]) -> None:
    """Replace the current configuration; None forces a reload on next use."""
    global _config
    _config = config
