"""
TOML-based configuration for haveno-utils.

Loads settings from a TOML file and/or environment variables.
Environment variables take precedence over file values.

Usage:
    from haveno_utils.config import load_config
    cfg = load_config("haveno.toml")
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib  # type: ignore[import]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[import,no-redef]


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"
    format: str = "human"   # "human" or "json"
    file: str | None = None
    # Threshold for VerbosityLogger; 0 is least verbose.
    verbosity: int = 0


@dataclass
class ProcessConfig:
    """Child process termination defaults."""
    kill_signal: str = "SIGINT"
    kill_timeout: float | None = None   # seconds; None waits forever


@dataclass
class DisplayConfig:
    """Formatting of amounts and timestamps for humans."""
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    utc: bool = True
    decimals: int = 12


@dataclass
class HavenoUtilsConfig:
    """Top-level configuration container."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    process: ProcessConfig = field(default_factory=ProcessConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


def _merge(dc: Any, raw: dict[str, Any]) -> None:
    """Merge a raw dict into a dataclass instance (in-place)."""
    for key, value in raw.items():
        key_under = key.replace("-", "_")
        if hasattr(dc, key_under):
            setattr(dc, key_under, value)


def load_config(path: str | None = None) -> HavenoUtilsConfig:
    """
    Load configuration from a TOML file, then overlay environment variables.

    Env-var mapping:
        HAVENO_LOG_LEVEL      -> logging.level
        HAVENO_LOG_FMT        -> logging.format
        HAVENO_LOG_FILE       -> logging.file
        HAVENO_LOG_VERBOSITY  -> logging.verbosity
        HAVENO_KILL_SIGNAL    -> process.kill_signal
        HAVENO_KILL_TIMEOUT   -> process.kill_timeout
        HAVENO_TIMESTAMP_FMT  -> display.timestamp_format
    """
    cfg = HavenoUtilsConfig()

    # ── TOML file ────────────────────────────────────────────────
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p, "rb") as f:
                data = tomllib.load(f)
            for section_name, section_dc in [
                ("logging", cfg.logging),
                ("process", cfg.process),
                ("display", cfg.display),
            ]:
                if section_name in data:
                    _merge(section_dc, data[section_name])

    # ── Environment variable overrides ───────────────────────────
    if v := os.environ.get("HAVENO_LOG_LEVEL"):
        cfg.logging.level = v.upper()
    if v := os.environ.get("HAVENO_LOG_FMT"):
        cfg.logging.format = v
    if v := os.environ.get("HAVENO_LOG_FILE"):
        cfg.logging.file = v
    if v := os.environ.get("HAVENO_LOG_VERBOSITY"):
        cfg.logging.verbosity = int(v)
    if v := os.environ.get("HAVENO_KILL_SIGNAL"):
        cfg.process.kill_signal = v.upper()
    if v := os.environ.get("HAVENO_KILL_TIMEOUT"):
        cfg.process.kill_timeout = float(v)
    if v := os.environ.get("HAVENO_TIMESTAMP_FMT"):
        cfg.display.timestamp_format = v

    return cfg
