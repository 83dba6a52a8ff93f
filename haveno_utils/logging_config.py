"""
Logging for haveno-utils.

Two layers:
  - ``setup_logging`` configures the root logger with a **human** (coloured,
    single-line) or **json** (newline-delimited) formatter.
  - ``VerbosityLogger`` is the leveled "log if level <= threshold" logger
    used by Haveno clients.  The threshold lives on the instance, so each
    caller holds its own verbosity.

Usage:
    from haveno_utils.logging_config import setup_logging, VerbosityLogger
    setup_logging(level="DEBUG", fmt="json", log_file="haveno.log")
    logger = VerbosityLogger(verbosity=1)
    logger.log(1, "connected to daemon")
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from haveno_utils.config import LoggingConfig
from haveno_utils.errors import InvalidLogLevel


class _JSONFormatter(logging.Formatter):
    """One JSON object per record; verbosity-logged records carry ``"v"``."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        verbosity = getattr(record, "verbosity", None)
        if verbosity is not None:
            entry["v"] = verbosity
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class _HumanFormatter(logging.Formatter):
    """Coloured single line: ``12:00:01 [INFO   ] haveno(v2): message``."""

    COLOURS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;31m",
    }
    RESET = "\033[0m"

    def __init__(self, colour: bool = True):
        super().__init__()
        self.colour = colour

    def format(self, record: logging.LogRecord) -> str:
        start = self.COLOURS.get(record.levelname, "") if self.colour else ""
        end = self.RESET if start else ""
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        source = record.name
        verbosity = getattr(record, "verbosity", None)
        if verbosity is not None:
            source = f"{source}(v{verbosity})"
        line = f"{start}{ts} [{record.levelname:<7}]{end} {source}: {record.getMessage()}"
        if record.exc_info and record.exc_info[1]:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(
    level: str = "INFO",
    fmt: str = "human",
    log_file: Optional[str] = None,
    colour: Optional[bool] = None,
) -> None:
    """
    Configure the root logger for the entire application.

    Parameters
    ----------
    level : str
        One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
    fmt : str
        ``"human"`` for single-line output, ``"json"`` for newline-delimited
        JSON.
    log_file : str, optional
        If provided, logs are *also* written to this file (always JSON).
    colour : bool, optional
        Colour human output; defaults to whether stderr is a terminal.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove any existing handlers (avoid duplicates on reload)
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        console.setFormatter(_JSONFormatter())
    else:
        if colour is None:
            colour = sys.stderr.isatty()
        console.setFormatter(_HumanFormatter(colour=colour))
    root.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path))
        fh.setFormatter(_JSONFormatter())
        root.addHandler(fh)


def setup_logging_from_config(cfg: LoggingConfig) -> None:
    """Apply the ``[logging]`` section of a loaded config."""
    setup_logging(level=cfg.level, fmt=cfg.format, log_file=cfg.file)


def _check_level(level: object) -> int:
    if isinstance(level, bool) or not isinstance(level, int) or level < 0:
        raise InvalidLogLevel(f"Log level must be an integer >= 0, got {level!r}")
    return level


class VerbosityLogger:
    """Leveled logger: a message of level *n* is emitted when verbosity >= *n*.

    Messages go out at INFO through the stdlib logger named *name*, tagged
    with their level, so the handlers installed by ``setup_logging`` decide
    where they end up.
    """

    def __init__(self, verbosity: int = 0, name: str = "haveno"):
        self._verbosity = _check_level(verbosity)
        self._logger = logging.getLogger(name)

    @classmethod
    def from_config(cls, cfg: LoggingConfig, name: str = "haveno") -> VerbosityLogger:
        return cls(verbosity=cfg.verbosity, name=name)

    @property
    def name(self) -> str:
        return self._logger.name

    def log(self, level: int, msg: str) -> bool:
        """Emit *msg* if *level* is within the verbosity threshold.

        Returns True when the message was passed on to the stdlib logger.
        """
        level = _check_level(level)
        if self._verbosity < level:
            return False
        self._logger.info(msg, extra={"verbosity": level})
        return True

    def set_level(self, level: int) -> None:
        self._verbosity = _check_level(level)

    def get_level(self) -> int:
        return self._verbosity
