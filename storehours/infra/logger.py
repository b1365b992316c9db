#storehours\infra\logger.py
"""
infra/logger.py

Logging setup for the storehours command line.

Library modules only call logging.getLogger(__name__); the package root
carries a NullHandler. Handlers and level are attached here, to the single
"storehours" parent logger, and only when the CLI asks for it.

Env controls:
- STOREHOURS_LOGLEVEL: logging level (default: INFO)
- STOREHOURS_LOGFILE: optional log file path

Idempotent: configuring the same logger twice adds no handlers.
"""

import logging
import os
import sys

ROOT_LOGGER_NAME = "storehours"


class _LoggerConfig:
    """Internal config derived from environment variables."""

    def __init__(self, level_name="INFO", logfile=None):
        self.level_name = level_name
        self.logfile = logfile

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        level = (env.get("STOREHOURS_LOGLEVEL") or "INFO").strip().upper()
        logfile = env.get("STOREHOURS_LOGFILE")
        logfile = logfile.strip() if logfile else None
        return cls(level_name=level, logfile=logfile)

    @property
    def level(self):
        level = logging.getLevelName(self.level_name)
        return level if isinstance(level, int) else logging.INFO


class LoggerFactory:
    """
    Configures the package's parent logger for command-line use.

    Usage (CLI entry point only):
        from storehours.infra import LoggerFactory
        LoggerFactory.configure()
    """

    _formatter = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
    _configured_names = set()

    @classmethod
    def configure(cls, name=ROOT_LOGGER_NAME, environ=None, stream=None):
        """Attach stderr (+ optional file) handlers and the env level to `name`."""
        logger = logging.getLogger(name)
        if name in cls._configured_names:
            return logger

        cfg = _LoggerConfig.from_env(environ)

        stream_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        stream_handler.setFormatter(cls._formatter)
        logger.addHandler(stream_handler)

        if cfg.logfile:
            try:
                file_handler = logging.FileHandler(cfg.logfile, encoding="utf-8")
                file_handler.setFormatter(cls._formatter)
                logger.addHandler(file_handler)
            except OSError as e:
                logger.error("Failed to set up file logging at %s: %s", cfg.logfile, e)

        logger.setLevel(cfg.level)
        cls._configured_names.add(name)
        return logger
