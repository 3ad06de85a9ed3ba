#zeller\infra\logger.py
"""
infra/logger.py

Loggers for the zeller package: the "zeller" root logger carries the
handlers, module loggers ("zeller.main", "zeller.dateparse") propagate to it.

Configuration comes from infra.settings.LogSettings (ZELLER_LOGLEVEL,
ZELLER_LOGFILE) unless a LogSettings is passed explicitly.
"""

import logging
import sys

from zeller.infra.settings import LogSettings

ROOT_NAME = "zeller"


class LoggerFactory:
    """
    Usage:
        from zeller.infra import LoggerFactory
        log = LoggerFactory.get_logger("zeller.main")
    """

    _formatter = logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
    _configured = False

    @classmethod
    def configure(cls, settings=None):
        """(Re)attach handlers to the package root logger; returns it."""
        settings = settings if settings is not None else LogSettings.from_env()
        root = logging.getLogger(ROOT_NAME)

        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(cls._formatter)
        root.addHandler(stderr_handler)
        root.setLevel(settings.level)

        if settings.logfile:
            try:
                file_handler = logging.FileHandler(settings.logfile, encoding="utf-8")
            except OSError as e:
                root.error("Failed to set up file logging at %s: %s", settings.logfile, e)
            else:
                file_handler.setFormatter(cls._formatter)
                root.addHandler(file_handler)

        root.propagate = False
        cls._configured = True
        return root

    @classmethod
    def get_logger(cls, name):
        """Logger under the package root; configures the root on first use."""
        if not cls._configured:
            cls.configure()
        if name != ROOT_NAME and not name.startswith(ROOT_NAME + "."):
            name = f"{ROOT_NAME}.{name}"
        return logging.getLogger(name)
