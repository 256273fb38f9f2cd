# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

"""Logging configuration for programs built on rargs.

The library itself only ever creates loggers; handlers are attached here, by the
program, once its own arguments have been parsed.
"""

import logging
import re
import sys

from typing import TYPE_CHECKING, Any, ClassVar, Self
from typing import cast as typing_cast

from ..helpers import script_info
from .config import LoggingConfig
from .logger import ROOT_LOGGER_NAME


if TYPE_CHECKING:
    from .levels import LoggingLevel


######
# MARK: Logging Manager
class LoggingManager:
    _instance: ClassVar["LoggingManager | None"] = None

    initialized: bool
    config: LoggingConfig
    ch: logging.Handler | None

    def __new__(cls, *args, **kwargs) -> Self:
        if (instance := cls._instance) is None:
            instance = cls._instance = super().__new__(cls, *args, **kwargs)
            instance.initialized = False
            instance.ch = None
        return typing_cast("Self", instance)

    def __init__(self) -> None:
        pass

    def initialize(self, config: LoggingConfig | dict[str, Any]) -> None:
        if not isinstance(config, LoggingConfig):
            config = LoggingConfig.model_validate(config)

        if self.initialized:
            msg = f"Must not initialise {type(self).__name__} twice"
            raise RuntimeError(msg)
        self.initialized = True

        self.config = config

        self._configure_package_logger()
        self._configure_tty_handler()
        self._configure_custom_logger_levels()

    def _configure_package_logger(self) -> None:
        logging.captureWarnings(capture=True)

        # Lowest of the configured levels, so that handlers decide what is shown
        levels = [self.config.level.value, self.config.default.value, *(level.value for level in self.config.custom.values())]
        enabled = [level for level in levels if level > logging.NOTSET]
        package_logger = logging.getLogger(ROOT_LOGGER_NAME)
        package_logger.setLevel(min(enabled) if enabled else logging.NOTSET)

    def _configure_tty_handler(self) -> None:
        self.ch = None
        if not self.config.level.enabled:
            return

        # Create console handler
        if self.config.rich:
            from .rich_handler import CustomRichHandler

            self.ch = CustomRichHandler()
        else:
            self.ch = logging.StreamHandler(sys.stderr)
            self.ch.setFormatter(logging.Formatter("[%(levelname).1s:%(name)s] %(message)s"))

        self.ch.setLevel(self.config.level.value)

        # pytest's caplog captures records without our handler
        if not script_info.is_unit_test():
            logging.getLogger(ROOT_LOGGER_NAME).addHandler(self.ch)

    def apply_logging_level(self, logger: logging.Logger) -> None:
        # Do nothing if logger already has an explicit level set
        if logger.level != logging.NOTSET:
            return

        # Apply the most specific matching custom level, or default if none match
        level: LoggingLevel = self.config.default
        pattern_len = 0

        for _pattern, _level in self.config.custom.items():
            assert isinstance(_pattern, re.Pattern), f"Custom logging levels keys must be compiled regex patterns, got {type(_pattern)}"
            if (match := _pattern.match(logger.name)) is not None:
                _pattern_len = len(match.group(0))
                if pattern_len < _pattern_len:
                    level = _level
                    pattern_len = _pattern_len

        if level == logging.NOTSET:
            return

        logger.setLevel(level.value)

    def _configure_custom_logger_levels(self) -> None:
        # Apply logging levels to existing package loggers
        for logger_name in list(logging.root.manager.loggerDict):
            if logger_name.startswith(f"{ROOT_LOGGER_NAME}."):
                self.apply_logging_level(logging.getLogger(logger_name))
