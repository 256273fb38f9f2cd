# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

import logging

from typing import override

from ..logging import getLogger


class LoggableMixin:
    """Mixin that adds a logger to a class.

    Provides a ``.log`` property named after the class, or after ``instance_name`` when the
    instance has one, nested under the package logger.
    """

    __log: logging.Logger | None = None

    @property
    def log(self) -> logging.Logger:
        """Return a logger for the current object.

        Returns:
            logging.Logger: The logger instance for the object.

        """
        if (log := self.__log) is None:
            log = self.__log = getLogger(self, name=self.__log_name__)
        return log

    def _reset_log_cache(self) -> None:
        self.__log = None

    @property
    def __log_name__(self) -> str:
        name = getattr(self, "instance_name", None)
        if isinstance(name, str) and name:
            return f"{type(self).__name__}.{name}"
        return type(self).__name__

    @override
    def __repr__(self) -> str:
        return f"<{self.__log_name__}>"
