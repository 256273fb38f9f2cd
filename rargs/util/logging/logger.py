# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

import logging


# Root of the logger hierarchy used by this package
ROOT_LOGGER_NAME = "rargs"


def getLogger(obj: object, name: str | None = None) -> logging.Logger:  # noqa: N802 matches logging.getLogger
    """Return a logger for ``obj``.

    Strings are used verbatim as the logger name; any other object is named after its class.
    Loggers are created as children of the ``rargs`` logger.
    """
    # Determine the logger name
    if name is None:
        if isinstance(obj, str):
            name = obj
        else:
            name = type(obj).__name__

    # Create or get the logger
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(ROOT_LOGGER_NAME).getChild(name)

    # Try to apply the logging level from the manager
    from .manager import LoggingManager

    manager = LoggingManager()
    if manager.initialized:
        manager.apply_logging_level(logger)

    return logger
