# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

# Levels / Config
from .config import LoggingConfig
from .levels import LoggingLevel

# getLogger
from .logger import ROOT_LOGGER_NAME, getLogger

# Manager
from .manager import LoggingManager


__all__ = [
    "ROOT_LOGGER_NAME",
    "LoggingConfig",
    "LoggingLevel",
    "LoggingManager",
    "getLogger",
]
