# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

from .base_model import BaseConfigModel
from .program_info import DEFAULT_USAGE, ProgramInfo


__all__ = [
    "DEFAULT_USAGE",
    "BaseConfigModel",
    "ProgramInfo",
]
