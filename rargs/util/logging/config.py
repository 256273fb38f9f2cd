# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

import re

from collections.abc import Mapping
from typing import Any

from frozendict import frozendict
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..helpers.frozendict import FrozenDict
from .levels import LoggingLevel


class LoggingConfig(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    level: LoggingLevel = Field(default=LoggingLevel.WARNING, description="Log level for TTY output")
    default: LoggingLevel = Field(default=LoggingLevel.NOTSET, description="Default log level for loggers not explicitly specified in 'custom'")
    rich: bool = Field(default=False, description="Enable rich text (colors etc) in TTY output")

    custom: FrozenDict[re.Pattern[str], LoggingLevel] = Field(
        default_factory=frozendict,
        description="Custom logging levels, where the key is a regex for the logger name, and the value is the logging level.",
    )

    @classmethod
    def _validate_regex_pattern(cls, pattern: Any) -> re.Pattern[str]:
        if isinstance(pattern, str):
            pattern = re.compile(pattern, re.IGNORECASE)
        if not isinstance(pattern, re.Pattern):
            msg = f"Custom logging levels keys must be str or compiled regex patterns, got {type(pattern)}"
            raise TypeError(msg)
        return pattern

    @field_validator("custom", mode="before")
    @classmethod
    def compile_custom_level_patterns(cls, value: Any) -> dict[re.Pattern[str], Any]:
        if not isinstance(value, Mapping):
            msg = f"Custom logging levels must be a dict, got {type(value)}"
            raise TypeError(msg)

        return {cls._validate_regex_pattern(name): level for name, level in value.items()}
