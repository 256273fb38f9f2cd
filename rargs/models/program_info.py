# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

from pydantic import Field, field_validator

from .base_model import BaseConfigModel


DEFAULT_USAGE = "{name} [flags] [options]"


class ProgramInfo(BaseConfigModel):
    name: str = Field(min_length=1, description="Program name, shown in help and version output")
    version: str = Field(default="", description="Program version")
    author: str = Field(default="", description="Program author(s)")
    copyright: str = Field(default="", description="Copyright notice")
    info: str = Field(default="", description="Free-form description of the program")
    usage: str | None = Field(default=None, description="Usage line; derived from the program name when unset")
    require_args: bool = Field(default=False, description="Print help and exit when no arguments are given")

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            msg = "Program name must not be blank"
            raise ValueError(msg)
        return value

    @property
    def usage_line(self) -> str:
        if self.usage is not None:
            return self.usage
        return DEFAULT_USAGE.format(name=self.name)
