# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

"""Declaration of a single command-line argument.

An :class:`Arg` is built by chaining setters, then handed to :meth:`rargs.ArgParser.args`::

    Arg("verbose").short("V").help("Chatty output").flag(False)
    Arg("output").short("o").help("Output file").option("out.txt")
    Arg("build").help("Run a build").word(False)

Flags and options are spelled with dashes (``-V``/``--verbose``); words are matched as
bare tokens (``build``). Calling more than one of :meth:`Arg.flag`, :meth:`Arg.option`
and :meth:`Arg.word` keeps the last one.
"""

import copy

from enum import StrEnum
from typing import Self, override

from .errors import InvalidArgError
from .util.logging import getLogger


LOG = getLogger(__name__)


class ArgKind(StrEnum):
    # fmt: off
    FLAG   = "flag"
    OPTION = "option"
    WORD   = "word"
    # fmt: on


ArgValue = bool | str


class Arg:
    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name or name.startswith("-") or any(c.isspace() for c in name):
            msg = f"Invalid argument name: {name!r}"
            raise InvalidArgError(msg)

        self.name = name
        self._short: str | None = None
        self._long: str | None = None
        self._help = ""
        self._kind: ArgKind | None = None
        self._default: ArgValue | None = None
        self._required = False

    @classmethod
    def new(cls, name: str) -> Self:
        return cls(name)

    # MARK: Builders
    def short(self, short: str | None) -> Self:
        if short is not None and (not isinstance(short, str) or len(short) != 1 or short == "-" or short.isspace()):
            msg = f"Short name of '{self.name}' must be a single character, got {short!r}"
            raise InvalidArgError(msg)
        self._short = short
        return self

    def long(self, long: str) -> Self:
        if not isinstance(long, str) or not long or long.startswith("-") or any(c.isspace() for c in long):
            msg = f"Long name of '{self.name}' must be a non-empty word, got {long!r}"
            raise InvalidArgError(msg)
        self._long = long
        return self

    def help(self, text: str) -> Self:
        self._help = str(text)
        return self

    def required(self, required: bool = True) -> Self:  # noqa: FBT001 FBT002 builder setter
        self._required = bool(required)
        return self

    def flag(self, default: bool = False) -> Self:  # noqa: FBT001 FBT002 builder setter
        if not isinstance(default, bool):
            msg = f"Flag '{self.name}' default must be a bool, got {type(default).__name__}"
            raise InvalidArgError(msg)
        return self._set_kind(ArgKind.FLAG, default)

    def option(self, default: str = "") -> Self:
        if not isinstance(default, str):
            msg = f"Option '{self.name}' default must be a str, got {type(default).__name__}"
            raise InvalidArgError(msg)
        return self._set_kind(ArgKind.OPTION, default)

    def word(self, default: ArgValue = False) -> Self:  # noqa: FBT002 builder setter
        if not isinstance(default, bool | str):
            msg = f"Word '{self.name}' default must be a bool or a str, got {type(default).__name__}"
            raise InvalidArgError(msg)
        return self._set_kind(ArgKind.WORD, default)

    def _set_kind(self, kind: ArgKind, default: ArgValue) -> Self:
        if self._kind is not None and self._kind is not kind:
            LOG.debug("Argument '%s' redeclared as %s (was %s); last declaration wins", self.name, kind, self._kind)
        self._kind = kind
        self._default = default
        return self

    # MARK: Properties
    @property
    def kind(self) -> ArgKind | None:
        return self._kind

    @property
    def default(self) -> ArgValue | None:
        return self._default

    @property
    def short_name(self) -> str | None:
        return self._short

    @property
    def long_name(self) -> str:
        return self._long if self._long is not None else self.name

    @property
    def help_text(self) -> str:
        return self._help

    @property
    def is_required(self) -> bool:
        return self._required

    @property
    def takes_value(self) -> bool:
        """Whether the token following this argument is consumed as its value."""
        return self._kind is ArgKind.OPTION or (self._kind is ArgKind.WORD and isinstance(self._default, str))

    @property
    def spellings(self) -> tuple[str, ...]:
        """Every token that selects this argument on the command line."""
        if self._kind is ArgKind.WORD:
            return (self.long_name,)
        spellings = [f"--{self.long_name}"]
        if self._short is not None:
            spellings.insert(0, f"-{self._short}")
        return tuple(spellings)

    def copy(self) -> Self:
        return copy.copy(self)

    @override
    def __repr__(self) -> str:
        return f"Arg({self.name!r}, kind={self._kind}, default={self._default!r})"
