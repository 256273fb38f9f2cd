# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

"""The argument parser.

An :class:`ArgParser` is configured through chained setters, fed a list of :class:`~rargs.Arg`
declarations, and parsed exactly once. Parsing is a single left-to-right pass over the tokens:

* ``-h``/``--help`` or ``-v``/``--version`` as the *first* token print help or version and exit 0;
* with :meth:`ArgParser.require_args` set, an empty command line prints help and exits 0;
* every other token must be a declared spelling (or a cluster of declared short flags such as
  ``-abc``), otherwise :class:`~rargs.errors.UnrecognizedArgumentError` is raised.

Errors are raised to the caller, unless :meth:`ArgParser.exit_on_error` is set, in which case
they are printed to stderr and the process exits with status 2.
"""

import sys

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import NoReturn, Self

from .arg import Arg, ArgValue
from .errors import (
    ArgParseError,
    DuplicateArgNameError,
    InvalidArgError,
    MissingRequiredArgError,
    MissingValueError,
    ParserStateError,
    UnrecognizedArgumentError,
)
from .help import HELP_SPELLINGS, RESERVED_SPELLINGS, VERSION_SPELLINGS, print_text, render_help, render_usage, render_version
from .models import ProgramInfo
from .results import ParseResults
from .util.helpers import script_info
from .util.mixins import LoggableMixin


ERROR_EXIT_STATUS = 2


class ParserState(Enum):
    UNPARSED = "unparsed"
    PARSING = "parsing"
    PARSED = "parsed"


class ArgParser(LoggableMixin):
    def __init__(self, name: str | None = None) -> None:
        self._info = ProgramInfo(name=name if name is not None else script_info.get_script_name())
        self._args: dict[str, Arg] = {}
        self._spellings: dict[str, Arg] = {}
        self._exit_on_error = False
        self._state = ParserState.UNPARSED
        self._results: ParseResults | None = None

    @classmethod
    def new(cls, name: str | None = None) -> Self:
        return cls(name)

    # MARK: Metadata
    @property
    def instance_name(self) -> str:
        return self._info.name

    @property
    def program_info(self) -> ProgramInfo:
        return self._info

    @property
    def state(self) -> ParserState:
        return self._state

    def _check_state(self, *allowed: ParserState) -> None:
        if self._state not in allowed:
            msg = f"Parser '{self._info.name}' is {self._state.value}"
            raise ParserStateError(msg)

    def _update_info(self, **changes: object) -> Self:
        self._check_state(ParserState.UNPARSED)
        self._info = self._info.updated(**changes)
        return self

    def name(self, name: str) -> Self:
        self._update_info(name=name)
        self._reset_log_cache()
        return self

    def author(self, author: str) -> Self:
        return self._update_info(author=author)

    def version(self, version: str) -> Self:
        return self._update_info(version=version)

    def copyright(self, copyright: str) -> Self:  # noqa: A002 matches the builder name
        return self._update_info(copyright=copyright)

    def info(self, info: str) -> Self:
        return self._update_info(info=info)

    def usage(self, usage: str) -> Self:
        return self._update_info(usage=usage)

    def require_args(self, require: bool = True) -> Self:  # noqa: FBT001 FBT002 builder setter
        return self._update_info(require_args=require)

    def exit_on_error(self, exit_on_error: bool = True) -> Self:  # noqa: FBT001 FBT002 builder setter
        self._check_state(ParserState.UNPARSED)
        self._exit_on_error = bool(exit_on_error)
        return self

    # MARK: Declarations
    def args(self, args: Iterable[Arg]) -> Self:
        """Register argument declarations.

        Each declaration is copied, so later builder calls on the original have no effect.

        Raises:
            InvalidArgError: if a declaration was never given a kind.
            DuplicateArgNameError: if a name or spelling is already taken.

        """
        self._check_state(ParserState.UNPARSED)

        for arg in args:
            if not isinstance(arg, Arg):
                msg = f"Expected an Arg, got {type(arg).__name__}"
                raise InvalidArgError(msg)
            if arg.kind is None:
                msg = f"Argument '{arg.name}' must be declared as a flag, option or word"
                raise InvalidArgError(msg)
            self._register(arg.copy())

        return self

    def _register(self, arg: Arg) -> None:
        if arg.name in self._args:
            raise DuplicateArgNameError(arg.name)

        for spelling in arg.spellings:
            if spelling in RESERVED_SPELLINGS:
                msg = f"Argument '{arg.name}' uses the reserved spelling '{spelling}'"
                raise DuplicateArgNameError(arg.name, msg)
            if (other := self._spellings.get(spelling)) is not None:
                msg = f"Argument '{arg.name}' uses the spelling '{spelling}', already taken by '{other.name}'"
                raise DuplicateArgNameError(arg.name, msg)

        self._args[arg.name] = arg
        for spelling in arg.spellings:
            self._spellings[spelling] = arg

        self.log.debug("Registered %s '%s' as %s", arg.kind, arg.name, ", ".join(arg.spellings))

    @property
    def declared(self) -> Sequence[Arg]:
        return tuple(self._args.values())

    # MARK: Parsing
    def parse(self, args: Iterable[str] | None = None) -> Self:
        """Parse ``args``, or the process arguments when omitted.

        Returns:
            ArgParser: this parser, now holding its :attr:`results`.

        """
        self._check_state(ParserState.UNPARSED)
        tokens = list(sys.argv[1:] if args is None else args)

        if not tokens and self._info.require_args:
            self.log.debug("No arguments given, printing help")
            self.print_help()
            self._exit(0)

        if tokens and tokens[0] in HELP_SPELLINGS:
            self.print_help()
            self._exit(0)

        if tokens and tokens[0] in VERSION_SPELLINGS:
            print_text(self.format_version())
            self._exit(0)

        self._state = ParserState.PARSING
        try:
            values = self._scan(tokens)
            self._check_required(values)
        except ArgParseError as err:
            self._state = ParserState.UNPARSED
            self.log.debug("Parsing failed: %s", err)
            if self._exit_on_error:
                self._error_exit(err)
            raise

        self._results = ParseResults.from_values(self._args.values(), values)
        self._state = ParserState.PARSED
        self.log.debug("Parsed %d token(s), %d argument(s) set", len(tokens), len(values))
        return self

    def _scan(self, tokens: Sequence[str]) -> dict[str, ArgValue]:
        values: dict[str, ArgValue] = {}
        idx = 0

        while idx < len(tokens):
            token = tokens[idx]
            idx += 1

            if (arg := self._spellings.get(token)) is not None:
                idx = self._apply(arg, token, tokens, idx, values)
                continue

            if self._is_short_cluster(token):
                for ch in token[1:]:
                    arg = self._spellings[f"-{ch}"]
                    idx = self._apply(arg, token, tokens, idx, values)
                continue

            raise UnrecognizedArgumentError(token)

        return values

    def _is_short_cluster(self, token: str) -> bool:
        if len(token) < 3 or not token.startswith("-") or token.startswith("--"):
            return False
        return all(f"-{ch}" in self._spellings for ch in token[1:])

    def _apply(self, arg: Arg, token: str, tokens: Sequence[str], idx: int, values: dict[str, ArgValue]) -> int:
        if not arg.takes_value:
            self.log.debug("Matched '%s' -> %s '%s'", token, arg.kind, arg.name)
            values[arg.name] = True
            return idx

        if idx >= len(tokens):
            raise MissingValueError(arg.name, token)

        value = tokens[idx]
        if value.startswith("-") and (value in self._spellings or value in RESERVED_SPELLINGS):
            raise MissingValueError(arg.name, token)

        self.log.debug("Matched '%s' -> %s '%s' = %r", token, arg.kind, arg.name, value)
        values[arg.name] = value
        return idx + 1

    def _check_required(self, values: dict[str, ArgValue]) -> None:
        for arg in self._args.values():
            if arg.is_required and arg.name not in values:
                raise MissingRequiredArgError(arg.name)

    def _exit(self, status: int) -> NoReturn:
        sys.exit(status)

    def _error_exit(self, err: ArgParseError) -> NoReturn:
        print_text(f"{self._info.name}: error: {err}", file=sys.stderr)
        print_text(render_usage(self._info), file=sys.stderr)
        self._exit(ERROR_EXIT_STATUS)

    # MARK: Results
    @property
    def results(self) -> ParseResults:
        if self._results is None:
            msg = f"Parser '{self._info.name}' has not been parsed yet"
            raise ParserStateError(msg)
        return self._results

    def _defaults(self) -> ParseResults:
        return ParseResults.from_values(self._args.values(), {})

    def _lookup(self) -> ParseResults:
        return self._results if self._results is not None else self._defaults()

    def get_flag(self, name: str) -> bool | None:
        return self._lookup().get_flag(name)

    def get_option(self, name: str) -> str | None:
        return self._lookup().get_option(name)

    def get_word(self, name: str) -> bool | str | None:
        return self._lookup().get_word(name)

    # MARK: Output
    def format_help(self) -> str:
        return render_help(self._info, self._args.values()).plain

    def format_usage(self) -> str:
        return render_usage(self._info).plain

    def format_version(self) -> str:
        return render_version(self._info)

    def print_help(self) -> None:
        print_text(render_help(self._info, self._args.values()))
