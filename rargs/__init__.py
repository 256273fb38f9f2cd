# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

"""Small builder-style command-line argument parser.

>>> from rargs import Arg, ArgParser
>>> parser = ArgParser("program_lol").version("0.1.0").args(
...     [
...         Arg("testflag").short("t").help("This is a test flag.").flag(False),
...         Arg("testoption").short("o").help("This is a test option.").option("option"),
...         Arg("testword").help("This is a test word.").word(False),
...     ]
... )
>>> _ = parser.parse(["testword", "--testflag", "-o", "monke"])
>>> parser.get_flag("testflag")
True
>>> parser.get_option("testoption")
'monke'
>>> parser.get_word("testword")
True
>>> parser.get_flag("undeclared") is None
True
"""

from .arg import Arg, ArgKind, ArgValue
from .errors import (
    ArgDeclarationError,
    ArgKindError,
    ArgParseError,
    DuplicateArgNameError,
    InvalidArgError,
    MissingRequiredArgError,
    MissingValueError,
    ParserStateError,
    UnrecognizedArgumentError,
)
from .models import ProgramInfo
from .parser import ArgParser, ParserState
from .results import ParseResults


__all__ = [
    "Arg",
    "ArgDeclarationError",
    "ArgKind",
    "ArgKindError",
    "ArgParseError",
    "ArgParser",
    "ArgValue",
    "DuplicateArgNameError",
    "InvalidArgError",
    "MissingRequiredArgError",
    "MissingValueError",
    "ParseResults",
    "ParserState",
    "ParserStateError",
    "ProgramInfo",
    "UnrecognizedArgumentError",
]
