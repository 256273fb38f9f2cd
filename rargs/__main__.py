# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

"""Example program built on rargs.

Declares a handful of arguments, configures logging from the command line and prints
what was parsed. Run ``python -m rargs --help`` to see the generated help.
"""

import sys

from collections.abc import Sequence

import pydantic

from . import Arg, ArgParser
from .help import print_text
from .parser import ERROR_EXIT_STATUS
from .util.logging import LoggingConfig, LoggingManager, getLogger


VERSION = "0.1.0"


def build_parser() -> ArgParser:
    return (
        ArgParser("rargs-demo")
        .author("Rui Pinheiro")
        .version(VERSION)
        .copyright("Copyright (C) 2025 Rui Pinheiro")
        .info("Example program for the rargs argument parser")
        .exit_on_error()
        .args(
            [
                Arg("testflag").short("t").help("This is a test flag.").flag(False),
                Arg("testoption").short("o").help("This is a test option.").option("option"),
                Arg("testword").help("This is a test word.").word(False),
                Arg("log-level").short("l").help("Console verbosity. Can be numeric or one of CRITICAL, ERROR, WARNING, INFO, DEBUG, OFF").option("WARNING"),
                Arg("rich").short("r").help("Use rich for console output").flag(False),
            ]
        )
    )


def logging_config(parser: ArgParser) -> LoggingConfig:
    level = parser.get_option("log-level")
    try:
        return LoggingConfig.model_validate({"level": level, "rich": parser.get_flag("rich")})
    except pydantic.ValidationError:
        print_text(f"{parser.program_info.name}: error: Invalid log level {level!r}", file=sys.stderr)
        print_text(parser.format_usage(), file=sys.stderr)
        sys.exit(ERROR_EXIT_STATUS)


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser().parse(argv)
    config = logging_config(parser)

    manager = LoggingManager()
    if not manager.initialized:
        manager.initialize(config)
    log = getLogger("demo")
    log.info("Parsed arguments for %s", parser.format_version())

    results = parser.results
    for kind, values in (("flag", results.flags), ("option", results.options), ("word", results.words)):
        for name, value in values.items():
            print_text(f"{kind} {name} = {value!r}")


if __name__ == "__main__":
    main()
