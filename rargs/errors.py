# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

"""Exceptions raised while declaring arguments and parsing the command line."""


class ArgParseError(Exception):
    """Base class for every error raised by rargs."""


# MARK: Declaration
class ArgDeclarationError(ArgParseError, ValueError):
    pass


class DuplicateArgNameError(ArgDeclarationError):
    def __init__(self, name: str, msg: str | None = None) -> None:
        self.name = name
        super().__init__(msg or f"Argument '{name}' is declared more than once")


class InvalidArgError(ArgDeclarationError):
    pass


# MARK: Parsing
class MissingValueError(ArgParseError):
    def __init__(self, name: str, token: str) -> None:
        self.name = name
        self.token = token
        super().__init__(f"Argument '{token}' expects a value")


class UnrecognizedArgumentError(ArgParseError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unrecognized argument: '{token}'")


class MissingRequiredArgError(ArgParseError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Required argument '{name}' was not given")


# MARK: Usage
class ParserStateError(ArgParseError, RuntimeError):
    pass


class ArgKindError(ArgParseError, TypeError):
    pass
