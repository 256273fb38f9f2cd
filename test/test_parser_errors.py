# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

import pytest

from rargs import (
    Arg,
    ArgParseError,
    ArgParser,
    DuplicateArgNameError,
    InvalidArgError,
    MissingRequiredArgError,
    MissingValueError,
    ParserState,
    UnrecognizedArgumentError,
)


def make_parser() -> ArgParser:
    return ArgParser("prog").args(
        [
            Arg("test").short("t").flag(False),
            Arg("monke").short("m").option("oo"),
            Arg("target").word(""),
        ]
    )


@pytest.mark.parser
@pytest.mark.parser_errors
class TestDeclarationErrors:
    def test_duplicate_name(self):
        parser = ArgParser("prog").args([Arg("test").flag()])
        with pytest.raises(DuplicateArgNameError) as exc_info:
            parser.args([Arg("test").option()])
        assert exc_info.value.name == "test"

    def test_duplicate_name_in_one_call(self):
        with pytest.raises(DuplicateArgNameError):
            ArgParser("prog").args([Arg("test").flag(), Arg("test").flag()])

    def test_duplicate_short(self):
        with pytest.raises(DuplicateArgNameError, match="already taken by 'test'"):
            ArgParser("prog").args([Arg("test").short("t").flag(), Arg("toast").short("t").flag()])

    def test_duplicate_long(self):
        with pytest.raises(DuplicateArgNameError):
            ArgParser("prog").args([Arg("test").flag(), Arg("other").long("test").option()])

    @pytest.mark.parametrize(
        "arg",
        [
            Arg("helper").short("h").flag(),
            Arg("help").flag(),
            Arg("verbose").short("v").flag(),
            Arg("ver").long("version").option(),
        ],
    )
    def test_reserved_spellings(self, arg):
        with pytest.raises(DuplicateArgNameError, match="reserved"):
            ArgParser("prog").args([arg])

    def test_word_named_help_is_allowed(self):
        parser = ArgParser("prog").args([Arg("help").word(False)]).parse(["help"])
        assert parser.get_word("help") is True

    def test_arg_without_kind(self):
        with pytest.raises(InvalidArgError):
            ArgParser("prog").args([Arg("test").short("t")])

    def test_not_an_arg(self):
        with pytest.raises(InvalidArgError):
            ArgParser("prog").args(["test"])

    def test_blank_program_name(self):
        with pytest.raises(ValueError):
            ArgParser("   ")


@pytest.mark.parser
@pytest.mark.parser_errors
class TestParseErrors:
    def test_missing_value_at_end(self):
        parser = make_parser()
        with pytest.raises(MissingValueError) as exc_info:
            parser.parse(["-m"])
        assert exc_info.value.name == "monke"
        assert exc_info.value.token == "-m"

    def test_missing_value_before_declared_spelling(self):
        with pytest.raises(MissingValueError):
            make_parser().parse(["--monke", "-t"])

    def test_missing_value_for_string_word(self):
        with pytest.raises(MissingValueError):
            make_parser().parse(["target"])

    def test_missing_value_in_cluster(self):
        with pytest.raises(MissingValueError):
            make_parser().parse(["-tm"])

    @pytest.mark.parametrize("token", ["--bogus", "-x", "bogus", "-tx", "--", "-"])
    def test_unrecognized(self, token):
        with pytest.raises(UnrecognizedArgumentError) as exc_info:
            make_parser().parse(["-t", token])
        assert exc_info.value.token == token

    @pytest.mark.parametrize("token", ["-h", "--help", "-v", "--version"])
    def test_builtins_only_honoured_first(self, token):
        with pytest.raises(UnrecognizedArgumentError):
            make_parser().parse(["-t", token])

    def test_missing_required(self):
        parser = ArgParser("prog").args([Arg("monke").short("m").option("oo").required()])
        with pytest.raises(MissingRequiredArgError) as exc_info:
            parser.parse([])
        assert exc_info.value.name == "monke"

    def test_required_satisfied(self):
        parser = ArgParser("prog").args([Arg("monke").short("m").option("oo").required()])
        assert parser.parse(["-m", "oo2"]).get_option("monke") == "oo2"

    def test_failure_leaves_no_results(self):
        parser = make_parser()
        with pytest.raises(ArgParseError):
            parser.parse(["-t", "--bogus"])
        assert parser.state is ParserState.UNPARSED
        assert parser.get_flag("test") is False


@pytest.mark.parser
@pytest.mark.parser_errors
class TestExitPaths:
    def test_require_args_prints_help_and_exits(self, capsys):
        parser = make_parser().version("1.0").require_args(True)
        with pytest.raises(SystemExit) as exc_info:
            parser.parse([])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert out.startswith("prog 1.0")
        assert "Usage:" in out
        assert parser.state is ParserState.UNPARSED

    def test_require_args_with_args_parses(self):
        parser = make_parser().require_args(True).parse(["-t"])
        assert parser.get_flag("test") is True

    @pytest.mark.parametrize("token", ["-h", "--help"])
    def test_help(self, capsys, token):
        with pytest.raises(SystemExit) as exc_info:
            make_parser().parse([token, "--bogus"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "Flags:" in out
        assert "-m, --monke" in out

    @pytest.mark.parametrize("token", ["-v", "--version"])
    def test_version(self, capsys, token):
        with pytest.raises(SystemExit) as exc_info:
            make_parser().version("0.1.0").parse([token])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out == "prog 0.1.0\n"

    def test_exit_on_error(self, capsys):
        parser = make_parser().exit_on_error()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse(["--bogus"])
        assert exc_info.value.code == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "prog: error: Unrecognized argument: '--bogus'" in captured.err
        assert "prog [flags] [options]" in captured.err

    def test_exit_on_error_missing_value(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            make_parser().exit_on_error().parse(["-m"])
        assert exc_info.value.code == 2
        assert "expects a value" in capsys.readouterr().err
