# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

"""Help, usage and version text.

Text is assembled as :class:`rich.text.Text` so section headings are styled on a terminal;
``.plain`` gives the same text without styling.
"""

import sys

from collections.abc import Iterable
from typing import TextIO

from rich.console import Console
from rich.text import Text

from .arg import Arg, ArgKind
from .models import ProgramInfo


# Built-in spellings, only honoured as the first token
HELP_SPELLINGS = ("-h", "--help")
VERSION_SPELLINGS = ("-v", "--version")
RESERVED_SPELLINGS = frozenset(HELP_SPELLINGS + VERSION_SPELLINGS)

BUILTIN_FLAG_LINES = (
    ("-h, --help", "Prints the help dialog"),
    ("-v, --version", "Prints the version"),
)

SECTIONS = (
    (ArgKind.FLAG, "Flags:"),
    (ArgKind.OPTION, "Options:"),
    (ArgKind.WORD, "Words:"),
)

INDENT = "    "


def arg_label(arg: Arg) -> str:
    if arg.kind is ArgKind.WORD:
        return arg.long_name
    if arg.short_name is None:
        return f"    --{arg.long_name}"
    return f"-{arg.short_name}, --{arg.long_name}"


def _rows(kind: ArgKind, args: Iterable[Arg]) -> list[tuple[str, str]]:
    rows = [(arg_label(arg), arg.help_text) for arg in args if arg.kind is kind]
    if kind is ArgKind.FLAG:
        rows = [*BUILTIN_FLAG_LINES, *rows]
    return rows


def render_version(info: ProgramInfo) -> str:
    return f"{info.name} {info.version}".rstrip()


def render_usage(info: ProgramInfo) -> Text:
    text = Text()
    text.append("Usage:", style="bold")
    text.append(f"\n{INDENT}{info.usage_line}")
    return text


def render_help(info: ProgramInfo, args: Iterable[Arg]) -> Text:
    args = list(args)

    text = Text()
    text.append(render_version(info), style="bold")
    for line in (info.author, info.copyright, info.info):
        if line:
            text.append(f"\n{line}")

    text.append("\n\n")
    text.append_text(render_usage(info))

    for kind, title in SECTIONS:
        rows = _rows(kind, args)
        if not rows:
            continue
        width = max(len(label) for label, _ in rows)

        text.append("\n\n")
        text.append(title, style="bold")
        for label, help_text in rows:
            text.append(f"\n{INDENT}")
            text.append(label, style="cyan")
            if help_text:
                text.append(" " * (width - len(label) + 2) + help_text)

    return text


def print_text(text: Text | str, *, file: TextIO | None = None) -> None:
    # Resolve the stream at call time so redirected/captured output is honoured
    console = Console(file=file or sys.stdout, highlight=False, markup=False, emoji=False, soft_wrap=True)
    console.print(text)
