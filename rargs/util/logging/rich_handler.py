# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro


from pathlib import Path
from typing import TYPE_CHECKING, override

from rich.console import Console, ConsoleRenderable, RenderableType
from rich.containers import Renderables
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text


if TYPE_CHECKING:
    import logging

    from rich.traceback import Traceback


class CustomRichHandler(RichHandler):
    """Compact rich console handler: ``[L:name] message`` with the source location on the right."""

    @override
    def __init__(
        self,
        *args,
        rich_tracebacks: bool = True,
        show_path: bool = True,
        level_prefix: str = "[",
        level_suffix: str = "] ",
        **kwargs,
    ) -> None:
        console = Console(stderr=True)

        super().__init__(*args, console=console, rich_tracebacks=rich_tracebacks, enable_link_path=False, **kwargs)

        self.show_path = show_path
        self.level_prefix = level_prefix
        self.level_suffix = level_suffix

    def get_level_style(self, record: "logging.LogRecord") -> str:
        return f"logging.level.{record.levelname.lower()}"

    @override
    def render_message(self, record: "logging.LogRecord", message: str) -> ConsoleRenderable:
        text = Text()

        text.append(self.level_prefix, style="dim")
        text.append(record.levelname[0], style=self.get_level_style(record))
        text.append(f":{record.name}", style="dim")
        text.append(self.level_suffix, style="dim")

        text.append(message)
        return text

    @override
    def render(self, *args, record: "logging.LogRecord", message_renderable: ConsoleRenderable, traceback: "Traceback | None", **kwargs) -> ConsoleRenderable:
        path = Path(record.pathname).name

        renderables = [message_renderable]
        if traceback:
            renderables.append(traceback)

        output = Table.grid(padding=(0, 1))
        output.expand = True
        output.add_column(ratio=1, style=self.get_level_style(record), overflow="fold")
        if self.show_path and path:
            output.add_column(style="log.path")

        row: list[RenderableType] = [Renderables(renderables)]
        if self.show_path and path:
            row.append(Text(f"{path}:{record.lineno}" if record.lineno else path))
        output.add_row(*row)

        return output
