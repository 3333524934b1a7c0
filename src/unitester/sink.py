"""Text output sink for tester reports using Rich."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, TextIO

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style


Part = str | tuple[str, str | None]


def _render(part: Part) -> str:
    if isinstance(part, str):
        return part
    text, style = part
    if not style:
        return text
    return Style.parse(style).render(text, color_system=ColorSystem.STANDARD)


class ReportSink:
    """Line-oriented writer the tester reports through.

    Lines are written literally to the console's file: no Rich markup, no
    highlighting, no emoji codes, no wrapping, and tabs and control
    characters are kept as they are. A style given with a part is rendered
    as standard ANSI escape codes around that part only.

    The sink also holds the value-formatting mode used when values are put
    in failure details. ``boolalpha`` renders booleans as ``true``/``false``;
    use `formatting` to change it for a scope.
    """

    def __init__(self, out: TextIO | Console | None = None) -> None:
        if isinstance(out, Console):
            self.console = out
        else:
            self.console = Console(file=out, color_system="standard")
        self.boolalpha = False

    def write(self, *parts: Part) -> None:
        """Write one line assembled from plain and ``(text, style)`` parts."""
        line = "".join(_render(part) for part in parts)
        file = self.console.file
        file.write(line + "\n")
        file.flush()

    def detail(self, message: str) -> None:
        """Write an indented detail line under a status line."""
        self.write(f"  {message}")

    def format_value(self, value: Any) -> str:
        if isinstance(value, bool) and self.boolalpha:
            return "true" if value else "false"
        return str(value)

    @contextmanager
    def formatting(self, *, boolalpha: bool) -> Iterator[None]:
        """Temporarily switch the boolean formatting mode.

        The previous mode is restored on exit, including when an error
        propagates out of the block.
        """
        previous = self.boolalpha
        self.boolalpha = boolalpha
        try:
            yield
        finally:
            self.boolalpha = previous
