"""Console rendering for tracker output."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

PASS_STYLE = "green"
FAIL_STYLE = "red"

FANCY_PASS_MARK = "✓ "
FANCY_FAIL_MARK = "✗ "
PLAIN_PASS_MARK = ". "
PLAIN_FAIL_MARK = "X "

# Control characters shown as escapes, rich would otherwise drop or expand them.
_CONTROL_ESCAPES = {code: repr(chr(code))[1:-1] for code in [*range(0x20), 0x7F]}


def escape_control(text: str) -> str:
    return text.translate(_CONTROL_ESCAPES)


def make_console(color: bool | None = None) -> Console:
    """Create a stdout console.

    Args:
        color: True forces ANSI color (standard palette), False disables it,
               None lets rich detect whether stdout is a terminal.
    """
    if color is None:
        return Console(highlight=False)
    if color:
        return Console(force_terminal=True, color_system="standard", highlight=False)
    return Console(color_system=None, highlight=False)


class ConsoleFormatter:
    """Builds pass/fail lines and summaries and writes them to a console."""

    def __init__(self, fancy: bool = False, console: Console | None = None) -> None:
        self.fancy = fancy
        self.console = console if console is not None else make_console()

    def pass_mark(self) -> Text:
        return Text(FANCY_PASS_MARK if self.fancy else PLAIN_PASS_MARK, style=PASS_STYLE)

    def fail_mark(self) -> Text:
        return Text(FANCY_FAIL_MARK if self.fancy else PLAIN_FAIL_MARK, style=FAIL_STYLE)

    def pass_line(self, test_name: str) -> Text:
        return Text.assemble(self.pass_mark(), escape_control(test_name), " passed")

    def fail_line(self, test_name: str, reason: str) -> Text:
        return Text.assemble(
            self.fail_mark(),
            escape_control(test_name),
            Text(" FAILED: ", style=FAIL_STYLE),
            escape_control(reason),
        )

    def summary_line(self, total: int, passed: int, failed: int) -> Text:
        text = Text(f"Ran {total} assertions, {passed} passed {failed} failed")
        if failed > 0:
            text.stylize(FAIL_STYLE)
        return text

    def write(self, text: Text) -> None:
        """Write one line; long lines are never re-wrapped."""
        self.console.print(text, soft_wrap=True)

    def render(self, text: Text) -> str:
        """Return text exactly as write() would emit it, without the newline."""
        with self.console.capture() as capture:
            self.console.print(text, soft_wrap=True, end="")
        return capture.get()
