import sys

import rich.console
import rich.text

isatty = sys.stdout.isatty()

console = rich.console.Console()
"""Console for the status display."""

error_console = rich.console.Console(stderr=True)
"""Console for the error report, log messages and other diagnostics. Styles are
only written when stderr itself is a terminal."""


STATUS_TEXT_FIELD_WIDTH = 10

samtid_prefix = rich.text.Text(
    f"{'samtid >>>':<{STATUS_TEXT_FIELD_WIDTH}}", style="bright_cyan"
)


def format_prefixed(s: str, style: str) -> rich.text.Text:
    return rich.text.Text.assemble(samtid_prefix, " ", (s, style))


def output_warning(s: str):
    error_console.print(
        format_prefixed(s, "bright_yellow"), highlight=False, soft_wrap=True
    )


def output_error(s: str):
    error_console.print(format_prefixed(s, "bright_red"), highlight=False, soft_wrap=True)
