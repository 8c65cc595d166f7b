from collections.abc import Iterable
from dataclasses import dataclass
import re

import rich.console
import rich.text

from samtid.core.common_types import Entry
from samtid.output.output import error_console as default_error_console


@dataclass
class HighlightConfig:
    pattern: str | re.Pattern[str]
    style: str


warning_hl_config = HighlightConfig(
    pattern=re.compile(r"warn\w*:?", re.IGNORECASE),
    style="black on yellow",
)

error_hl_config = HighlightConfig(
    pattern=re.compile(r"error\w*:?|ERR!", re.IGNORECASE),
    style="on red",
)

default_highlight_config: list[HighlightConfig] = [warning_hl_config, error_hl_config]

BANNER_TITLE = " COMMAND ERRORS "
BANNER_RULE = "-" * 15
CLOSING_RULE = "-" * 31


def highlight_log(
    message: str, config: list[HighlightConfig] | None = None
) -> rich.text.Text:
    """
    Highlights the message according to the regexes and styles. The styles are only
    visible when the text is printed to a terminal.
    """
    text = rich.text.Text(message)
    for c in config or []:
        text.highlight_regex(c.pattern, c.style)
    return text


def format_failure(entry: Entry) -> rich.text.Text:
    assert entry.status is not None
    section = rich.text.Text.assemble(
        (entry.command, "bold underline"),
        " (Exit code ",
        (str(entry.status.rc), "bold"),
        ")",
    )
    if entry.status.stderr:
        section.append(":\n\n")
        section.append_text(highlight_log(entry.status.stderr, default_highlight_config))
    return section


def report_errors(
    entries: Iterable[Entry], console: rich.console.Console | None = None
) -> bool:
    """
    Print a section for every failed command, with its exit code and what it wrote to
    stderr. Prints nothing if no command failed.

    Returns True if anything was reported.
    """
    failed = [e for e in entries if e.state == "failed"]
    if not failed:
        return False

    if console is None:
        console = default_error_console

    console.print()
    console.print(
        rich.text.Text.assemble(
            (BANNER_TITLE, "bold white on red"), (BANNER_RULE, "bold red")
        )
    )
    for entry in failed:
        console.print()
        console.print(format_failure(entry), highlight=False, soft_wrap=True)
    console.print()
    console.print(CLOSING_RULE, style="red", highlight=False)
    return True
